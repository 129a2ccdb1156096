from enum import Enum
from pydantic import BaseModel, ConfigDict, Field


class DayOfWeek(str, Enum):
    """Teaching days of the week."""
    MONDAY = "Monday"
    TUESDAY = "Tuesday"
    WEDNESDAY = "Wednesday"
    THURSDAY = "Thursday"
    FRIDAY = "Friday"


class TimeSlot(str, Enum):
    """The five fixed teaching periods of a day."""
    SLOT_08_30 = "8:30-10:00"
    SLOT_10_15 = "10:15-11:45"
    SLOT_12_15 = "12:15-13:45"
    SLOT_14_00 = "14:00-15:30"
    SLOT_15_45 = "15:45-17:15"


# Declaration order matters: it drives tie-breaks in the course type tally.
class CourseType(str, Enum):
    LECTURE = "Lecture"
    SEMINAR = "Seminar"
    LAB = "Lab"
    PRACTICE = "Practice"


class ConflictType(str, Enum):
    PROFESSOR = "ProfessorConflict"
    CLASSROOM = "ClassroomConflict"


class Professor(BaseModel):
    id: int
    name: str
    department: str


class Classroom(BaseModel):
    number: str
    capacity: int = Field(ge=0)
    has_projector: bool = False


class Course(BaseModel):
    id: int
    name: str
    type: CourseType


class Lesson(BaseModel):
    """
    A course taught by a professor in a classroom at a (day, slot).

    Only `classroom_number` changes after the lesson is scheduled, via
    classroom reassignment.
    """
    model_config = ConfigDict(validate_assignment=True)

    id: int
    course_id: int
    professor_id: int
    classroom_number: str
    day_of_week: DayOfWeek
    time_slot: TimeSlot


class ScheduleConflict(BaseModel):
    type: ConflictType
    lesson_details: Lesson
    """The already scheduled lesson that clashes with the candidate."""
    message: str = ""
    """Why the rule rejected the candidate."""
