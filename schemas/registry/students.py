from pydantic import BaseModel, ConfigDict, Field
from datetime import date
import datetime as dt
from .enums import CourseType, Faculty, Grade, Semester, StudentStatus


# Define data models
class StudentCreate(BaseModel):
    model_config = ConfigDict(extra="forbid")

    full_name: str
    faculty: Faculty
    year: int = Field(ge=1)
    status: StudentStatus = StudentStatus.ACTIVE
    enrollment_date: date = Field(default_factory=date.today)
    group_number: str


class Student(StudentCreate):
    model_config = ConfigDict(validate_assignment=True)

    id: int


class CourseCreate(BaseModel):
    model_config = ConfigDict(extra="forbid")

    name: str
    type: CourseType
    credits: int = Field(ge=0)
    semester: Semester
    faculty: Faculty
    max_students: int = Field(ge=0)


class Course(CourseCreate):
    id: int


class Registration(BaseModel):
    student_id: int
    course_id: int

    @property
    def key(self) -> tuple[int, int]:
        return (self.student_id, self.course_id)


class GradeRecord(BaseModel):
    student_id: int
    course_id: int
    grade: Grade
    date: dt.datetime
    semester: Semester
