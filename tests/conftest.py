from datetime import date
import pytest
from registry import RegistrationLedger
from scheduler import SchedulingLedger
from schemas.registry import CourseType as RegistryCourseType
from schemas.registry import Faculty, Semester, StudentStatus
from schemas.timetable import (
    Classroom,
    Course,
    CourseType,
    DayOfWeek,
    Lesson,
    Professor,
    TimeSlot,
)


def make_lesson(
    lesson_id,
    professor_id=1,
    classroom_number="101",
    day_of_week=DayOfWeek.MONDAY,
    time_slot=TimeSlot.SLOT_08_30,
    course_id=100,
):
    return Lesson(
        id=lesson_id,
        course_id=course_id,
        professor_id=professor_id,
        classroom_number=classroom_number,
        day_of_week=day_of_week,
        time_slot=time_slot,
    )


def course_payload(**overrides):
    data = {
        "name": "JavaScript Basics",
        "type": RegistryCourseType.MANDATORY,
        "credits": 5,
        "semester": Semester.FIRST,
        "faculty": Faculty.COMPUTER_SCIENCE,
        "max_students": 30,
    }
    data.update(overrides)
    return data


def student_payload(**overrides):
    data = {
        "full_name": "Oleksandr Petrenko",
        "faculty": Faculty.COMPUTER_SCIENCE,
        "year": 1,
        "status": StudentStatus.ACTIVE,
        "enrollment_date": date(2024, 9, 1),
        "group_number": "CS-101",
    }
    data.update(overrides)
    return data


@pytest.fixture
def timetable():
    """Two professors, three classrooms and one course of each type."""
    ledger = SchedulingLedger()
    ledger.add_professor(Professor(id=1, name="Ivanenko", department="IT"))
    ledger.add_professor(Professor(id=2, name="Shevchenko", department="Math"))
    ledger.add_classroom(Classroom(number="101", capacity=30, has_projector=True))
    ledger.add_classroom(Classroom(number="102", capacity=20, has_projector=False))
    ledger.add_classroom(Classroom(number="103", capacity=12))
    ledger.add_course(Course(id=100, name="TypeScript Basics", type=CourseType.LECTURE))
    ledger.add_course(Course(id=200, name="Algebra Seminar", type=CourseType.SEMINAR))
    ledger.add_course(Course(id=300, name="Networks Lab", type=CourseType.LAB))
    ledger.add_course(Course(id=400, name="SQL Practice", type=CourseType.PRACTICE))
    return ledger


@pytest.fixture
def registry():
    return RegistrationLedger()
