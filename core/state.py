from dataclasses import dataclass, field
from typing import List
from schemas.timetable import Classroom, Lesson, Professor
from schemas.timetable import Course as TimetableCourse
from schemas.registry import GradeRecord, Registration, Student
from schemas.registry import Course as RegistryCourse


@dataclass
class ScheduleState:
    """
    A dataclass to hold all the state owned by one scheduling ledger.
    """

    professors: List[Professor] = field(default_factory=list)
    """All professors, in insertion order."""
    classrooms: List[Classroom] = field(default_factory=list)
    """All classrooms, in insertion order. Drives the free-classroom lookup."""
    courses: List[TimetableCourse] = field(default_factory=list)
    """Courses that lessons refer to by `course_id`."""
    schedule: List[Lesson] = field(default_factory=list)
    """Scheduled lessons. Never holds two lessons booking the same professor
    or classroom at the same (day, slot).
    """


@dataclass
class RegistryState:
    """
    A dataclass to hold all the state owned by one registration ledger.
    """

    students: List[Student] = field(default_factory=list)
    """Enrolled students, in id order."""
    courses: List[RegistryCourse] = field(default_factory=list)
    """Courses offered, in id order."""
    registrations: List[Registration] = field(default_factory=list)
    """Unique (student_id, course_id) pairs."""
    grades: List[GradeRecord] = field(default_factory=list)
    """Grade records, each for a registered pair."""

    next_student_id: int = 1
    """The id given to the next enrolled student."""
    next_course_id: int = 1
    """The id given to the next added course."""
