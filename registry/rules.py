from typing import Optional
from core.state import RegistryState
from exceptions.custom_errors import (
    CourseFullError,
    FacultyMismatchError,
    NotRegisteredError,
)
from schemas.registry import Course, CourseType, Student, StudentStatus

"""
This module contains the guard clauses run by the registration ledger before it mutates its state.
Each guard raises a typed error from exceptions.custom_errors when its rule is broken.
"""


def is_registered(state: RegistryState, student_id: int, course_id: int) -> bool:
    return any(r.key == (student_id, course_id) for r in state.registrations)


def count_registrations(state: RegistryState, course_id: int) -> int:
    return sum(1 for r in state.registrations if r.course_id == course_id)


def check_faculty_match(state: RegistryState, student: Student, course: Course):
    """Mandatory courses are only open to students of the course's faculty."""
    if course.type == CourseType.MANDATORY and student.faculty != course.faculty:
        raise FacultyMismatchError(
            f"Student {student.full_name} cannot register for a mandatory course of another faculty."
        )


def check_course_capacity(state: RegistryState, student: Student, course: Course):
    """The course must still have room below its max_students limit."""
    if count_registrations(state, course.id) >= course.max_students:
        raise CourseFullError(f'Course "{course.name}" is full. Registration is not possible.')


def check_registered(state: RegistryState, student_id: int, course_id: int):
    if not is_registered(state, student_id, course_id):
        raise NotRegisteredError(
            "Cannot set a grade: the student is not registered for this course."
        )


def reinstatement_advisory(student: Student, new_status: StudentStatus) -> Optional[str]:
    """
    Return a warning for an Expelled -> Active transition, None otherwise.

    The transition is still allowed; the advisory only reminds the caller that
    reinstating an expelled student needs the rector's order.
    """
    if student.status == StudentStatus.EXPELLED and new_status == StudentStatus.ACTIVE:
        return f"Reinstating expelled student {student.full_name} requires the rector's order."
    return None
