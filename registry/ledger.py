import logging
from datetime import datetime
from typing import Any, List, Mapping, Optional, Union
from core.constraint_manager import ConstraintManager
from core.state import RegistryState
from exceptions.custom_errors import NotFoundError
from schemas.registry import (
    Course,
    CourseCreate,
    Faculty,
    Grade,
    GradeRecord,
    Registration,
    Semester,
    Student,
    StudentCreate,
    StudentStatus,
)
from utils.constants import DEFAULT_SEMESTER
from .extractor import calculate_average_grade, get_top_students_by_faculty
from .rules import (
    check_course_capacity,
    check_faculty_match,
    check_registered,
    is_registered,
    reinstatement_advisory,
)

logger = logging.getLogger(__name__)


class RegistrationLedger:
    """
    Students, courses, registrations and grade records of one university.

    Rule violations raise the typed errors from `exceptions.custom_errors`;
    callers are expected to catch them at each call site.
    """

    def __init__(self, state: Optional[RegistryState] = None):
        self.state = state if state is not None else RegistryState()

    # == Lookups ==
    def find_student(self, student_id: int) -> Optional[Student]:
        return next((s for s in self.state.students if s.id == student_id), None)

    def find_course(self, course_id: int) -> Optional[Course]:
        return next((c for c in self.state.courses if c.id == course_id), None)

    # == Creation ==
    def add_course(self, course_data: Union[CourseCreate, Mapping[str, Any]]) -> Course:
        data = CourseCreate.model_validate(course_data)
        course = Course(id=self.state.next_course_id, **data.model_dump())
        self.state.next_course_id += 1
        self.state.courses.append(course)
        logger.info(f'[Course] Course "{course.name}" added with ID:{course.id}.')
        return course

    def enroll_student(self, student_data: Union[StudentCreate, Mapping[str, Any]]) -> Student:
        data = StudentCreate.model_validate(student_data)
        student = Student(id=self.state.next_student_id, **data.model_dump())
        self.state.next_student_id += 1
        self.state.students.append(student)
        logger.info(
            f"[Enroll] Student {student.full_name} enrolled at faculty {student.faculty.value}."
        )
        return student

    # == Mutations ==
    def register_for_course(self, student_id: int, course_id: int) -> bool:
        """
        Register a student for a course.

        Guards run in order: unknown ids, faculty match for mandatory courses,
        course capacity. A repeated registration of the same pair is reported
        and ignored.

        Returns:
            bool: True if a new registration was stored, False if it already existed.

        Raises:
            NotFoundError: If the student or the course does not exist.
            FacultyMismatchError: If the course is mandatory for another faculty.
            CourseFullError: If the course has reached max_students.
        """
        student = self.find_student(student_id)
        course = self.find_course(course_id)
        if student is None or course is None:
            raise NotFoundError("Student or course not found.")

        manager = ConstraintManager(self.state)
        manager.add_rule(check_faculty_match)
        manager.add_rule(check_course_capacity)
        manager.apply_all(student, course)

        if is_registered(self.state, student_id, course_id):
            logger.info(f"Student {student.full_name} is already registered for this course.")
            return False

        self.state.registrations.append(Registration(student_id=student_id, course_id=course_id))
        logger.info(f'[Register] Student {student.full_name} registered for "{course.name}".')
        return True

    def set_grade(self, student_id: int, course_id: int, grade: Union[Grade, int]) -> GradeRecord:
        """
        Record a grade for a registered (student, course) pair.

        The record takes the course's semester; if the course cannot be found
        the default semester from the constants is used instead.

        Raises:
            ValueError: If the grade is not one of 2, 3, 4 or 5.
            NotRegisteredError: If the student is not registered for the course.
        """
        grade = Grade(grade)
        check_registered(self.state, student_id, course_id)

        course = self.find_course(course_id)
        record = GradeRecord(
            student_id=student_id,
            course_id=course_id,
            grade=grade,
            date=datetime.now(),
            semester=course.semester if course else Semester(DEFAULT_SEMESTER),
        )
        self.state.grades.append(record)
        logger.info(
            f"[Grade] Grade {int(grade)} set for student ID:{student_id} on course ID:{course_id}."
        )
        return record

    def update_student_status(self, student_id: int, new_status: StudentStatus) -> Optional[str]:
        """
        Change a student's status. Every transition is allowed.

        Returns:
            Optional[str]: An advisory when an expelled student is reinstated, else None.

        Raises:
            NotFoundError: If the student does not exist.
        """
        student = self.find_student(student_id)
        if student is None:
            raise NotFoundError("Student not found.")

        new_status = StudentStatus(new_status)
        advisory = reinstatement_advisory(student, new_status)
        if advisory:
            logger.warning(f"[Warning] {advisory}")

        old_status = student.status
        student.status = new_status
        logger.info(
            f"[Status] Student {student.full_name} status changed from {old_status.value} to {new_status.value}."
        )
        return advisory

    # == Queries ==
    def get_students_by_faculty(self, faculty: Faculty) -> List[Student]:
        return [s for s in self.state.students if s.faculty == faculty]

    def get_student_grades(self, student_id: int) -> List[GradeRecord]:
        return [g for g in self.state.grades if g.student_id == student_id]

    def get_available_courses(self, faculty: Faculty, semester: Semester) -> List[Course]:
        return [
            c for c in self.state.courses if c.faculty == faculty and c.semester == semester
        ]

    def calculate_average_grade(self, student_id: int) -> float:
        return calculate_average_grade(self.state, student_id)

    def get_top_students_by_faculty(self, faculty: Faculty) -> List[Student]:
        return get_top_students_by_faculty(self.state, faculty)
