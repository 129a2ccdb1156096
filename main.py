from datetime import date
import logging
from exceptions.custom_errors import RegistryError, error_kind
from registry import RegistrationLedger
from registry.extractor import faculty_grade_summary
from scheduler import SchedulingLedger
from scheduler.extractor import schedule_frame, utilization_report
from schemas.registry import CourseType as RegistryCourseType
from schemas.registry import Faculty, Grade, Semester, StudentStatus
from schemas.timetable import (
    Classroom,
    Course,
    CourseType,
    DayOfWeek,
    Lesson,
    Professor,
    TimeSlot,
)
from utils.logger import setup_logging

logger = logging.getLogger(__name__)


def run_timetable_demo() -> SchedulingLedger:
    """Seed a small timetable, book one lesson, move it and cancel it."""
    ledger = SchedulingLedger()

    ledger.add_professor(Professor(id=1, name="Ivanenko", department="IT"))
    ledger.add_classroom(Classroom(number="101", capacity=30, has_projector=True))
    ledger.add_classroom(Classroom(number="102", capacity=20, has_projector=False))
    ledger.add_course(Course(id=100, name="TypeScript Basics", type=CourseType.LECTURE))

    ledger.add_lesson(
        Lesson(
            id=1,
            course_id=100,
            professor_id=1,
            classroom_number="101",
            day_of_week=DayOfWeek.MONDAY,
            time_slot=TimeSlot.SLOT_08_30,
        )
    )

    free = ledger.find_available_classrooms(TimeSlot.SLOT_08_30, DayOfWeek.MONDAY)
    logger.info(f"Free classrooms: {free}")
    logger.info(f"Utilization of 101: {ledger.get_classroom_utilization('101')}%")

    ledger.reassign_classroom(1, "102")
    logger.info(f"Most popular lesson type: {ledger.get_most_popular_course_type().value}")
    logger.info("Schedule:\n%s", schedule_frame(ledger.state).to_string(index=False))
    logger.info("Utilization:\n%s", utilization_report(ledger.state).to_string(index=False))

    ledger.cancel_lesson(1)
    return ledger


def _attempt(action, *args) -> bool:
    """Run a ledger call, log a registry error by kind and keep going."""
    try:
        action(*args)
        return True
    except RegistryError as e:
        logger.error(f"[{error_kind(e)}] {e}")
        return False


def run_registry_demo() -> RegistrationLedger:
    """Enroll two students, register and grade them, then list the honor roll."""
    ledger = RegistrationLedger()

    js_course = ledger.add_course(
        {
            "name": "JavaScript Basics",
            "type": RegistryCourseType.MANDATORY,
            "credits": 5,
            "semester": Semester.FIRST,
            "faculty": Faculty.COMPUTER_SCIENCE,
            "max_students": 30,
        }
    )
    econ_course = ledger.add_course(
        {
            "name": "Microeconomics",
            "type": RegistryCourseType.MANDATORY,
            "credits": 4,
            "semester": Semester.FIRST,
            "faculty": Faculty.ECONOMICS,
            "max_students": 50,
        }
    )

    student1 = ledger.enroll_student(
        {
            "full_name": "Oleksandr Petrenko",
            "faculty": Faculty.COMPUTER_SCIENCE,
            "year": 1,
            "status": StudentStatus.ACTIVE,
            "enrollment_date": date.today(),
            "group_number": "CS-101",
        }
    )
    student2 = ledger.enroll_student(
        {
            "full_name": "Mariia Ivanenko",
            "faculty": Faculty.COMPUTER_SCIENCE,
            "year": 1,
            "status": StudentStatus.ACTIVE,
            "enrollment_date": date.today(),
            "group_number": "CS-101",
        }
    )

    logger.info("--- Registration ---")
    _attempt(ledger.register_for_course, student1.id, js_course.id)
    _attempt(ledger.register_for_course, student2.id, js_course.id)
    # Mandatory course of another faculty
    _attempt(ledger.register_for_course, student1.id, econ_course.id)

    logger.info("--- Grading ---")
    _attempt(ledger.set_grade, student1.id, js_course.id, Grade.EXCELLENT)
    _attempt(ledger.set_grade, student2.id, js_course.id, Grade.GOOD)
    # Not registered
    _attempt(ledger.set_grade, student1.id, econ_course.id, Grade.SATISFACTORY)

    logger.info("--- Status ---")
    _attempt(ledger.update_student_status, student1.id, StudentStatus.ACADEMIC_LEAVE)

    logger.info("--- Statistics ---")
    logger.info(
        f"Average grade of {student1.full_name}: {ledger.calculate_average_grade(student1.id)}"
    )
    _attempt(ledger.update_student_status, student1.id, StudentStatus.ACTIVE)

    ts_course = ledger.add_course(
        {
            "name": "TypeScript Advanced",
            "type": RegistryCourseType.OPTIONAL,
            "credits": 3,
            "semester": Semester.FIRST,
            "faculty": Faculty.COMPUTER_SCIENCE,
            "max_students": 20,
        }
    )
    _attempt(ledger.register_for_course, student1.id, ts_course.id)
    _attempt(ledger.set_grade, student1.id, ts_course.id, Grade.GOOD)
    logger.info(
        f"New average grade of {student1.full_name}: {ledger.calculate_average_grade(student1.id)}"
    )

    logger.info("--- Honor roll: Computer_Science ---")
    for s in ledger.get_top_students_by_faculty(Faculty.COMPUTER_SCIENCE):
        logger.info(f"{s.full_name} (ID: {s.id}) - honor roll")
    logger.info(
        "Summary:\n%s",
        faculty_grade_summary(ledger.state, Faculty.COMPUTER_SCIENCE).to_string(index=False),
    )
    return ledger


def main():
    setup_logging()
    logger.info("=== Timetable ledger ===")
    run_timetable_demo()
    logger.info("=== Registration ledger ===")
    run_registry_demo()


if __name__ == "__main__":
    main()
