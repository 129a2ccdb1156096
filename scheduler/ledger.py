import logging
from typing import List, Optional
from core.hard_rules import HardRule, define_hard_rules
from core.state import ScheduleState
from schemas.timetable import (
    Classroom,
    ConflictType,
    Course,
    CourseType,
    DayOfWeek,
    Lesson,
    Professor,
    ScheduleConflict,
    TimeSlot,
)
from .extractor import get_classroom_utilization, get_most_popular_course_type

logger = logging.getLogger(__name__)


def find_conflict(
    schedule: List[Lesson],
    candidate: Lesson,
    rules: dict[str, HardRule],
    exclude: Optional[Lesson] = None,
) -> Optional[ScheduleConflict]:
    """
    Check `candidate` against every rule in order and return the first clash.

    Each rule scans the whole schedule before the next rule is tried, so an
    earlier rule wins even when a later rule would clash with an earlier lesson.

    Args:
        schedule (List[Lesson]): Lessons already scheduled.
        candidate (Lesson): The lesson being placed.
        rules (dict[str, HardRule]): Rules to check, in reporting order.
        exclude (Optional[Lesson]): The scheduled lesson being moved. Only this
            object is skipped, so another lesson sharing its id still clashes.

    Returns:
        Optional[ScheduleConflict]: The conflict with the clashing lesson, or None.
    """
    for rule in rules.values():
        for existing in schedule:
            if existing is exclude:
                continue
            if rule.clashes(existing, candidate):
                return ScheduleConflict(
                    type=rule.type, lesson_details=existing, message=rule.message
                )
    return None


class SchedulingLedger:
    """
    Professors, classrooms, courses and the weekly lesson schedule.

    Failures are reported through return values: `add_lesson` and
    `reassign_classroom` return False and leave the schedule unchanged.
    """

    def __init__(self, state: Optional[ScheduleState] = None):
        self.state = state if state is not None else ScheduleState()
        self.hard_rules = define_hard_rules()

    # == Seed data ==
    def add_professor(self, professor: Professor) -> None:
        self.state.professors.append(professor)
        logger.info(f"Professor {professor.name} added.")

    def add_classroom(self, classroom: Classroom) -> None:
        self.state.classrooms.append(classroom)
        logger.info(f"Classroom {classroom.number} added.")

    def add_course(self, course: Course) -> None:
        self.state.courses.append(course)
        logger.info(f"Course {course.name} added.")

    # == Lessons ==
    def validate_lesson(self, lesson: Lesson) -> Optional[ScheduleConflict]:
        """Return the first professor conflict, else the first classroom conflict, else None."""
        return find_conflict(self.state.schedule, lesson, self.hard_rules)

    def add_lesson(self, lesson: Lesson) -> bool:
        conflict = self.validate_lesson(lesson)
        if conflict is not None:
            logger.error(
                f"Conflict: {conflict.type.value} with lesson {conflict.lesson_details.id}. "
                f"{conflict.message}"
            )
            return False
        self.state.schedule.append(lesson)
        logger.info(f"Lesson {lesson.id} added successfully.")
        return True

    def find_lesson(self, lesson_id: int) -> Optional[Lesson]:
        return next((l for l in self.state.schedule if l.id == lesson_id), None)

    def reassign_classroom(self, lesson_id: int, new_classroom_number: str) -> bool:
        """
        Move a lesson to another classroom at the same (day, slot).

        Returns False when the lesson is unknown or the new classroom is taken
        by another lesson; the lesson itself never counts as a clash.
        """
        lesson = self.find_lesson(lesson_id)
        if lesson is None:
            return False

        moved = lesson.model_copy(update={"classroom_number": new_classroom_number})
        classroom_rules = {
            name: rule
            for name, rule in self.hard_rules.items()
            if rule.type == ConflictType.CLASSROOM
        }
        conflict = find_conflict(
            self.state.schedule, moved, classroom_rules, exclude=lesson
        )
        if conflict is not None:
            logger.error(f"Classroom {new_classroom_number}: {conflict.message}")
            return False

        lesson.classroom_number = new_classroom_number
        logger.info(f"Lesson {lesson_id} moved to {new_classroom_number}.")
        return True

    def cancel_lesson(self, lesson_id: int) -> None:
        initial_length = len(self.state.schedule)
        self.state.schedule = [l for l in self.state.schedule if l.id != lesson_id]
        if len(self.state.schedule) < initial_length:
            logger.info(f"Lesson {lesson_id} cancelled.")

    # == Queries ==
    def find_available_classrooms(
        self, time_slot: TimeSlot, day_of_week: DayOfWeek
    ) -> List[str]:
        occupied = {
            l.classroom_number
            for l in self.state.schedule
            if l.day_of_week == day_of_week and l.time_slot == time_slot
        }
        return [c.number for c in self.state.classrooms if c.number not in occupied]

    def get_professor_schedule(self, professor_id: int) -> List[Lesson]:
        return [l for l in self.state.schedule if l.professor_id == professor_id]

    def get_classroom_utilization(self, classroom_number: str) -> int:
        return get_classroom_utilization(self.state, classroom_number)

    def get_most_popular_course_type(self) -> CourseType:
        return get_most_popular_course_type(self.state)
