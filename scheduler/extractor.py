import pandas as pd
import logging
from core.state import ScheduleState
from schemas.timetable import CourseType
from utils.constants import DEFAULT_COURSE_TYPE, TOTAL_WEEKLY_SLOTS
from utils.stats_utils import percentage

logger = logging.getLogger(__name__)


def count_classroom_lessons(state: ScheduleState, classroom_number: str) -> int:
    return sum(1 for l in state.schedule if l.classroom_number == classroom_number)


def get_classroom_utilization(state: ScheduleState, classroom_number: str) -> int:
    """Lessons held in the classroom as a percentage of the 25 weekly slots."""
    used = count_classroom_lessons(state, classroom_number)
    return percentage(used, TOTAL_WEEKLY_SLOTS)


def get_most_popular_course_type(state: ScheduleState) -> CourseType:
    """
    Return the course type with the most scheduled lessons.

    Types are scanned in declaration order and only a strictly higher count
    replaces the current pick, so ties go to the earlier type and an empty
    schedule yields the default type. Lessons whose course is unknown are
    skipped.
    """
    counts = {t: 0 for t in CourseType}
    course_types = {c.id: c.type for c in state.courses}

    for lesson in state.schedule:
        course_type = course_types.get(lesson.course_id)
        if course_type is not None:
            counts[course_type] += 1

    max_type = CourseType(DEFAULT_COURSE_TYPE)
    max_count = 0
    for course_type, count in counts.items():
        if count > max_count:
            max_count = count
            max_type = course_type
    return max_type


def schedule_frame(state: ScheduleState) -> pd.DataFrame:
    """
    Flatten the schedule into one row per lesson, with course and professor
    names resolved. Unknown ids are shown as None.
    """
    columns = [
        "lesson_id",
        "day_of_week",
        "time_slot",
        "classroom",
        "course",
        "course_type",
        "professor",
    ]
    courses = {c.id: c for c in state.courses}
    professors = {p.id: p for p in state.professors}

    rows = []
    for lesson in state.schedule:
        course = courses.get(lesson.course_id)
        professor = professors.get(lesson.professor_id)
        rows.append(
            {
                "lesson_id": lesson.id,
                "day_of_week": lesson.day_of_week.value,
                "time_slot": lesson.time_slot.value,
                "classroom": lesson.classroom_number,
                "course": course.name if course else None,
                "course_type": course.type.value if course else None,
                "professor": professor.name if professor else None,
            }
        )
    return pd.DataFrame(rows, columns=columns)


def utilization_report(state: ScheduleState) -> pd.DataFrame:
    """One row per classroom with its lesson count and utilization percent."""
    rows = [
        {
            "classroom": c.number,
            "capacity": c.capacity,
            "has_projector": c.has_projector,
            "lessons": count_classroom_lessons(state, c.number),
            "utilization_pct": get_classroom_utilization(state, c.number),
        }
        for c in state.classrooms
    ]
    df = pd.DataFrame(
        rows,
        columns=["classroom", "capacity", "has_projector", "lessons", "utilization_pct"],
    )
    logger.debug("Utilization report built for %d classrooms", len(df))
    return df
