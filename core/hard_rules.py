from dataclasses import dataclass
from typing import Callable
from schemas.timetable import ConflictType, Lesson


@dataclass
class HardRule:
    type: ConflictType
    clashes: Callable[[Lesson, Lesson], bool]
    message: str


def same_period(existing: Lesson, candidate: Lesson) -> bool:
    """True when both lessons sit in the same (day, slot)."""
    return (
        existing.day_of_week == candidate.day_of_week
        and existing.time_slot == candidate.time_slot
    )


def define_hard_rules() -> dict[str, HardRule]:
    # Order matters: a professor conflict is reported before a classroom one.
    return {
        "Professor double-booking": HardRule(
            ConflictType.PROFESSOR,
            lambda existing, candidate: existing.professor_id == candidate.professor_id
            and same_period(existing, candidate),
            "Professor is already teaching at this time.",
        ),
        "Classroom double-booking": HardRule(
            ConflictType.CLASSROOM,
            lambda existing, candidate: existing.classroom_number == candidate.classroom_number
            and same_period(existing, candidate),
            "Classroom is already occupied at this time.",
        ),
    }
