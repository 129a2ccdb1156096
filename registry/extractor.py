import pandas as pd
from typing import List
from core.state import RegistryState
from schemas.registry import Faculty, Student, StudentStatus
from utils.constants import AVERAGE_GRADE_DECIMALS, HONOR_ROLL_MIN_AVERAGE
from utils.stats_utils import round_half_up


def calculate_average_grade(state: RegistryState, student_id: int) -> float:
    """Mean of the student's grades rounded to two decimals, or 0 without grades."""
    grades = [int(g.grade) for g in state.grades if g.student_id == student_id]
    if not grades:
        return 0
    return round_half_up(sum(grades) / len(grades), AVERAGE_GRADE_DECIMALS)


def is_honor_roll(state: RegistryState, student: Student) -> bool:
    return (
        calculate_average_grade(state, student.id) >= HONOR_ROLL_MIN_AVERAGE
        and student.status == StudentStatus.ACTIVE
    )


def get_top_students_by_faculty(state: RegistryState, faculty: Faculty) -> List[Student]:
    """Active students of the faculty whose average grade is at least 4.5."""
    return [
        s for s in state.students if s.faculty == faculty and is_honor_roll(state, s)
    ]


def faculty_grade_summary(state: RegistryState, faculty: Faculty) -> pd.DataFrame:
    """
    Build a per-student summary for one faculty.

    Columns: id, full_name, group_number, status, grades (count),
    average and honor_roll.
    """
    rows = []
    for student in state.students:
        if student.faculty != faculty:
            continue
        rows.append(
            {
                "id": student.id,
                "full_name": student.full_name,
                "group_number": student.group_number,
                "status": student.status.value,
                "grades": sum(1 for g in state.grades if g.student_id == student.id),
                "average": calculate_average_grade(state, student.id),
                "honor_roll": is_honor_roll(state, student),
            }
        )
    return pd.DataFrame(
        rows,
        columns=["id", "full_name", "group_number", "status", "grades", "average", "honor_roll"],
    )
