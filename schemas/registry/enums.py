from enum import Enum, IntEnum


class StudentStatus(str, Enum):
    ACTIVE = "Active"
    ACADEMIC_LEAVE = "Academic_Leave"
    GRADUATED = "Graduated"
    EXPELLED = "Expelled"


class CourseType(str, Enum):
    MANDATORY = "Mandatory"
    OPTIONAL = "Optional"
    SPECIAL = "Special"


class Semester(str, Enum):
    FIRST = "First"
    SECOND = "Second"


class Grade(IntEnum):
    """Grades are averaged arithmetically, so the numeric values are fixed."""
    EXCELLENT = 5
    GOOD = 4
    SATISFACTORY = 3
    UNSATISFACTORY = 2


class Faculty(str, Enum):
    COMPUTER_SCIENCE = "Computer_Science"
    ECONOMICS = "Economics"
    LAW = "Law"
    ENGINEERING = "Engineering"
