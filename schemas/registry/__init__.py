from .enums import CourseType, Faculty, Grade, Semester, StudentStatus
from .students import (
    Course,
    CourseCreate,
    GradeRecord,
    Registration,
    Student,
    StudentCreate,
)
