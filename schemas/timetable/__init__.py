from .lessons import (
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
