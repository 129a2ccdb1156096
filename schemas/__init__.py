"""
schemas package
---------------

Pydantic record models for both ledgers:

- `timetable`: professors, classrooms, courses, lessons and conflicts.
- `registry`: students, courses, registrations and grade records.
"""
