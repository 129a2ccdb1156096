class RegistryError(Exception):
    """Base class for business-rule rejections raised by the registration ledger."""

    pass


class NotFoundError(RegistryError):
    """Raised when a student or course id is not known to the ledger."""

    pass


class FacultyMismatchError(RegistryError):
    """Raised when a student registers for a mandatory course of another faculty."""

    pass


class CourseFullError(RegistryError):
    """Raised when a course has already reached its maximum number of students."""

    pass


class NotRegisteredError(RegistryError):
    """Raised when a grade is set for a student who is not registered on the course."""

    pass


# Mapping of custom exceptions to the error kinds reported by callers
ERROR_KINDS = {
    NotFoundError: "NotFound",
    FacultyMismatchError: "FacultyMismatch",
    CourseFullError: "CourseFull",
    NotRegisteredError: "NotRegistered",
}


def error_kind(exc: Exception) -> str:
    """Return the reported kind for a registry error, or its class name otherwise."""
    for cls, kind in ERROR_KINDS.items():
        if isinstance(exc, cls):
            return kind
    return type(exc).__name__
