"""
Service exceptions and their HTTP status codes.

Stores raise these; the exception handler installed in app.main turns them
into {"error": message} responses with the mapped status code.
"""


class ScheduleServiceError(Exception):
    """Base class for every error the service reports to a caller."""

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)


class ValidationError(ScheduleServiceError):
    """Raised for malformed input such as a bad date or time format."""

    pass


class NotFound(ScheduleServiceError):
    """Raised when a student or schedule does not exist."""

    pass


class Conflict(ScheduleServiceError):
    """Raised when a schedule window overlaps an existing one."""

    pass


class PersistenceError(ScheduleServiceError):
    """Raised when storage is unreachable or a constraint is violated."""

    pass


# Mapping of service exceptions to HTTP status codes
ERROR_STATUS_CODES = {
    ValidationError: 400,
    NotFound: 404,
    Conflict: 409,
    PersistenceError: 500,
}


def status_code_for(error: ScheduleServiceError) -> int:
    for error_type, status_code in ERROR_STATUS_CODES.items():
        if isinstance(error, error_type):
            return status_code
    return 500
