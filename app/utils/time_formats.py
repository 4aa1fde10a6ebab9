"""
Fixed wire formats for calendar days and clock times.

day:  YYYY-MM-DD   (2024-06-01)
time: HH:MM:SS     (13:05:00, 24-hour clock)

Every field is zero-padded; 2024-6-1 or 9:5:0 is rejected.
"""

import re
from datetime import date, datetime, time

from app.core.exceptions import ValidationError

DATE_FORMAT = "%Y-%m-%d"
TIME_FORMAT = "%H:%M:%S"

# strptime alone accepts single-digit fields
_DATE_SHAPE = re.compile(r"[0-9]{4}-[0-9]{2}-[0-9]{2}")
_TIME_SHAPE = re.compile(r"[0-9]{2}:[0-9]{2}:[0-9]{2}")


def _matches(shape: re.Pattern, value) -> bool:
    return isinstance(value, str) and shape.fullmatch(value) is not None


def parse_day(value: str) -> date:
    """Parse a YYYY-MM-DD string. Raises ValidationError on any other shape."""
    try:
        if not _matches(_DATE_SHAPE, value):
            raise ValueError(value)
        return datetime.strptime(value, DATE_FORMAT).date()
    except ValueError:
        raise ValidationError(f"Invalid date format: {value!r} (expected YYYY-MM-DD)")


def parse_clock(value: str, field: str = "time") -> time:
    """Parse an HH:MM:SS string. Raises ValidationError on any other shape."""
    try:
        if not _matches(_TIME_SHAPE, value):
            raise ValueError(value)
        return datetime.strptime(value, TIME_FORMAT).time()
    except ValueError:
        raise ValidationError(f"Invalid {field} format: {value!r} (expected HH:MM:SS)")
