"""
Schedule Conflict Checker

Decides whether a candidate window (student, day, start, end) overlaps an
entry already stored for the same student on the same day.

Overlap rule (endpoints inclusive):
    existing.start_time <= end AND existing.end_time >= start

So a window touching another at a boundary (10:00-12:00 vs 12:00-13:00)
counts as a conflict, and so does a window that fully contains an existing
one. The student id is not validated here.
"""

from datetime import date, time
from typing import Optional

from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from app.core.exceptions import PersistenceError
from app.models.entities import Schedule


def find_conflict(
    db: Session,
    student_id: int,
    day: date,
    start: time,
    end: time,
) -> Optional[Schedule]:
    """Return the first stored schedule overlapping the window, or None."""
    stmt = (
        select(Schedule)
        .where(
            Schedule.student_id == student_id,
            Schedule.day == day,
            Schedule.start_time <= end,
            Schedule.end_time >= start,
        )
        .order_by(Schedule.id)
        .limit(1)
    )
    return db.execute(stmt).scalars().first()


def has_conflict(db: Session, student_id: int, day: date, start: time, end: time) -> bool:
    """True if the window overlaps an existing entry. Read-only."""
    try:
        return find_conflict(db, student_id, day, start, end) is not None
    except SQLAlchemyError as e:
        raise PersistenceError("Could not check schedule conflicts") from e
