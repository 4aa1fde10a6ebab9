"""
Schedule Store - persistence of class-schedule entries.

create() runs the student lookup, the conflict check and the insert inside
one transaction. The student row is locked with SELECT ... FOR UPDATE on
PostgreSQL; SQLite transactions start with BEGIN IMMEDIATE (see
app.db.database.build_engine). Either way two concurrent creates for the same
student are serialized instead of both passing the check.
"""

from datetime import date
from typing import Any, Dict, List

from sqlalchemy import delete, select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from app.core.exceptions import Conflict, NotFound, PersistenceError
from app.core.logger import get_logger
from app.db.database import Database
from app.models.entities import Schedule, Student
from app.schemas.schemas import ScheduleCreate
from app.services.conflict_checker import find_conflict

logger = get_logger(__name__)


class ScheduleStore:
    def __init__(self, database: Database):
        self.database = database

    def create(self, data: ScheduleCreate) -> Schedule:
        """Insert a schedule unless it overlaps one of the student's entries that day."""
        try:
            with self.database.session() as db:
                if not self._lock_student(db, data.student_id):
                    raise NotFound(f"Student {data.student_id} not found")

                existing = find_conflict(db, data.student_id, data.day, data.start_time, data.end_time)
                if existing is not None:
                    logger.warning(
                        "Rejected schedule for student %s on %s %s-%s: overlaps schedule %s",
                        data.student_id, data.day, data.start_time, data.end_time, existing.id,
                    )
                    raise Conflict("A schedule already exists in the given time range")

                schedule = Schedule(
                    student_id=data.student_id,
                    day=data.day,
                    start_time=data.start_time,
                    end_time=data.end_time,
                    state=data.state,
                )
                db.add(schedule)
                db.flush()
        except SQLAlchemyError as e:
            logger.error("Could not create schedule for student %s: %s", data.student_id, e)
            raise PersistenceError("Could not create schedule") from e

        logger.info("Created schedule %s for student %s on %s", schedule.id, schedule.student_id, schedule.day)
        return schedule

    def get(self, schedule_id: int) -> Schedule:
        try:
            with self.database.session() as db:
                schedule = db.get(Schedule, schedule_id)
        except SQLAlchemyError as e:
            raise PersistenceError("Could not load schedule") from e
        if schedule is None:
            raise NotFound(f"Schedule {schedule_id} not found")
        return schedule

    def get_by_day(self, day: date) -> List[Schedule]:
        """All schedules on a day, across all students. Empty list when none."""
        try:
            with self.database.session() as db:
                result = db.execute(select(Schedule).where(Schedule.day == day).order_by(Schedule.id))
                return list(result.scalars().all())
        except SQLAlchemyError as e:
            logger.error("Could not load schedules for %s: %s", day, e)
            raise PersistenceError("Could not load schedules") from e

    def update(self, schedule_id: int, fields: Dict[str, Any]) -> Schedule:
        """
        Apply only the given fields. The new window is not re-checked for
        conflicts.
        """
        try:
            with self.database.session() as db:
                schedule = db.get(Schedule, schedule_id)
                if schedule is None:
                    raise NotFound(f"Schedule {schedule_id} not found")
                for field, value in fields.items():
                    setattr(schedule, field, value)
                db.flush()
        except SQLAlchemyError as e:
            logger.error("Could not update schedule %s: %s", schedule_id, e)
            raise PersistenceError("Could not update schedule") from e

        logger.info("Updated schedule %s (%s)", schedule_id, ", ".join(sorted(fields)) or "no changes")
        return schedule

    def delete(self, schedule_id: int) -> None:
        """Remove a schedule. A missing id is not an error."""
        try:
            with self.database.session() as db:
                result = db.execute(
                    delete(Schedule).where(Schedule.id == schedule_id).execution_options(synchronize_session=False)
                )
        except SQLAlchemyError as e:
            logger.error("Could not delete schedule %s: %s", schedule_id, e)
            raise PersistenceError("Could not delete schedule") from e

        if result.rowcount:
            logger.info("Deleted schedule %s", schedule_id)
        else:
            logger.info("Delete of schedule %s: nothing to delete", schedule_id)

    @staticmethod
    def _lock_student(db: Session, student_id: int) -> bool:
        """Lock the student row for the rest of the transaction. False if missing."""
        row = db.execute(select(Student.id).where(Student.id == student_id).with_for_update()).first()
        return row is not None
