"""
Student Store - plain CRUD on the students table.

Email uniqueness is enforced by the database; a duplicate surfaces as a
PersistenceError. Deleting a student does not touch their schedules; those
rows stay in place.
"""

from typing import Any, Dict

from sqlalchemy import delete
from sqlalchemy.exc import SQLAlchemyError

from app.core.exceptions import NotFound, PersistenceError
from app.core.logger import get_logger
from app.db.database import Database
from app.models.entities import Student
from app.schemas.schemas import StudentCreate

logger = get_logger(__name__)


class StudentStore:
    def __init__(self, database: Database):
        self.database = database

    def create(self, data: StudentCreate) -> Student:
        try:
            with self.database.session() as db:
                student = Student(name=data.name, email=data.email)
                db.add(student)
                db.flush()
        except SQLAlchemyError as e:
            logger.error("Could not create student %s: %s", data.email, e)
            raise PersistenceError("Could not save student") from e

        logger.info("Created student %s", student.id)
        return student

    def get(self, student_id: int) -> Student:
        try:
            with self.database.session() as db:
                student = db.get(Student, student_id)
        except SQLAlchemyError as e:
            raise PersistenceError("Could not load student") from e
        if student is None:
            raise NotFound(f"Student {student_id} not found")
        return student

    def update(self, student_id: int, fields: Dict[str, Any]) -> Student:
        try:
            with self.database.session() as db:
                student = db.get(Student, student_id)
                if student is None:
                    raise NotFound(f"Student {student_id} not found")
                for field, value in fields.items():
                    setattr(student, field, value)
                db.flush()
        except SQLAlchemyError as e:
            logger.error("Could not update student %s: %s", student_id, e)
            raise PersistenceError("Could not update student") from e

        logger.info("Updated student %s", student_id)
        return student

    def delete(self, student_id: int) -> None:
        try:
            with self.database.session() as db:
                result = db.execute(
                    delete(Student).where(Student.id == student_id).execution_options(synchronize_session=False)
                )
        except SQLAlchemyError as e:
            logger.error("Could not delete student %s: %s", student_id, e)
            raise PersistenceError("Could not delete student") from e

        if result.rowcount:
            logger.info("Deleted student %s", student_id)
