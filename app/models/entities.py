"""
ORM entities - the two persisted tables.

students: one row per student, email unique
schedules: class-schedule entries, many per student

schedules.student_id is not a foreign key; deleting a student does not
touch their schedules.
"""

from datetime import datetime

from sqlalchemy import Column, Date, DateTime, Index, Integer, String, Time
from sqlalchemy.orm import declarative_base

Base = declarative_base()


class Student(Base):
    __tablename__ = "students"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String(100), nullable=False)
    email = Column(String(255), unique=True, nullable=False, index=True)
    created_at = Column(DateTime, default=datetime.now, nullable=False)
    updated_at = Column(DateTime, default=datetime.now, onupdate=datetime.now, nullable=False)

    def __repr__(self) -> str:
        return f"<Student id={self.id} email={self.email!r}>"


class Schedule(Base):
    __tablename__ = "schedules"
    __table_args__ = (
        # conflict lookups always filter on both
        Index("ix_schedules_student_day", "student_id", "day"),
    )

    id = Column(Integer, primary_key=True, index=True)
    # plain column: deleting a student leaves their schedules in place
    student_id = Column(Integer, nullable=False, index=True)
    day = Column(Date, nullable=False, index=True)
    start_time = Column(Time, nullable=False)
    end_time = Column(Time, nullable=False)
    state = Column(String(50), nullable=False)
    created_at = Column(DateTime, default=datetime.now, nullable=False)
    updated_at = Column(DateTime, default=datetime.now, onupdate=datetime.now, nullable=False)

    def __repr__(self) -> str:
        return (
            f"<Schedule id={self.id} student_id={self.student_id} day={self.day} "
            f"{self.start_time}-{self.end_time}>"
        )
