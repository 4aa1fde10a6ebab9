"""
FastAPI dependencies - hand the stores built at startup to route handlers.
"""

from fastapi import Request

from app.services.schedule_store import ScheduleStore
from app.services.student_store import StudentStore


def get_student_store(request: Request) -> StudentStore:
    return request.app.state.student_store


def get_schedule_store(request: Request) -> ScheduleStore:
    return request.app.state.schedule_store
