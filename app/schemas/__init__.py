"""
Schemas module - Request/Response schemas for API endpoints.
"""
from app.schemas.schemas import (
    StudentCreate, StudentUpdate, StudentResponse,
    ScheduleCreate, ScheduleUpdate, ScheduleResponse,
    MessageResponse,
)

__all__ = [
    "StudentCreate", "StudentUpdate", "StudentResponse",
    "ScheduleCreate", "ScheduleUpdate", "ScheduleResponse",
    "MessageResponse",
]
