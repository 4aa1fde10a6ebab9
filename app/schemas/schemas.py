"""
Pydantic Schemas - Request/Response Validation

All API request and response schemas in one file for simplicity.
"""

from pydantic import BaseModel, ConfigDict, EmailStr, Field, field_validator
from typing import Optional
from datetime import date, datetime, time

from app.core.exceptions import ValidationError
from app.utils.time_formats import parse_clock, parse_day


def _day_field(value):
    if value is None or isinstance(value, date):
        return value
    try:
        return parse_day(value)
    except ValidationError as e:
        # pydantic only collects ValueError into a RequestValidationError
        raise ValueError(e.message)


def _clock_field(value, field: str):
    if value is None or isinstance(value, time):
        return value
    try:
        return parse_clock(value, field)
    except ValidationError as e:
        raise ValueError(e.message)


# ============================================================
# STUDENT SCHEMAS
# ============================================================

class StudentCreate(BaseModel):
    name: str = Field(..., min_length=1, max_length=100)
    email: EmailStr

class StudentUpdate(BaseModel):
    name: Optional[str] = Field(None, min_length=1, max_length=100)
    email: Optional[EmailStr] = None

class StudentResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    name: str
    email: str
    created_at: datetime
    updated_at: datetime


# ============================================================
# SCHEDULE SCHEMAS
# ============================================================

class ScheduleCreate(BaseModel):
    """
    day is YYYY-MM-DD, start_time/end_time are HH:MM:SS.
    state is a free-form label ("planned", "completed", ...).
    """
    student_id: int
    day: date
    start_time: time
    end_time: time
    state: str = Field(..., max_length=50)

    @field_validator("day", mode="before")
    @classmethod
    def parse_day_string(cls, v):
        return _day_field(v)

    @field_validator("start_time", "end_time", mode="before")
    @classmethod
    def parse_clock_string(cls, v, info):
        return _clock_field(v, info.field_name)

class ScheduleUpdate(BaseModel):
    student_id: Optional[int] = None
    day: Optional[date] = None
    start_time: Optional[time] = None
    end_time: Optional[time] = None
    state: Optional[str] = Field(None, max_length=50)

    @field_validator("day", mode="before")
    @classmethod
    def parse_day_string(cls, v):
        return _day_field(v)

    @field_validator("start_time", "end_time", mode="before")
    @classmethod
    def parse_clock_string(cls, v, info):
        return _clock_field(v, info.field_name)

class ScheduleResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    student_id: int
    day: date
    start_time: time
    end_time: time
    state: str
    created_at: datetime
    updated_at: datetime


# ============================================================
# GENERIC RESPONSES
# ============================================================

class MessageResponse(BaseModel):
    message: str
    success: bool = True

