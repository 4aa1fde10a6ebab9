"""
Schedule Routes

POST /schedule - Create schedule entry (rejected with 409 on overlap)
GET /schedule/{day} - All entries on a day (YYYY-MM-DD)
PUT /schedule/{schedule_id} - Update entry (only provided fields)
DELETE /schedule/{schedule_id} - Delete entry
"""

from fastapi import APIRouter, Depends
from typing import List

from app.api.deps import get_schedule_store
from app.services.schedule_store import ScheduleStore
from app.utils.time_formats import parse_day
from app.schemas.schemas import (
    ScheduleCreate, ScheduleUpdate, ScheduleResponse, MessageResponse
)

router = APIRouter(prefix="/schedule", tags=["Schedule"])


@router.post("", response_model=ScheduleResponse)
def create_schedule(data: ScheduleCreate, store: ScheduleStore = Depends(get_schedule_store)):
    """
    Create a schedule entry for a student.

    Body: student_id, day (YYYY-MM-DD), start_time / end_time (HH:MM:SS), state.
    Fails with 409 if the window overlaps an existing entry of the same
    student on the same day.
    """
    return store.create(data)


@router.get("/{day}", response_model=List[ScheduleResponse])
def get_schedules_for_day(day: str, store: ScheduleStore = Depends(get_schedule_store)):
    """Get all schedule entries (all students) on a day."""
    return store.get_by_day(parse_day(day))


@router.put("/{schedule_id}", response_model=ScheduleResponse)
def update_schedule(
    schedule_id: int,
    data: ScheduleUpdate,
    store: ScheduleStore = Depends(get_schedule_store)
):
    """Update schedule entry. The new window is not re-checked for overlaps."""
    fields = data.model_dump(exclude_unset=True, exclude_none=True)
    return store.update(schedule_id, fields)


@router.delete("/{schedule_id}", response_model=MessageResponse)
def delete_schedule(schedule_id: int, store: ScheduleStore = Depends(get_schedule_store)):
    """Delete schedule entry. Deleting a missing entry succeeds."""
    store.delete(schedule_id)
    return MessageResponse(message="Schedule deleted successfully")
