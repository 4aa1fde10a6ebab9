"""
Student Routes

POST /students - Create student
GET /students/{student_id} - Get student
PUT /students/{student_id} - Update student (only provided fields)
DELETE /students/{student_id} - Delete student
"""

from fastapi import APIRouter, Depends

from app.api.deps import get_student_store
from app.services.student_store import StudentStore
from app.schemas.schemas import (
    StudentCreate, StudentUpdate, StudentResponse, MessageResponse
)

router = APIRouter(prefix="/students", tags=["Students"])


@router.post("", response_model=StudentResponse)
def create_student(data: StudentCreate, store: StudentStore = Depends(get_student_store)):
    """Create a student. Email must be unique."""
    return store.create(data)


@router.get("/{student_id}", response_model=StudentResponse)
def get_student(student_id: int, store: StudentStore = Depends(get_student_store)):
    return store.get(student_id)


@router.put("/{student_id}", response_model=StudentResponse)
def update_student(
    student_id: int,
    data: StudentUpdate,
    store: StudentStore = Depends(get_student_store)
):
    """Update student. Only provided fields are changed."""
    fields = data.model_dump(exclude_unset=True, exclude_none=True)
    return store.update(student_id, fields)


@router.delete("/{student_id}", response_model=MessageResponse)
def delete_student(student_id: int, store: StudentStore = Depends(get_student_store)):
    """Delete student. Their schedules are not removed."""
    store.delete(student_id)
    return MessageResponse(message="Student deleted successfully")
