"""
Models module - SQLAlchemy entities mapped to the database tables.

Difference from schemas:
- Models: what is stored
- Schemas: API contract (what client sends/receives)
"""
from app.models.entities import Base, Schedule, Student

__all__ = ["Base", "Schedule", "Student"]
