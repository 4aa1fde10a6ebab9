"""
Student Schedule Service
Students and their class-schedule entries over a small REST API.

Architecture:
- SQLAlchemy: students and schedules tables
- Stores: one per entity, built once at startup
- Conflict checker: overlap test run inside the schedule insert transaction
"""

__version__ = "1.0.0"
