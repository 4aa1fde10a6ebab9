"""
Database module - engine, sessions and table creation.
"""
from app.db.database import Database, build_engine

__all__ = [
    "Database",
    "build_engine",
]
