"""
Shared fixtures: every test gets its own in-memory SQLite database.
"""
import os

# app.main builds a module-level app on import; keep it off PostgreSQL
os.environ.setdefault("DATABASE_URL", "sqlite://")

import pytest
from fastapi.testclient import TestClient

from app.core.config import Settings
from app.db.database import Database
from app.main import create_app
from app.services.schedule_store import ScheduleStore
from app.services.student_store import StudentStore
from tests.factories import add_student


@pytest.fixture
def database():
    db = Database("sqlite://")
    db.create_tables()
    yield db
    db.dispose()


@pytest.fixture
def student_store(database):
    return StudentStore(database)


@pytest.fixture
def schedule_store(database):
    return ScheduleStore(database)


@pytest.fixture
def student(database):
    """Student 123, the id used in the sample requests."""
    return add_student(database, student_id=123)


@pytest.fixture
def app():
    return create_app(Settings(database_url="sqlite://", _env_file=None))


@pytest.fixture
def client(app):
    with TestClient(app) as c:
        yield c
