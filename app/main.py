"""
Student Schedule Service - Main Application

FastAPI backend with:
- Relational database via SQLAlchemy (PostgreSQL, SQLite for local runs/tests)
- Students CRUD
- Class-schedule entries with overlap detection on create

Run: uvicorn app.main:app --reload
"""

from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from app.api.routes import api_router
from app.core.config import Settings, get_settings
from app.core.exceptions import ScheduleServiceError, status_code_for
from app.core.logger import get_logger, setup_logging
from app.db.database import Database
from app.services.schedule_store import ScheduleStore
from app.services.student_store import StudentStore

logger = get_logger(__name__)


def _describe_validation_error(error: dict) -> str:
    # drop the leading "body"/"path" segment
    location = ".".join(str(part) for part in error.get("loc", ())[1:])
    message = error.get("msg", "invalid value")
    return f"{location}: {message}" if location else message


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    """
    Build the application.

    One Database and one store of each kind are created here and kept on
    app.state; route handlers receive them through app.api.deps.
    """
    settings = settings or get_settings()
    setup_logging(settings.log_level, settings.log_file)

    database = Database(settings.sqlalchemy_url, echo=settings.debug)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        database.create_tables()
        logger.info("Student Schedule Service started")
        yield
        database.dispose()
        logger.info("Student Schedule Service stopped")

    app = FastAPI(
        title="Student Schedule Service",
        description="""
        Students and their class-schedule entries.

        ## Features
        - **Students**: create, read, update, delete
        - **Schedule**: create entries (overlap-checked), list a day, update, delete

        ## Formats
        - day: YYYY-MM-DD
        - start_time / end_time: HH:MM:SS
        """,
        version="1.0.0",
        docs_url="/docs",
        redoc_url="/redoc",
        lifespan=lifespan,
    )

    app.state.database = database
    app.state.student_store = StudentStore(database)
    app.state.schedule_store = ScheduleStore(database)

    @app.exception_handler(ScheduleServiceError)
    async def service_error_handler(request: Request, exc: ScheduleServiceError):
        return JSONResponse(status_code=status_code_for(exc), content={"error": exc.message})

    @app.exception_handler(RequestValidationError)
    async def request_validation_handler(request: Request, exc: RequestValidationError):
        message = "; ".join(_describe_validation_error(e) for e in exc.errors())
        return JSONResponse(status_code=400, content={"error": message or "Invalid request data"})

    # Include API routes
    app.include_router(api_router)

    @app.get("/", tags=["Health"])
    async def root():
        return {"message": "Welcome to the Student Schedule Service"}

    @app.get("/health", tags=["Health"])
    def health_check():
        """Detailed health check."""
        connected = database.test_connection()
        return {
            "status": "healthy" if connected else "degraded",
            "database": "connected" if connected else "disconnected",
        }

    return app


app = create_app()
