from contextlib import contextmanager

from sqlalchemy import create_engine, event, text
from sqlalchemy.engine import Engine
from sqlalchemy.orm import sessionmaker, Session
from sqlalchemy.pool import StaticPool

from app.core.logger import get_logger
from app.models.entities import Base

logger = get_logger(__name__)


def _sqlite_autocommit_driver(dbapi_connection, connection_record):
    # stop pysqlite from emitting its own deferred BEGIN
    dbapi_connection.isolation_level = None


def _sqlite_begin_immediate(conn):
    conn.exec_driver_sql("BEGIN IMMEDIATE")


def build_engine(url: str, echo: bool = False) -> Engine:
    """
    Create the SQLAlchemy engine for a database URL.

    PostgreSQL gets a connection pool:
    pool_size=5: maintain 5 connections ready
    max_overflow=10: allow 10 extra connections under load

    SQLite (tests, local runs) starts every transaction with BEGIN IMMEDIATE,
    taking the write lock before the first read, so a conflict check and the
    insert that follows it cannot interleave with another writer. An
    in-memory URL shares one connection so every session sees the same data.
    """
    if url.startswith("sqlite"):
        kwargs = {"echo": echo, "connect_args": {"check_same_thread": False}}
        if url in ("sqlite://", "sqlite:///:memory:"):
            kwargs["poolclass"] = StaticPool
        engine = create_engine(url, **kwargs)
        event.listen(engine, "connect", _sqlite_autocommit_driver)
        event.listen(engine, "begin", _sqlite_begin_immediate)
        return engine

    return create_engine(url, pool_size=5, max_overflow=10, echo=echo)


class Database:
    """
    Owns the engine and session factory.

    One instance is built at startup and shared by the stores.
    """

    def __init__(self, url: str, echo: bool = False):
        self.engine = build_engine(url, echo=echo)
        # expire_on_commit=False: entities stay readable after the session closes
        self.SessionLocal = sessionmaker(
            autocommit=False, autoflush=False, expire_on_commit=False, bind=self.engine
        )

    @contextmanager
    def session(self):
        """
        Context manager for database sessions.
        Usage:
            with database.session() as db:
                db.execute(select(Student))
        """
        session: Session = self.SessionLocal()
        try:
            yield session
            session.commit()
        except Exception:
            session.rollback()
            raise
        finally:
            session.close()

    def create_tables(self) -> None:
        """Create the students and schedules tables if they do not exist."""
        Base.metadata.create_all(bind=self.engine)
        logger.info("Database tables ready (%s)", self.engine.dialect.name)

    def test_connection(self) -> bool:
        """
        Test if the database is reachable.
        Returns True if connection successful, False otherwise.
        """
        try:
            with self.session() as db:
                result = db.execute(text("SELECT 1 as test"))
                row = result.fetchone()
                return row[0] == 1
        except Exception as e:
            logger.error("Database connection failed: %s", e)
            return False

    def dispose(self) -> None:
        self.engine.dispose()
