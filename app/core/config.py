"""
Configuration module - loads all env vars using pydantic-settings.
This is the SINGLE SOURCE OF TRUTH for all config values.
"""

from functools import lru_cache
from typing import Optional
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    # PostgreSQL
    postgres_host: str = "localhost"
    postgres_port: int = 5432
    postgres_user: str = "schedule_user"
    postgres_password: str = "password"
    postgres_db: str = "student_schedule"

    # Full SQLAlchemy URL, overrides the postgres_* parts when set
    # e.g. sqlite:///./schedule.db
    database_url: Optional[str] = None

    # Logging
    log_level: str = "INFO"
    log_file: Optional[str] = None

    # App
    debug: bool = False
    app_host: str = "127.0.0.1"
    app_port: int = 8080

    @property
    def postgres_url(self) -> str:
        """Construct PostgreSQL connection URL"""
        return (
            f"postgresql://{self.postgres_user}:{self.postgres_password}"
            f"@{self.postgres_host}:{self.postgres_port}/{self.postgres_db}"
        )

    @property
    def sqlalchemy_url(self) -> str:
        """URL the engine is actually created with."""
        return self.database_url or self.postgres_url

    # Pydantic v2 config
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8"
    )


@lru_cache()
def get_settings() -> Settings:
    return Settings()
