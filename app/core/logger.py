# app/core/logger.py
import logging
import sys
from pathlib import Path
from typing import Optional

LOGGER_NAME = "schedule_service"

logger = logging.getLogger(LOGGER_NAME)


def setup_logging(level: str = "INFO", log_file: Optional[str] = None) -> logging.Logger:
    """Attach handlers to the service logger. Safe to call more than once."""
    logger.setLevel(level.upper())

    # Prevent duplicate handlers if the app is built multiple times (tests)
    if not logger.handlers:
        # Stream handler (stdout -> docker logs)
        stream_handler = logging.StreamHandler(sys.stdout)
        stream_handler.setFormatter(logging.Formatter("[%(levelname)s] %(message)s"))
        logger.addHandler(stream_handler)

        if log_file:
            path = Path(log_file)
            path.parent.mkdir(parents=True, exist_ok=True)
            file_handler = logging.FileHandler(path, encoding="utf-8")
            file_handler.setFormatter(logging.Formatter(
                "%(asctime)s - %(levelname)s - %(name)s - %(message)s",
                datefmt="%Y-%m-%d %H:%M:%S",
            ))
            logger.addHandler(file_handler)

    return logger


def get_logger(name: str) -> logging.Logger:
    """Child logger, e.g. get_logger(__name__) -> schedule_service.app.services..."""
    return logger.getChild(name)
