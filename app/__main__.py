"""
Run the service: python -m app

uvicorn handles SIGINT/SIGTERM and shuts the app down gracefully.
"""

import uvicorn

from app.core.config import get_settings


def main():
    settings = get_settings()
    uvicorn.run("app.main:app", host=settings.app_host, port=settings.app_port, reload=settings.debug)


if __name__ == "__main__":
    main()
