"""Entry point for the registration app.

Serves the FastAPI application with Uvicorn.  Host, port and log
level come from ``registration_app.app.core.config.settings``
(``HOST``, ``PORT``, ``LOG_LEVEL`` environment variables, defaulting to
``0.0.0.0``, ``3000`` and ``INFO``).

Usage:
    python run.py
"""
import asyncio
import logging

from uvicorn import Config, Server

from registration_app.app.core.config import settings
from registration_app.app.main import app


async def run_app() -> None:
    """Start the web application using Uvicorn."""
    config = Config(
        app=app,
        host=settings.host,
        port=settings.port,
        reload=False,
        log_level=settings.log_level.lower(),
    )
    server = Server(config)
    logging.getLogger(__name__).info(
        "Serving %s on http://%s:%s (API under /api)", settings.project_name, settings.host, settings.port
    )
    await server.serve()


if __name__ == "__main__":
    try:
        asyncio.run(run_app())
    except (KeyboardInterrupt, SystemExit):
        pass
