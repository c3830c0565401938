"""Entry point for the User Registry API.

Serves the FastAPI application with uvicorn.  Host, port and logging
come from ``Settings`` and can be overridden with the ``HOST``,
``PORT``, ``LOG_LEVEL``, ``LOG_FORMAT``, ``LOG_FILE`` and
``ACCESS_LOG_LEVEL`` environment variables.

Usage:
    python run.py
"""
import asyncio
import logging

from uvicorn import Config, Server

from user_registry_api.app.core.config import settings
from user_registry_api.app.core.logging_config import build_logging_config
from user_registry_api.app.main import app


def build_config() -> Config:
    """Build the uvicorn configuration for the API server.

    uvicorn applies ``log_config`` itself, so its loggers use the same
    handlers and format as the application.
    """
    return Config(
        app=app,
        host=settings.host,
        port=settings.port,
        reload=False,
        log_config=build_logging_config(settings),
    )


async def main() -> None:
    """Run the API server until it is stopped."""
    server = Server(build_config())
    logging.getLogger(__name__).info("Listening on %s:%s", settings.host, settings.port)
    await server.serve()


if __name__ == "__main__":
    try:
        asyncio.run(main())
    except (KeyboardInterrupt, SystemExit):
        pass
