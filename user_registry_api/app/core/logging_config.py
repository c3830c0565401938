"""
Logging configuration built from ``Settings``.

``build_logging_config`` turns the logging fields of ``Settings``
(level, format, optional log file, uvicorn access-log level) into a
``logging.config.dictConfig`` mapping.  ``create_app`` applies it
through ``setup_logging`` and ``run.py`` hands the same mapping to
uvicorn, so the server's own loggers share the application format.
"""

import logging
import logging.config
from pathlib import Path
from typing import Any, Dict

from .config import Settings

DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def _level_name(level: str) -> str:
    name = level.upper()
    return name if isinstance(logging.getLevelName(name), int) else "INFO"


def build_logging_config(settings: Settings) -> Dict[str, Any]:
    """Return a ``dictConfig`` mapping for the given settings.

    The root logger gets a console handler, plus a UTF-8 file handler
    when ``settings.log_file`` is set.  ``uvicorn.access`` is held at
    ``settings.access_log_level`` so per-request lines stay out of
    the log unless asked for; uvicorn's other loggers propagate to
    the root handlers.
    """
    handlers: Dict[str, Dict[str, Any]] = {
        "console": {"class": "logging.StreamHandler", "formatter": "default"},
    }
    if settings.log_file:
        handlers["file"] = {
            "class": "logging.FileHandler",
            "formatter": "default",
            "filename": str(Path(settings.log_file).resolve()),
            "encoding": "utf-8",
        }

    return {
        "version": 1,
        "disable_existing_loggers": False,
        "formatters": {
            "default": {"format": settings.log_format, "datefmt": DATE_FORMAT},
        },
        "handlers": handlers,
        "root": {"level": _level_name(settings.log_level), "handlers": list(handlers)},
        "loggers": {
            "uvicorn": {"handlers": [], "propagate": True},
            "uvicorn.error": {"handlers": [], "propagate": True},
            "uvicorn.access": {
                "handlers": [],
                "level": _level_name(settings.access_log_level),
                "propagate": True,
            },
        },
    }


def setup_logging(settings: Settings) -> None:
    """Configure logging once per process.

    Does nothing when the root logger already has handlers, e.g. when
    uvicorn or a test runner configured logging first, or when
    ``create_app`` is called repeatedly.
    """
    if logging.getLogger().handlers:
        return
    logging.config.dictConfig(build_logging_config(settings))
