"""
Simple configuration management.

The ``Settings`` dataclass reads configuration directly from
environment variables.  Defaults are provided for all fields so the
service starts with no configuration at all, listening on port 8080
and serving the Swagger UI under ``/swagger``.
"""

import os
from dataclasses import dataclass
from typing import Optional


@dataclass
class Settings:
    """Application settings loaded from environment variables."""

    project_name: str = os.getenv("PROJECT_NAME", "User API")
    api_version: str = os.getenv("API_VERSION", "1.0")
    debug: bool = os.getenv("DEBUG", "false").lower() in {"1", "true", "yes"}
    log_level: str = os.getenv("LOG_LEVEL", "INFO")

    # Optional path of a log file in addition to the console handler.
    log_file: Optional[str] = os.getenv("LOG_FILE") or None
    log_format: str = os.getenv("LOG_FORMAT", "%(asctime)s [%(levelname)s] %(name)s: %(message)s")

    # uvicorn logs one line per request at INFO; keep them out by default.
    access_log_level: str = os.getenv("ACCESS_LOG_LEVEL", "WARNING")

    # Address the uvicorn server binds to (see ``run.py``).
    host: str = os.getenv("HOST", "0.0.0.0")
    port: int = int(os.getenv("PORT", "8080"))

    # Routes are mounted at the root by default (``/users``).  Set
    # API_PREFIX=/api/v1 to serve them under a versioned prefix.
    api_prefix: str = os.getenv("API_PREFIX", "")

    # Swagger UI location; the OpenAPI document is served at
    # ``<docs_url>/doc.json``.
    docs_url: str = os.getenv("DOCS_URL", "/swagger")


# Instantiate settings once so other modules can import it without
# repeatedly reading environment variables.  Environment variables
# must be set before importing this module.
settings = Settings()
