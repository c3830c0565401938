"""
Main entrypoint for the User Registry API.

This module assembles the FastAPI application, sets up logging,
registers the error handlers and includes the versioned routers.  The
``create_app`` function builds and configures the app, which is then
instantiated at module import time as ``app``.  Run it with uvicorn,
e.g.::

    uvicorn user_registry_api.app.main:app --port 8080

or with ``python run.py`` which reads host and port from ``Settings``.

The Swagger UI is served at ``settings.docs_url`` (``/swagger`` by
default) and the OpenAPI document at ``<docs_url>/doc.json``.
"""

import logging
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from .api.deps import INVALID_USER_ID, parse_user_id_value
from .api.v1.router import router as v1_router
from .core.config import Settings, settings as default_settings
from .core.errors import APIError, InvalidArgument
from .core.logging_config import setup_logging
from .services.user_service import UserService

logger = logging.getLogger(__name__)

INVALID_INPUT = "Invalid input"

# Methods whose body FastAPI decodes before the handler runs.
BODY_METHODS = frozenset({"POST", "PUT", "PATCH"})


def _error_response(err: APIError) -> JSONResponse:
    level = logging.ERROR if err.status_code >= 500 else logging.WARNING
    logger.log(level, "Request failed (%s): %s", int(err.status_code), err.message)
    return JSONResponse(err.to_dict(), status_code=int(err.status_code))


def _unparseable_request(request: Request) -> InvalidArgument:
    """Pick the client message for a request FastAPI could not parse.

    FastAPI decodes the body before it resolves dependencies, so the
    ``{user_id}`` segment is checked here as well: a bad path id is
    reported before a bad body.
    """
    raw_id = request.path_params.get("user_id")
    if raw_id is not None and parse_user_id_value(str(raw_id)) is None:
        return InvalidArgument(INVALID_USER_ID)
    return InvalidArgument(INVALID_INPUT)


def register_error_handlers(app: FastAPI) -> None:
    """Render every failure as ``{"error": <message>}``."""

    @app.exception_handler(APIError)
    async def handle_api_error(request: Request, exc: APIError) -> JSONResponse:
        return _error_response(exc)

    @app.exception_handler(RequestValidationError)
    async def handle_request_validation_error(
        request: Request, exc: RequestValidationError
    ) -> JSONResponse:
        logger.debug("Unparseable request to %s: %s", request.url.path, exc.errors())
        return _error_response(_unparseable_request(request))

    @app.exception_handler(StarletteHTTPException)
    async def handle_http_exception(request: Request, exc: StarletteHTTPException) -> JSONResponse:
        # FastAPI answers a body it cannot decode (e.g. invalid UTF-8)
        # with a bare 400 instead of a RequestValidationError.
        if exc.status_code == 400 and request.method in BODY_METHODS:
            logger.debug("Undecodable body on %s: %s", request.url.path, exc.detail)
            return _error_response(_unparseable_request(request))
        return JSONResponse(
            {"error": str(exc.detail)},
            status_code=exc.status_code,
            headers=getattr(exc, "headers", None),
        )

    @app.exception_handler(Exception)
    async def handle_unexpected_error(request: Request, exc: Exception) -> JSONResponse:
        logger.exception("Unhandled error on %s %s", request.method, request.url.path)
        return JSONResponse({"error": "Internal server error"}, status_code=500)


def create_app(
    settings: Optional[Settings] = None,
    user_service: Optional[UserService] = None,
) -> FastAPI:
    """Create and configure a FastAPI application.

    Parameters
    ----------
    settings : Optional[Settings]
        Configuration to use; defaults to the module-level settings
        read from the environment.
    user_service : Optional[UserService]
        Registry backing the user endpoints.  A freshly seeded
        ``UserService`` is created when omitted.

    Returns
    -------
    FastAPI
        A configured FastAPI application instance.
    """
    settings = settings or default_settings

    # Initialise logging before anything else so that the setup below
    # can safely log messages.
    setup_logging(settings)

    docs_url = settings.docs_url.rstrip("/") or "/swagger"
    app = FastAPI(
        title=settings.project_name,
        version=settings.api_version,
        description="CRUD API over an in-memory collection of users.",
        debug=settings.debug,
        docs_url=docs_url,
        openapi_url=f"{docs_url}/doc.json",
        redoc_url=None,
    )

    app.state.settings = settings
    app.state.user_service = user_service or UserService()

    register_error_handlers(app)

    app.include_router(v1_router, prefix=settings.api_prefix.rstrip("/"))

    logger.info("%s %s configured, docs at %s", settings.project_name, settings.api_version, docs_url)
    return app


# Create the application instance at import time so that tools such as
# uvicorn can discover it without calling create_app manually.
app = create_app()
