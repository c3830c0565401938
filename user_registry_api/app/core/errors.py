"""
Error types raised by the service layer and the request parsers.

Every error derives from :class:`APIError`, which carries the HTTP
status code and the client-facing message.  ``main.create_app``
registers a single handler that renders any ``APIError`` as
``{"error": <message>}``.
"""

from http import HTTPStatus
from typing import TYPE_CHECKING, Optional, Sequence

if TYPE_CHECKING:  # pragma: no cover - typing helper
    from ..services.validation import Violation


class APIError(Exception):
    """Base class for errors that map to a JSON error response.

    Parameters
    ----------
    message : str
        Human-readable description presented to clients.
    status_code : int, optional
        HTTP status code to return.  Defaults to ``400``.
    """

    status_code: int = HTTPStatus.BAD_REQUEST

    def __init__(self, message: str, status_code: Optional[int] = None) -> None:
        super().__init__(message)
        self.message = message
        if status_code is not None:
            self.status_code = int(status_code)

    def to_dict(self) -> dict:
        return {"error": self.message}


class InvalidArgument(APIError):
    """400 for a malformed path parameter or request body."""


class ValidationError(APIError):
    """400 when a well-formed payload breaks a validation rule.

    The message joins the messages of all violations with ``"; "``.
    """

    def __init__(self, violations: Sequence["Violation"]) -> None:
        self.violations = list(violations)
        super().__init__("; ".join(v.message for v in self.violations))


class NotFound(APIError):
    """404 when no record matches the requested id."""

    status_code = HTTPStatus.NOT_FOUND

    def __init__(self, message: str = "User not found") -> None:
        super().__init__(message)
