"""Shared FastAPI dependencies."""

import re
from typing import Optional

from fastapi import Path, Request

from ..core.errors import InvalidArgument
from ..schemas.user import INT64_MAX, INT64_MIN
from ..services.user_service import UserService

INVALID_USER_ID = "Invalid user ID"

# Optional sign followed by ASCII digits only: no spaces, underscores,
# decimal points or non-ASCII digits.
_USER_ID_RE = re.compile(r"[+-]?[0-9]+")


def parse_user_id_value(raw: str) -> Optional[int]:
    """Return ``raw`` as an int64, or ``None`` if it is not one."""
    if not _USER_ID_RE.fullmatch(raw):
        return None
    value = int(raw)
    if not INT64_MIN <= value <= INT64_MAX:
        return None
    return value


def parse_user_id(
    user_id: str = Path(..., description="Integer user ID", examples=["1"]),
) -> int:
    """Parse the ``{user_id}`` path segment.

    Runs before the request body is validated, so a bad id is reported
    ahead of a bad body.

    Raises
    ------
    InvalidArgument
        When the segment is not a signed 64-bit integer.
    """
    value = parse_user_id_value(user_id)
    if value is None:
        raise InvalidArgument(INVALID_USER_ID)
    return value


def get_user_service(request: Request) -> UserService:
    """Return the ``UserService`` owned by the running application.

    ``create_app`` stores one service per application on
    ``app.state.user_service``, so separate app instances (for example
    in tests) never share records.
    """
    return request.app.state.user_service
