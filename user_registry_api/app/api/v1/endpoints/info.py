"""
Root greeting endpoint.

``GET /`` answers with a plain-text welcome message so that a quick
``curl`` against the service shows it is up.
"""

from fastapi import APIRouter
from fastapi.responses import PlainTextResponse

WELCOME_MESSAGE = "Welcome to the User API"

router = APIRouter()


@router.get("/", response_class=PlainTextResponse)
async def get_welcome() -> str:
    """Return the welcome message."""
    return WELCOME_MESSAGE
