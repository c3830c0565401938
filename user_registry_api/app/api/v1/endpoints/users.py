"""
User endpoints for API v1.

CRUD over the in-memory user registry.  Handlers only translate HTTP
into service calls; the service raises ``NotFound`` and
``ValidationError`` which the application turns into
``{"error": ...}`` responses.  Path ids go through
``deps.parse_user_id`` (``Invalid user ID``); bodies FastAPI cannot
parse are answered with ``Invalid input`` by the handlers in ``main``.

Handlers are plain functions, so FastAPI runs them on its thread
pool; ``UserService`` serialises access to the records with its lock.
"""

from typing import List

from fastapi import APIRouter, Depends, status

from user_registry_api.app.api.deps import get_user_service, parse_user_id
from user_registry_api.app.schemas.common import ErrorResponse
from user_registry_api.app.schemas.user import UserPayload, UserRead
from user_registry_api.app.services.user_service import UserService

router = APIRouter()

BAD_REQUEST = {status.HTTP_400_BAD_REQUEST: {"model": ErrorResponse}}
NOT_FOUND = {status.HTTP_404_NOT_FOUND: {"model": ErrorResponse}}


@router.get("", response_model=List[UserRead], summary="Get all users")
def list_users(service: UserService = Depends(get_user_service)) -> List[UserRead]:
    """Retrieve a list of all users in insertion order."""
    return service.list_users()


@router.get(
    "/{user_id}",
    response_model=UserRead,
    summary="Get user by ID",
    responses={**BAD_REQUEST, **NOT_FOUND},
)
def get_user(
    user_id: int = Depends(parse_user_id),
    service: UserService = Depends(get_user_service),
) -> UserRead:
    """Retrieve a user by ID."""
    return service.get_user(user_id)


@router.post(
    "",
    response_model=UserRead,
    status_code=status.HTTP_201_CREATED,
    summary="Create a new user",
    responses=BAD_REQUEST,
)
def create_user(
    payload: UserPayload,
    service: UserService = Depends(get_user_service),
) -> UserRead:
    """Create a new user.

    ``name`` must be non-empty and ``age`` must be 0 or greater.  The
    server assigns the id; an ``id`` in the body is ignored.
    """
    return service.create_user(payload)


@router.put(
    "/{user_id}",
    response_model=UserRead,
    summary="Update existing user",
    responses={**BAD_REQUEST, **NOT_FOUND},
)
def update_user(
    payload: UserPayload,
    user_id: int = Depends(parse_user_id),
    service: UserService = Depends(get_user_service),
) -> UserRead:
    """Replace the user with the given ID.

    The whole record is replaced by the body; the id always stays the
    one from the path.
    """
    return service.update_user(user_id, payload)


@router.delete(
    "/{user_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Delete user by ID",
    responses={**BAD_REQUEST, **NOT_FOUND},
)
def delete_user(
    user_id: int = Depends(parse_user_id),
    service: UserService = Depends(get_user_service),
) -> None:
    """Delete the user with the given ID."""
    service.delete_user(user_id)
    return None
