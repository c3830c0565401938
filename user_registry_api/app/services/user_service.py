"""
Business logic for users.

``UserService`` keeps the user records in an ordered in-memory list
and exposes the CRUD operations used by the HTTP handlers.  Every
read and write happens under the service's lock: the user handlers are
plain functions that FastAPI runs on its thread pool, so two requests
can reach the service at the same time.  Records handed out are
copies; changing one never touches the registry.

New ids are ``max(existing ids) + 1`` (or ``1`` for an empty list).
Deleting the highest id and then creating a user therefore hands the
same id out again.
"""

import logging
import threading
from typing import Iterable, List, Optional

from ..core.errors import NotFound, ValidationError
from ..schemas.user import UserPayload, UserRead
from .validation import validate_user

logger = logging.getLogger(__name__)

SEED_USERS = (
    UserRead(id=1, name="Agus", age=15),
    UserRead(id=2, name="Bagus", age=25),
    UserRead(id=3, name="Caca", age=29),
)


class UserService:
    """In-memory user registry."""

    def __init__(self, seed: Optional[Iterable[UserRead]] = None) -> None:
        self._seed = list(SEED_USERS if seed is None else seed)
        self._lock = threading.Lock()
        self._users: List[UserRead] = []
        self.reset()

    def reset(self) -> None:
        """Drop all changes and restore the seed records."""
        with self._lock:
            self._users = [user.model_copy() for user in self._seed]

    def list_users(self) -> List[UserRead]:
        """Return all users in insertion order."""
        logger.debug("Fetching all users")
        with self._lock:
            return [user.model_copy() for user in self._users]

    def get_user(self, user_id: int) -> UserRead:
        """Return the user with ``user_id`` or raise :class:`NotFound`."""
        logger.debug("Fetching user by ID %s", user_id)
        with self._lock:
            index = self._index_of(user_id)
            if index is None:
                raise NotFound()
            return self._users[index].model_copy()

    def create_user(self, data: UserPayload) -> UserRead:
        """Validate ``data`` and append it with a newly assigned id.

        Any ``id`` present in the payload is ignored.
        """
        self._validate(data)
        with self._lock:
            new_id = max((user.id for user in self._users), default=0) + 1
            user = UserRead(id=new_id, name=data.name, age=data.age)
            self._users.append(user)
        logger.info("Created user %s", new_id)
        return user.model_copy()

    def update_user(self, user_id: int, data: UserPayload) -> UserRead:
        """Replace the user with ``user_id`` by ``data``.

        The record is replaced as a whole and keeps its position in the
        list; its id stays ``user_id`` whatever the payload says.
        """
        self._validate(data)
        with self._lock:
            index = self._index_of(user_id)
            if index is None:
                raise NotFound()
            user = UserRead(id=user_id, name=data.name, age=data.age)
            self._users[index] = user
        logger.info("Updated user %s", user_id)
        return user.model_copy()

    def delete_user(self, user_id: int) -> None:
        """Remove the user with ``user_id`` or raise :class:`NotFound`."""
        with self._lock:
            index = self._index_of(user_id)
            if index is None:
                raise NotFound()
            del self._users[index]
        logger.info("Deleted user %s", user_id)

    def _index_of(self, user_id: int) -> Optional[int]:
        # Caller must hold self._lock.
        for index, user in enumerate(self._users):
            if user.id == user_id:
                return index
        return None

    @staticmethod
    def _validate(data: UserPayload) -> None:
        violations = validate_user(data)
        if violations:
            err = ValidationError(violations)
            logger.info("Rejected user payload: %s", err.message)
            raise err
