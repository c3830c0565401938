"""User Registry API client.

A thin wrapper around the HTTP surface of the User Registry API using
the ``requests`` library.  Each method returns a ``(data, error)``
tuple: on success ``error`` is ``None``; on failure ``error`` is a
dictionary with keys ``status_code`` and ``message``.  ``message`` is
the server's ``error`` field when the response carries one, so
callers see texts such as ``"User not found"`` or
``"age must be 0 or greater"``.

Example::

    client = UserRegistryClient(base_url="http://localhost:8080")
    user, error = client.create_user("Dana", 40)
"""

from __future__ import annotations

import logging
from typing import Any, Dict, List, Optional, Tuple

import requests


logger = logging.getLogger(__name__)

Error = Dict[str, Any]


class UserRegistryClient:
    """Client for the ``/users`` endpoints of the User Registry API."""

    def __init__(
        self,
        *,
        base_url: str,
        session: Optional[requests.Session] = None,
        timeout: float = 15,
    ) -> None:
        """Initialise the API client.

        Args:
            base_url: Base URL of the service, e.g. ``http://localhost:8080``.
            session: Optional requests session.  If not supplied a
                session will be created automatically.
            timeout: Per-request timeout in seconds.
        """
        self.base_url = base_url.rstrip("/")
        self.session = session or requests.Session()
        self.timeout = timeout

    # ------------------------------------------------------------------
    # Low level HTTP helpers
    # ------------------------------------------------------------------
    def _request(
        self, method: str, path: str, *, json_body: Any | None = None
    ) -> Tuple[Optional[Any], Optional[Error]]:
        """Perform an HTTP request to the API.

        Args:
            method: HTTP method (``GET``, ``POST``, ``PUT``, ``DELETE``).
            path: Path relative to :attr:`base_url` (e.g. ``/users``).
            json_body: JSON body to send with the request.
        Returns:
            A tuple ``(data, error)``.  ``data`` is the parsed JSON body,
            the text body for non-JSON responses, or ``None`` for an
            empty body.
        """
        url = f"{self.base_url}{path}"
        try:
            logger.debug("Sending %s request to %s", method, url)
            response = self.session.request(
                method=method,
                url=url,
                json=json_body,
                timeout=self.timeout,
            )
            response.raise_for_status()
        except requests.HTTPError as exc:
            status = exc.response.status_code if exc.response is not None else None
            message = self._error_message(exc.response) if exc.response is not None else ""
            if not message:
                message = str(exc)
            logger.error("API request failed (%s): %s", status, message)
            return None, {"status_code": status, "message": message}
        except requests.RequestException as exc:
            logger.error("API request failed: %s", exc)
            return None, {"status_code": None, "message": str(exc)}

        if not response.content:
            return None, None
        if "json" in response.headers.get("Content-Type", ""):
            return response.json(), None
        return response.text, None

    @staticmethod
    def _error_message(response: requests.Response) -> str:
        try:
            body = response.json()
        except ValueError:
            return response.text
        if isinstance(body, dict):
            return str(body.get("error") or body.get("detail") or body)
        return str(body)

    # ------------------------------------------------------------------
    # Operations
    # ------------------------------------------------------------------
    def greeting(self) -> Tuple[Optional[str], Optional[Error]]:
        """Return the welcome text served at ``/``."""
        return self._request("GET", "/")

    def list_users(self) -> Tuple[List[Dict[str, Any]], Optional[Error]]:
        """Retrieve all users.

        Returns:
            A tuple ``(users, error)``.  ``users`` is empty on failure.
        """
        data, error = self._request("GET", "/users")
        if error:
            return [], error
        return data if isinstance(data, list) else [], None

    def get_user(self, user_id: Any) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        """Retrieve a single user by ID."""
        return self._request("GET", f"/users/{user_id}")

    def create_user(self, name: str, age: int) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        """Create a user; the server assigns the id."""
        return self._request("POST", "/users", json_body={"name": name, "age": age})

    def update_user(
        self, user_id: Any, name: str, age: int
    ) -> Tuple[Optional[Dict[str, Any]], Optional[Error]]:
        """Replace the user with ``user_id``."""
        return self._request("PUT", f"/users/{user_id}", json_body={"name": name, "age": age})

    def delete_user(self, user_id: Any) -> Tuple[bool, Optional[Error]]:
        """Delete a user.

        Returns:
            A tuple ``(success, error)``.
        """
        _, error = self._request("DELETE", f"/users/{user_id}")
        if error:
            return False, error
        return True, None
