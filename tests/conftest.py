"""Global pytest fixtures for the User Registry API."""

from __future__ import annotations

from collections.abc import Generator

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from user_registry_api.app.main import create_app
from user_registry_api.app.services.user_service import UserService


@pytest.fixture()
def service() -> UserService:
    """Provide a freshly seeded user registry."""

    return UserService()


@pytest.fixture()
def app(service: UserService) -> FastAPI:
    """Create an application bound to the test's own registry."""

    return create_app(user_service=service)


@pytest.fixture()
def client(app: FastAPI) -> Generator[TestClient, None, None]:
    """HTTP client talking to the in-process application."""

    with TestClient(app) as test_client:
        yield test_client
