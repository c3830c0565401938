"""Unit tests for the in-memory user registry."""

from __future__ import annotations

import threading

import pytest

from user_registry_api.app.core.errors import NotFound, ValidationError
from user_registry_api.app.schemas.user import UserPayload, UserRead
from user_registry_api.app.services.user_service import UserService


def _ids(service: UserService) -> list[int]:
    return [user.id for user in service.list_users()]


def test_starts_with_three_seed_users_in_order(service: UserService) -> None:
    users = service.list_users()

    assert [(u.id, u.name, u.age) for u in users] == [
        (1, "Agus", 15),
        (2, "Bagus", 25),
        (3, "Caca", 29),
    ]


def test_list_returns_a_copy(service: UserService) -> None:
    service.list_users().clear()

    assert len(service.list_users()) == 3


def test_returned_records_are_detached(service: UserService) -> None:
    service.list_users()[0].name = "Changed"
    service.get_user(2).age = 99
    created = service.create_user(UserPayload(name="Dana", age=40))
    created.id = 1
    updated = service.update_user(3, UserPayload(name="Caca2", age=30))
    updated.name = "Other"

    assert [(u.id, u.name, u.age) for u in service.list_users()] == [
        (1, "Agus", 15),
        (2, "Bagus", 25),
        (3, "Caca2", 30),
        (4, "Dana", 40),
    ]


def test_get_user_returns_matching_record(service: UserService) -> None:
    assert service.get_user(2) == UserRead(id=2, name="Bagus", age=25)


def test_get_missing_user_raises_not_found(service: UserService) -> None:
    with pytest.raises(NotFound) as excinfo:
        service.get_user(999)

    assert excinfo.value.message == "User not found"
    assert excinfo.value.status_code == 404


def test_create_assigns_next_id_and_appends(service: UserService) -> None:
    user = service.create_user(UserPayload(name="Dana", age=40))

    assert user == UserRead(id=4, name="Dana", age=40)
    assert _ids(service) == [1, 2, 3, 4]


def test_create_ignores_client_supplied_id(service: UserService) -> None:
    user = service.create_user(UserPayload(id=100, name="Dana", age=40))

    assert user.id == 4


def test_create_in_empty_registry_starts_at_one() -> None:
    service = UserService(seed=[])

    assert service.create_user(UserPayload(name="First", age=1)).id == 1


@pytest.mark.parametrize(
    "payload, message",
    [
        (UserPayload(name="", age=5), "name is required"),
        (UserPayload(name="X", age=-1), "age must be 0 or greater"),
        (UserPayload(name="X"), "age is required"),
    ],
)
def test_invalid_create_does_not_mutate(service: UserService, payload: UserPayload, message: str) -> None:
    with pytest.raises(ValidationError) as excinfo:
        service.create_user(payload)

    assert excinfo.value.message == message
    assert excinfo.value.status_code == 400
    assert _ids(service) == [1, 2, 3]


def test_round_trip_create_then_get(service: UserService) -> None:
    created = service.create_user(UserPayload(name="Eve", age=33))

    assert service.get_user(created.id) == created


def test_update_replaces_record_in_place(service: UserService) -> None:
    updated = service.update_user(2, UserPayload(name="Bagus2", age=26))

    assert updated == UserRead(id=2, name="Bagus2", age=26)
    assert service.list_users()[1] == updated
    assert _ids(service) == [1, 2, 3]


def test_update_forces_path_id(service: UserService) -> None:
    updated = service.update_user(2, UserPayload(id=7, name="Bagus2", age=26))

    assert updated.id == 2
    assert 7 not in _ids(service)


def test_update_missing_user_raises_not_found(service: UserService) -> None:
    with pytest.raises(NotFound):
        service.update_user(999, UserPayload(name="Nobody", age=1))


def test_update_validates_before_lookup(service: UserService) -> None:
    with pytest.raises(ValidationError):
        service.update_user(999, UserPayload(name="Nobody", age=-5))


def test_invalid_update_keeps_old_record(service: UserService) -> None:
    with pytest.raises(ValidationError):
        service.update_user(2, UserPayload(name="", age=26))

    assert service.get_user(2).name == "Bagus"


def test_delete_removes_record_and_keeps_order(service: UserService) -> None:
    service.delete_user(1)

    assert _ids(service) == [2, 3]
    with pytest.raises(NotFound):
        service.get_user(1)


def test_second_delete_raises_not_found(service: UserService) -> None:
    service.delete_user(2)

    with pytest.raises(NotFound):
        service.delete_user(2)
    assert _ids(service) == [1, 3]


def test_deleted_max_id_is_reused(service: UserService) -> None:
    """New ids come from the current maximum, not from a counter."""

    service.delete_user(3)
    user = service.create_user(UserPayload(name="Reused", age=20))

    assert user.id == 3


def test_reset_restores_seed(service: UserService) -> None:
    service.delete_user(1)
    service.create_user(UserPayload(name="Dana", age=40))

    service.reset()

    assert _ids(service) == [1, 2, 3]


def test_concurrent_creates_get_unique_ids(service: UserService) -> None:
    per_thread = 25
    threads = [
        threading.Thread(
            target=lambda: [service.create_user(UserPayload(name="T", age=1)) for _ in range(per_thread)]
        )
        for _ in range(8)
    ]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()

    ids = _ids(service)
    assert len(ids) == 3 + 8 * per_thread
    assert len(set(ids)) == len(ids)
