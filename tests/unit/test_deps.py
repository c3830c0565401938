"""Unit tests for the path id parser."""

from __future__ import annotations

import pytest

from user_registry_api.app.api.deps import parse_user_id, parse_user_id_value
from user_registry_api.app.core.errors import InvalidArgument


@pytest.mark.parametrize(
    "raw, expected",
    [
        ("1", 1),
        ("+2", 2),
        ("-7", -7),
        ("007", 7),
        ("9223372036854775807", 2**63 - 1),
        ("-9223372036854775808", -(2**63)),
    ],
)
def test_parses_signed_int64(raw: str, expected: int) -> None:
    assert parse_user_id_value(raw) == expected


@pytest.mark.parametrize(
    "raw",
    ["", "1.0", " 2", "2\n", "1_0", "1e3", "٣", "9223372036854775808", "-9223372036854775809"],
)
def test_rejects_anything_else(raw: str) -> None:
    assert parse_user_id_value(raw) is None


def test_dependency_raises_invalid_argument() -> None:
    with pytest.raises(InvalidArgument) as excinfo:
        parse_user_id("1.0")

    assert excinfo.value.message == "Invalid user ID"
    assert excinfo.value.status_code == 400
