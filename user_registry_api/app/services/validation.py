"""
Field rules for user payloads.

``validate_user`` checks a parsed :class:`UserPayload` against the
rules below and returns every violation it finds, in rule order.  An
empty list means the payload is acceptable.

========  ==========  ==========================
field     rule        message
========  ==========  ==========================
name      required    name is required
age       required    age is required
age       min         age must be 0 or greater
========  ==========  ==========================
"""

from dataclasses import dataclass
from typing import List

from ..schemas.user import UserPayload

MIN_AGE = 0


@dataclass(frozen=True)
class Violation:
    """A single failed validation rule."""

    field: str
    rule: str
    message: str


def validate_user(payload: UserPayload) -> List[Violation]:
    violations: List[Violation] = []

    if payload.name is None or payload.name == "":
        violations.append(Violation("name", "required", "name is required"))

    if payload.age is None:
        violations.append(Violation("age", "required", "age is required"))
    elif payload.age < MIN_AGE:
        violations.append(Violation("age", "min", f"age must be {MIN_AGE} or greater"))

    return violations
