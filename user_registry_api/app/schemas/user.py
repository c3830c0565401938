"""
Pydantic models for user data.

``UserPayload`` is the request body for create and update.  Its
fields are optional and strictly typed: a body with the wrong JSON
types, or with integers outside the signed 64-bit range, fails to
parse (reported as ``Invalid input``), while a body with missing
fields parses and is then rejected by
``services.validation.validate_user`` with a field-specific message.

``UserRead`` is the stored record and the response body.
"""

from typing import Optional

from pydantic import BaseModel, Field, StrictInt, StrictStr

# Ids and ages are signed 64-bit integers.
INT64_MIN = -(2**63)
INT64_MAX = 2**63 - 1


class UserPayload(BaseModel):
    """Schema for the body of ``POST /users`` and ``PUT /users/{id}``."""

    # Accepted for compatibility with clients that echo records back;
    # the server always assigns or forces the id.
    id: Optional[StrictInt] = Field(
        None, ge=INT64_MIN, le=INT64_MAX, description="Ignored; the server assigns ids"
    )
    name: Optional[StrictStr] = Field(None, examples=["Dana"])
    # Only the int64 range is checked here; "0 or greater" is a
    # validation rule with its own message.
    age: Optional[StrictInt] = Field(
        None, ge=INT64_MIN, le=INT64_MAX, examples=[40], description="Must be 0 or greater"
    )


class UserRead(BaseModel):
    """Schema for a stored user record."""

    id: int = Field(..., examples=[1])
    name: str = Field(..., examples=["Agus"])
    age: int = Field(..., examples=[15])

    model_config = {
        "from_attributes": True,
    }
