"""Application-layer input models for IAM bounded context.

Inputs are validated on construction; a ``pydantic.ValidationError`` is a
caller error and never reaches the store.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class UserUpdate(BaseModel):
    """Administrative settings an administrator may change on a user."""

    model_config = ConfigDict(frozen=True)

    is_active: bool
    is_admin: bool
    location_id: int = Field(ge=0)


class RoleInput(BaseModel):
    """Name and granted permissions of a role."""

    model_config = ConfigDict(frozen=True, str_strip_whitespace=True)

    name: str = Field(min_length=1, max_length=50)
    permission_ids: list[int] = Field(default_factory=list)
