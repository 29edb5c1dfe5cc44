"""Application-layer input models for Inventory bounded context.

Inputs are validated on construction; a ``pydantic.ValidationError`` is a
caller error and never reaches the store.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field, HttpUrl, field_validator

MAX_URL_LENGTH = 2048


class LocationInput(BaseModel):
    """Editable fields of a location."""

    model_config = ConfigDict(frozen=True, str_strip_whitespace=True)

    name: str = Field(min_length=2, max_length=100)


class MachineInput(BaseModel):
    """Editable fields of a machine.

    ``location_id`` and ``app_user_id`` are not checked against existing
    rows; both are soft references.
    """

    model_config = ConfigDict(frozen=True, str_strip_whitespace=True)

    name: str = Field(min_length=2, max_length=50)
    location_id: int = Field(ge=1)
    app_user_id: int | None = Field(default=None, ge=1)


class ExternalApplicationInput(BaseModel):
    """Editable fields of an external application shortcut."""

    model_config = ConfigDict(frozen=True, str_strip_whitespace=True)

    app_name: str = Field(min_length=1, max_length=100)
    app_url: HttpUrl
    icon_name: str = Field(min_length=1, max_length=100)

    @field_validator("app_url")
    @classmethod
    def validate_url_length(cls, value: HttpUrl) -> HttpUrl:
        if len(str(value)) > MAX_URL_LENGTH:
            raise ValueError(f"URL must be at most {MAX_URL_LENGTH} characters")
        return value

    @property
    def url(self) -> str:
        """The URL in the form it is stored."""
        return str(self.app_url)
