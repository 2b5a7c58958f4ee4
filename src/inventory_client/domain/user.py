"""User registration models."""

from __future__ import annotations

from datetime import datetime
from typing import Annotated

from pydantic import Field, field_validator

from .base import DomainModel, ResourceModel
from .enums import UserRole
from .types import UserId


class UserRegistration(DomainModel):
    """Body posted to the users endpoint. Never persisted by the client."""

    name: Annotated[str, Field(min_length=1)]
    email: Annotated[str, Field(min_length=1)]
    password: Annotated[str, Field(min_length=1, repr=False)]
    role: UserRole = UserRole.USER


class User(ResourceModel):
    """User echoed back by the API after registration."""

    id: UserId
    name: str
    email: str
    role: str = UserRole.USER.value
    created_at: datetime | None = None
    updated_at: datetime | None = None

    @field_validator("id", mode="before")
    @classmethod
    def coerce_id(cls, value: object) -> object:
        if isinstance(value, int) and not isinstance(value, bool):
            return str(value)
        return value


__all__ = ["User", "UserRegistration"]
