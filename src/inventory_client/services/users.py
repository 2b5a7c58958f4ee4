"""User registration service."""

from __future__ import annotations

import logging

from pydantic import ValidationError

from inventory_client.api import ApiClient, RequestFailed
from inventory_client.domain import User, UserRegistration

from .exceptions import CreateFailed

logger = logging.getLogger(__name__)


class UserService:
    """Write-only facade over ``POST /users``."""

    def __init__(self, client: ApiClient) -> None:
        self._client = client

    async def create(self, registration: UserRegistration) -> User | None:
        """Register a user; returns the echoed record when the server sends one."""

        message = "Failed to create user"
        try:
            body = await self._client.request(
                "POST", "/users", registration.model_dump(mode="json"), failure_message=message
            )
        except RequestFailed as exc:
            raise CreateFailed(message, status_code=exc.status_code) from exc
        if not isinstance(body, dict):
            return None
        try:
            return User.model_validate(body)
        except ValidationError as exc:
            # The record exists server-side even when the echo is malformed.
            logger.warning("Ignoring unexpected user payload: %s", exc)
            return None


__all__ = ["UserService"]
