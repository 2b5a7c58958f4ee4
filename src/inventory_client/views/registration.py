"""Registration screen controller."""

from __future__ import annotations

import logging
from collections.abc import Awaitable, Callable

from inventory_client.api import RequestFailed
from inventory_client.domain import Route, User
from inventory_client.forms import FormError, RegistrationFormController
from inventory_client.services import UserGateway

from .banners import BannerState

logger = logging.getLogger(__name__)

RegisteredCallback = Callable[[User | None], Awaitable[None] | None]

SUCCESS_MESSAGE = "Registration successful!"


class RegistrationController:
    route = Route.REGISTER

    def __init__(
        self,
        service: UserGateway,
        *,
        on_registered: RegisteredCallback | None = None,
    ) -> None:
        self.form = RegistrationFormController(service)
        self.banners = BannerState()
        self._on_registered = on_registered
        self._active = True
        self.form.open()

    @property
    def active(self) -> bool:
        return self._active

    async def mount(self) -> None:
        return None

    def deactivate(self) -> None:
        self._active = False

    def set_field(self, name: str, value: str) -> None:
        self.form.set_field(name, value)

    async def submit(self) -> bool:
        """Register the drafted user and hand control to ``on_registered``."""

        self.banners.clear()
        try:
            user = await self.form.submit()
        except (FormError, RequestFailed) as exc:
            if not self._active:
                return False
            self.banners.show_error(str(exc) or "An error occurred during registration")
            return False

        if not self._active:
            logger.debug("Discarding registration result for inactive screen")
            return False
        self.banners.show_success(SUCCESS_MESSAGE)
        if self._on_registered is not None:
            outcome = self._on_registered(user)
            if outcome is not None:
                await outcome
        return True


__all__ = ["RegisteredCallback", "RegistrationController", "SUCCESS_MESSAGE"]
