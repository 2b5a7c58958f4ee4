"""Route-based navigation between the registration and product screens."""

from __future__ import annotations

import logging
from typing import Protocol

from inventory_client.domain import Route, User
from inventory_client.services import ProductGateway, UserGateway
from inventory_client.views import (
    ConfirmGate,
    ProductListController,
    RegistrationController,
    decline_all,
)

from .exceptions import RouteNotFound

logger = logging.getLogger(__name__)

DEFAULT_ROUTE = Route.REGISTER
_REDIRECTS: dict[str, Route] = {"/": DEFAULT_ROUTE, "": DEFAULT_ROUTE}


class Screen(Protocol):
    route: Route

    async def mount(self) -> None: ...

    def deactivate(self) -> None: ...


class NavigationShell:
    """Maps routes to freshly built screen controllers; at most one is active."""

    def __init__(
        self,
        products: ProductGateway,
        users: UserGateway,
        *,
        confirm: ConfirmGate = decline_all,
    ) -> None:
        self._products = products
        self._users = users
        self._confirm = confirm
        self._screen: Screen | None = None

    @property
    def route(self) -> Route | None:
        return self._screen.route if self._screen is not None else None

    @property
    def screen(self) -> Screen | None:
        return self._screen

    @staticmethod
    def resolve(path: str) -> Route:
        normalized = path.strip()
        if normalized in _REDIRECTS:
            return _REDIRECTS[normalized]
        normalized = "/" + normalized.strip("/")
        try:
            return Route(normalized)
        except ValueError as exc:
            msg = f"No screen is registered for {path!r}"
            raise RouteNotFound(msg) from exc

    async def start(self) -> Screen:
        return await self.navigate(DEFAULT_ROUTE)

    async def navigate(self, path: str) -> Screen:
        """Deactivate the current screen, then build and mount the target one."""

        route = self.resolve(path)
        if self._screen is not None:
            self._screen.deactivate()
        screen = self._build(route)
        self._screen = screen
        logger.debug("Navigated to %s", route.value)
        await screen.mount()
        return screen

    async def logout(self) -> Screen:
        # No session exists server-side; returning to registration is the whole effect.
        return await self.navigate(Route.REGISTER)

    def _build(self, route: Route) -> Screen:
        if route is Route.PRODUCTS:
            return ProductListController(self._products, confirm=self._confirm)
        return RegistrationController(self._users, on_registered=self._after_registration)

    async def _after_registration(self, user: User | None) -> None:
        if user is not None:
            logger.info("Registered user %s", user.id)
        await self.navigate(Route.PRODUCTS)


__all__ = ["DEFAULT_ROUTE", "NavigationShell", "Screen"]
