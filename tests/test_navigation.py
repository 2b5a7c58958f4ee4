from __future__ import annotations

import asyncio
from typing import TYPE_CHECKING

import pytest

from inventory_client.domain import Product, Route
from inventory_client.navigation import NavigationShell, RouteNotFound
from inventory_client.views import ProductListController, RegistrationController

if TYPE_CHECKING:
    from conftest import InMemoryProductService, RecordingUserService


def _register(screen: RegistrationController, **values: str) -> bool:
    for name, value in values.items():
        screen.set_field(name, value)
    return asyncio.run(screen.submit())


@pytest.mark.parametrize("path", ["/", "", "/register", "register/"])
def test_resolve_defaults_to_registration(path: str) -> None:
    assert NavigationShell.resolve(path) is Route.REGISTER


def test_resolve_unknown_path() -> None:
    with pytest.raises(RouteNotFound):
        NavigationShell.resolve("/invoices")


def test_start_mounts_registration_without_network(
    product_service: InMemoryProductService, user_service: RecordingUserService
) -> None:
    shell = NavigationShell(product_service, user_service)

    screen = asyncio.run(shell.start())

    assert isinstance(screen, RegistrationController)
    assert shell.route is Route.REGISTER
    assert product_service.network_calls() == []


def test_navigate_to_products_refreshes_and_deactivates_previous(
    product_service: InMemoryProductService, user_service: RecordingUserService, widget: Product
) -> None:
    product_service.seed(widget)
    shell = NavigationShell(product_service, user_service)
    first = asyncio.run(shell.start())

    screen = asyncio.run(shell.navigate("/products"))

    assert isinstance(screen, ProductListController)
    assert screen.products == (widget,)
    assert first.active is False
    assert shell.screen is screen


def test_each_visit_builds_a_fresh_screen(
    product_service: InMemoryProductService, user_service: RecordingUserService
) -> None:
    shell = NavigationShell(product_service, user_service)

    first = asyncio.run(shell.navigate(Route.PRODUCTS))
    second = asyncio.run(shell.navigate(Route.PRODUCTS))

    assert first is not second
    assert len(product_service.network_calls("list")) == 2


def test_registration_success_moves_to_products(
    product_service: InMemoryProductService, user_service: RecordingUserService
) -> None:
    shell = NavigationShell(product_service, user_service)
    screen = asyncio.run(shell.start())
    assert isinstance(screen, RegistrationController)

    registered = _register(screen, name="Ana", email="a@x.com", password="pw", role="admin")

    assert registered is True
    assert screen.banners.success == "Registration successful!"
    assert shell.route is Route.PRODUCTS
    assert isinstance(shell.screen, ProductListController)
    sent = user_service.registrations[0]
    assert (sent.name, sent.email, sent.password, sent.role.value) == ("Ana", "a@x.com", "pw", "admin")


def test_registration_failure_stays_on_form(
    product_service: InMemoryProductService, user_service: RecordingUserService
) -> None:
    user_service.fail = True
    shell = NavigationShell(product_service, user_service)
    screen = asyncio.run(shell.start())
    assert isinstance(screen, RegistrationController)

    registered = _register(screen, name="Ana", email="a@x.com", password="pw")

    assert registered is False
    assert screen.banners.error == "Failed to create user"
    assert shell.route is Route.REGISTER
    assert screen.form.draft is not None and screen.form.draft.email == "a@x.com"


def test_registration_validation_blocks_request(
    product_service: InMemoryProductService, user_service: RecordingUserService
) -> None:
    shell = NavigationShell(product_service, user_service)
    screen = asyncio.run(shell.start())
    assert isinstance(screen, RegistrationController)

    assert _register(screen, name="Ana") is False

    assert screen.banners.error is not None
    assert user_service.registrations == []


def test_logout_returns_to_empty_registration(
    product_service: InMemoryProductService, user_service: RecordingUserService
) -> None:
    shell = NavigationShell(product_service, user_service)
    screen = asyncio.run(shell.start())
    assert isinstance(screen, RegistrationController)
    screen.set_field("name", "Half typed")
    asyncio.run(shell.navigate(Route.PRODUCTS))

    fresh = asyncio.run(shell.logout())

    assert isinstance(fresh, RegistrationController)
    assert fresh is not screen
    assert fresh.form.draft is not None and fresh.form.draft.name == ""
    assert user_service.registrations == []


def test_registration_resolving_after_deactivate_is_discarded(
    user_service: RecordingUserService
) -> None:
    handed_off: list[object] = []

    async def scenario() -> RegistrationController:
        screen = RegistrationController(user_service, on_registered=handed_off.append)
        for name, value in {"name": "Ana", "email": "a@x.com", "password": "pw"}.items():
            screen.set_field(name, value)
        release = user_service.hold()
        pending = asyncio.create_task(screen.submit())
        await asyncio.sleep(0)

        screen.deactivate()
        release.set()
        assert await pending is False
        return screen

    screen = asyncio.run(scenario())
    assert screen.banners.visible() == ()
    assert handed_off == []
    assert len(user_service.registrations) == 1


def test_leaving_registration_mid_submit_keeps_new_route(
    product_service: InMemoryProductService, user_service: RecordingUserService
) -> None:
    async def scenario() -> tuple[NavigationShell, RegistrationController]:
        shell = NavigationShell(product_service, user_service)
        screen = await shell.start()
        assert isinstance(screen, RegistrationController)
        for name, value in {"name": "Ana", "email": "a@x.com", "password": "pw"}.items():
            screen.set_field(name, value)
        release = user_service.hold()
        pending = asyncio.create_task(screen.submit())
        await asyncio.sleep(0)

        await shell.navigate(Route.PRODUCTS)
        products_screen = shell.screen
        release.set()
        assert await pending is False
        assert shell.screen is products_screen
        return shell, screen

    shell, screen = asyncio.run(scenario())
    assert shell.route is Route.PRODUCTS
    assert screen.banners.success is None
    assert len(product_service.network_calls("list")) == 1
