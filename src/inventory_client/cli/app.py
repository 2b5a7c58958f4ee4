"""Typer CLI driving the inventory client screens."""

from __future__ import annotations

import asyncio
import logging

import typer

from inventory_client.domain import Product, ProductId, Route, UserRole
from inventory_client.navigation import NavigationShell
from inventory_client.services import FetchFailed
from inventory_client.views import BannerState, ProductListController, RegistrationController

from .deps import get_container, get_settings

app = typer.Typer(help="Inventory client command-line interface")
products_app = typer.Typer(help="Product table operations")
app.add_typer(products_app, name="products")


@app.callback()
def configure(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging"),
) -> None:
    """Configure logging before any command runs."""

    level_name = "DEBUG" if verbose else get_settings().log_level
    logging.basicConfig(
        level=getattr(logging, level_name, logging.WARNING),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def _report(banners: BannerState, *, succeeded: bool) -> None:
    """Print banners; exit 1 only when the command's own action failed.

    A failed refetch after a successful mutation is reported as a warning.
    """

    if banners.error:
        prefix = "Warning" if succeeded else "Error"
        typer.echo(f"{prefix}: {banners.error}")
    if banners.success:
        typer.echo(banners.success)
    if banners.error and not succeeded:
        raise typer.Exit(code=1)


def _format_row(product: Product) -> str:
    return f"{product.id}\t{product.name}\t{product.description}\t${product.price:.2f}\t{product.stock}"


async def _open_products(shell: NavigationShell) -> ProductListController:
    screen = await shell.navigate(Route.PRODUCTS)
    if not isinstance(screen, ProductListController):
        raise TypeError(f"{Route.PRODUCTS.value} mounted {type(screen).__name__}")
    return screen


async def _open_registration(shell: NavigationShell) -> RegistrationController:
    screen = await shell.start()
    if not isinstance(screen, RegistrationController):
        raise TypeError(f"{Route.REGISTER.value} mounted {type(screen).__name__}")
    return screen


@app.command("show-settings")
def show_settings() -> None:
    """Print the resolved application settings."""

    settings = get_container().settings
    typer.echo("Environment:\t" + settings.environment)
    typer.echo("API base URL:\t" + settings.api_base_url)
    typer.echo("Log level:\t" + settings.log_level)


@app.command("register")
def register(
    name: str = typer.Option(..., help="Full name"),
    email: str = typer.Option(..., help="Email address"),
    password: str = typer.Option(..., prompt=True, hide_input=True),
    role: UserRole = typer.Option(UserRole.USER, case_sensitive=False),
) -> None:
    """Register a user, then continue to the product list."""

    shell = get_container().build_shell()

    async def _run() -> tuple[RegistrationController, bool]:
        screen = await _open_registration(shell)
        screen.set_field("name", name)
        screen.set_field("email", email)
        screen.set_field("password", password)
        screen.set_field("role", role.value)
        return screen, await screen.submit()

    screen, registered = asyncio.run(_run())
    _report(screen.banners, succeeded=registered)
    if registered and shell.route is Route.PRODUCTS:
        typer.echo("Now viewing " + Route.PRODUCTS.value)


@products_app.command("list")
def products_list() -> None:
    """Show the product table as returned by the server."""

    shell = get_container().build_shell()
    controller = asyncio.run(_open_products(shell))
    _report(controller.banners, succeeded=False)
    if not controller.products:
        typer.echo("No products found")
        return
    for product in controller.products:
        typer.echo(_format_row(product))


@products_app.command("show")
def products_show(product_id: str) -> None:
    """Fetch a single product."""

    service = get_container().product_service
    try:
        product = asyncio.run(service.get_by_id(ProductId(product_id)))
    except FetchFailed as exc:
        typer.echo(f"Error: {exc}")
        raise typer.Exit(code=1) from exc
    typer.echo(_format_row(product))


@products_app.command("create")
def products_create(
    name: str = typer.Option(..., help="Product name"),
    price: str = typer.Option(..., help="Unit price"),
    stock: str = typer.Option(..., help="Units in stock"),
    description: str = typer.Option("", help="Free-text description"),
) -> None:
    """Create a product through the product form."""

    shell = get_container().build_shell()

    async def _run() -> tuple[ProductListController, Product | None]:
        controller = await _open_products(shell)
        controller.open_create()
        controller.set_field("name", name)
        controller.set_field("description", description)
        controller.set_field("price", price)
        controller.set_field("stock", stock)
        return controller, await controller.submit_form()

    controller, product = asyncio.run(_run())
    _report(controller.banners, succeeded=product is not None)
    if product is not None:
        typer.echo(f"Created product {product.id}")


@products_app.command("update")
def products_update(
    product_id: str,
    name: str | None = typer.Option(None, help="New name"),
    description: str | None = typer.Option(None, help="New description"),
    price: str | None = typer.Option(None, help="New unit price"),
    stock: str | None = typer.Option(None, help="New stock count"),
) -> None:
    """Edit a product; omitted fields keep their current values."""

    shell = get_container().build_shell()
    changes = {
        "name": name,
        "description": description,
        "price": price,
        "stock": stock,
    }

    async def _run() -> tuple[ProductListController, Product | None]:
        controller = await _open_products(shell)
        try:
            controller.open_edit(ProductId(product_id))
        except LookupError:
            controller.banners.show_error(f"Product {product_id} not found")
            return controller, None
        for field, value in changes.items():
            if value is not None:
                controller.set_field(field, value)
        return controller, await controller.submit_form()

    controller, product = asyncio.run(_run())
    _report(controller.banners, succeeded=product is not None)
    if product is not None:
        typer.echo(f"Updated product {product.id}")


@products_app.command("delete")
def products_delete(
    product_id: str,
    yes: bool = typer.Option(False, "--yes", "-y", help="Skip the confirmation prompt"),
) -> None:
    """Delete a product after confirmation."""

    def _confirm(message: str) -> bool:
        return yes or typer.confirm(message, default=False)

    shell = get_container().build_shell(confirm=_confirm)

    async def _run() -> tuple[ProductListController, bool]:
        controller = await _open_products(shell)
        return controller, await controller.request_delete(ProductId(product_id))

    controller, deleted = asyncio.run(_run())
    _report(controller.banners, succeeded=deleted)
    if not deleted:
        typer.echo("Delete cancelled")
