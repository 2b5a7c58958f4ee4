"""Product table screen: collection state, form dialog and banners."""

from __future__ import annotations

import inspect
import logging
from collections.abc import Awaitable, Callable

from inventory_client.api import RequestFailed
from inventory_client.domain import FormMode, Product, ProductId, Route
from inventory_client.forms import FormError, ProductFormController
from inventory_client.services import ProductGateway

from .banners import BannerState

logger = logging.getLogger(__name__)

ConfirmGate = Callable[[str], bool | Awaitable[bool]]

FETCH_ERROR = "Error fetching products"
DELETE_PROMPT = "Are you sure you want to delete this product?"


def decline_all(_message: str) -> bool:
    """Confirmation gate that never approves; the safe default for headless use."""

    return False


class ProductListController:
    """Owns the visible product collection and refetches it after every mutation."""

    route = Route.PRODUCTS

    def __init__(
        self,
        service: ProductGateway,
        *,
        confirm: ConfirmGate = decline_all,
    ) -> None:
        self._service = service
        self._confirm = confirm
        self._products: tuple[Product, ...] = ()
        self._refresh_seq = 0
        self._pending_refreshes = 0
        self._active = True
        self.form = ProductFormController(service)
        self.banners = BannerState()

    @property
    def products(self) -> tuple[Product, ...]:
        return self._products

    @property
    def active(self) -> bool:
        return self._active

    @property
    def refreshing(self) -> bool:
        return self._pending_refreshes > 0

    async def mount(self) -> None:
        await self.refresh()

    def deactivate(self) -> None:
        self._active = False

    async def refresh(self) -> bool:
        """Replace the collection with the server's; keep the old one on failure.

        Every call issues its own request; only the most recently issued one
        may update the collection or banners.
        """

        self._refresh_seq += 1
        seq = self._refresh_seq
        self._pending_refreshes += 1
        try:
            products = await self._service.list()
        except RequestFailed as exc:
            if self._discard("refresh") or self._superseded(seq):
                return False
            logger.warning("Product refresh failed: %s", exc)
            self.banners.show_error(FETCH_ERROR)
            return False
        finally:
            self._pending_refreshes -= 1

        if self._discard("refresh") or self._superseded(seq):
            return False
        self._products = tuple(products)
        return True

    def find(self, product_id: ProductId) -> Product | None:
        for product in self._products:
            if product.id == product_id:
                return product
        return None

    def open_create(self) -> None:
        self.form.open_create()

    def open_edit(self, product_id: ProductId) -> Product:
        product = self.find(product_id)
        if product is None:
            msg = f"Product {product_id} is not in the current list"
            raise LookupError(msg)
        self.form.open_edit(product)
        return product

    def set_field(self, name: str, value: str) -> None:
        self.form.set_field(name, value)

    def close_form(self) -> None:
        self.form.close()

    async def submit_form(self) -> Product | None:
        """Submit the open dialog, then refetch; errors become the error banner."""

        self.banners.clear()
        mode = self.form.mode
        try:
            product = await self.form.submit()
        except (FormError, RequestFailed) as exc:
            if self._discard("submit"):
                return None
            self.banners.show_error(str(exc) or "Error saving product")
            return None

        if self._discard("submit"):
            return None
        if mode is FormMode.EDIT:
            self.banners.show_success("Product updated successfully")
        else:
            self.banners.show_success("Product created successfully")
        await self.refresh()
        return product

    async def request_delete(self, product_id: ProductId) -> bool:
        """Delete after an explicit yes from the confirmation gate."""

        approved = self._confirm(DELETE_PROMPT)
        if inspect.isawaitable(approved):
            approved = await approved
        if not approved:
            logger.info("Delete of product %s declined", product_id)
            return False

        self.banners.clear()
        try:
            await self._service.delete(product_id)
        except RequestFailed as exc:
            if self._discard("delete"):
                return False
            self.banners.show_error(str(exc) or "Error deleting product")
            return False

        if self._discard("delete"):
            return False
        self.banners.show_success("Product deleted successfully")
        await self.refresh()
        return True

    def _superseded(self, seq: int) -> bool:
        if seq == self._refresh_seq:
            return False
        logger.debug("Dropping product list response %s; %s is newer", seq, self._refresh_seq)
        return True

    def _discard(self, action: str) -> bool:
        if self._active:
            return False
        logger.debug("Discarding %s result for inactive product list", action)
        return True


__all__ = ["DELETE_PROMPT", "FETCH_ERROR", "ConfirmGate", "ProductListController", "decline_all"]
