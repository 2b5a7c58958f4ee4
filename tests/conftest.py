from __future__ import annotations

import asyncio
import sys
from pathlib import Path

import pytest

# Ensure the src/ directory is importable when tests run without an install.
sys.path.append(str(Path(__file__).resolve().parents[1] / "src"))

from inventory_client.domain import (  # noqa: E402
    Product,
    ProductId,
    ProductPayload,
    User,
    UserId,
    UserRegistration,
)
from inventory_client.services import (  # noqa: E402
    CreateFailed,
    DeleteFailed,
    FetchFailed,
    UpdateFailed,
)


class InMemoryProductService:
    """Product gateway backed by a list, recording every call.

    ``hold(operation)`` makes the next call of that operation wait on the
    returned event. ``list()`` snapshots the collection when it is called,
    like a server answering a request issued at that moment.
    """

    def __init__(self) -> None:
        self.products: list[Product] = []
        self.calls: list[tuple[str, object]] = []
        self.failing: set[str] = set()
        self.fail_list_after_create = False
        self._holds: dict[str, list[asyncio.Event]] = {}
        self._next_id = 100

    def seed(self, *products: Product) -> None:
        self.products.extend(products)

    def hold(self, operation: str) -> asyncio.Event:
        event = asyncio.Event()
        self._holds.setdefault(operation, []).append(event)
        return event

    async def _wait(self, operation: str) -> None:
        pending = self._holds.get(operation)
        if pending:
            await pending.pop(0).wait()

    async def list(self) -> tuple[Product, ...]:
        self.calls.append(("list", None))
        snapshot = tuple(self.products)
        failed = "list" in self.failing or (
            self.fail_list_after_create and bool(self.network_calls("create"))
        )
        await self._wait("list")
        if failed:
            raise FetchFailed("Failed to fetch products")
        return snapshot

    async def get_by_id(self, product_id: ProductId) -> Product:
        self.calls.append(("get", product_id))
        for product in self.products:
            if product.id == product_id:
                return product
        raise FetchFailed("Failed to fetch product", status_code=404)

    async def create(self, payload: ProductPayload) -> Product:
        self.calls.append(("create", payload))
        await self._wait("create")
        if "create" in self.failing:
            raise CreateFailed("Failed to create product", status_code=500)
        self._next_id += 1
        product = Product(id=ProductId(str(self._next_id)), **payload.model_dump())
        self.products.append(product)
        return product

    async def update(self, product_id: ProductId, payload: ProductPayload) -> Product:
        self.calls.append(("update", (product_id, payload)))
        await self._wait("update")
        if "update" in self.failing:
            raise UpdateFailed("Failed to update product", status_code=500)
        for index, product in enumerate(self.products):
            if product.id == product_id:
                updated = Product(id=product_id, **payload.model_dump())
                self.products[index] = updated
                return updated
        raise UpdateFailed("Failed to update product", status_code=404)

    async def delete(self, product_id: ProductId) -> bool:
        self.calls.append(("delete", product_id))
        await self._wait("delete")
        if "delete" in self.failing:
            raise DeleteFailed("Failed to delete product", status_code=500)
        self.products = [product for product in self.products if product.id != product_id]
        return True

    def network_calls(self, name: str | None = None) -> list[tuple[str, object]]:
        if name is None:
            return list(self.calls)
        return [call for call in self.calls if call[0] == name]


class RecordingUserService:
    def __init__(self) -> None:
        self.registrations: list[UserRegistration] = []
        self.fail = False
        self._hold: asyncio.Event | None = None

    def hold(self) -> asyncio.Event:
        self._hold = asyncio.Event()
        return self._hold

    async def create(self, registration: UserRegistration) -> User | None:
        self.registrations.append(registration)
        if self._hold is not None:
            hold, self._hold = self._hold, None
            await hold.wait()
        if self.fail:
            raise CreateFailed("Failed to create user", status_code=409)
        return User(
            id=UserId(str(len(self.registrations))),
            name=registration.name,
            email=registration.email,
            role=registration.role.value,
        )


@pytest.fixture
def product_service() -> InMemoryProductService:
    return InMemoryProductService()


@pytest.fixture
def user_service() -> RecordingUserService:
    return RecordingUserService()


@pytest.fixture
def widget() -> Product:
    return Product(
        id=ProductId("42"),
        name="Widget",
        description="A widget",
        price=9.99,
        stock=10,
    )
