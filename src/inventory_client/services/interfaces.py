"""Protocols for the entity services consumed by controllers."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Protocol

from inventory_client.domain import Product, ProductId, ProductPayload, User, UserRegistration


class ProductGateway(Protocol):
    """CRUD contract for the product resource."""

    async def list(self) -> Sequence[Product]: ...

    async def get_by_id(self, product_id: ProductId) -> Product: ...

    async def create(self, payload: ProductPayload) -> Product: ...

    async def update(self, product_id: ProductId, payload: ProductPayload) -> Product: ...

    async def delete(self, product_id: ProductId) -> bool: ...


class UserGateway(Protocol):
    """Write-only contract for user registration."""

    async def create(self, registration: UserRegistration) -> User | None: ...


__all__ = ["ProductGateway", "UserGateway"]
