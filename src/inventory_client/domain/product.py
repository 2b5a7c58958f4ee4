"""Product resource models."""

from __future__ import annotations

from datetime import datetime
from typing import Annotated

from pydantic import Field, field_validator

from .base import DomainModel, ResourceModel
from .types import ProductId


class Product(ResourceModel):
    """Product as returned by the inventory API."""

    id: ProductId
    name: Annotated[str, Field(min_length=1)]
    description: str = ""
    price: Annotated[float, Field(ge=0.0)]
    stock: Annotated[int, Field(ge=0)]
    created_at: datetime | None = None
    updated_at: datetime | None = None

    @field_validator("id", mode="before")
    @classmethod
    def coerce_id(cls, value: object) -> object:
        # The server keys products by integer; the client treats ids as opaque text.
        if isinstance(value, int) and not isinstance(value, bool):
            return str(value)
        return value


class ProductPayload(DomainModel):
    """Body sent when creating or updating a product."""

    name: Annotated[str, Field(min_length=1)]
    description: str = ""
    price: Annotated[float, Field(ge=0.0)]
    stock: Annotated[int, Field(ge=0)]


__all__ = ["Product", "ProductPayload"]
