"""Product resource service."""

from __future__ import annotations

from typing import Any

from pydantic import ValidationError

from inventory_client.api import ApiClient, RequestFailed
from inventory_client.domain import Product, ProductId, ProductPayload

from .exceptions import CreateFailed, DeleteFailed, FetchFailed, UpdateFailed

_COLLECTION = "/products"


class ProductService:
    """Typed facade over the ``/products`` endpoints."""

    def __init__(self, client: ApiClient) -> None:
        self._client = client

    async def list(self) -> tuple[Product, ...]:
        message = "Failed to fetch products"
        try:
            payload = await self._client.request("GET", _COLLECTION, failure_message=message)
        except RequestFailed as exc:
            raise FetchFailed(message, status_code=exc.status_code) from exc
        if payload is None:
            return ()
        if not isinstance(payload, list):
            raise FetchFailed(message)
        try:
            return tuple(Product.model_validate(item) for item in payload)
        except ValidationError as exc:
            raise FetchFailed(message) from exc

    async def get_by_id(self, product_id: ProductId) -> Product:
        message = "Failed to fetch product"
        try:
            payload = await self._client.request(
                "GET", _item_path(product_id), failure_message=message
            )
        except RequestFailed as exc:
            raise FetchFailed(message, status_code=exc.status_code) from exc
        return _parse_product(payload, FetchFailed(message))

    async def create(self, payload: ProductPayload) -> Product:
        message = "Failed to create product"
        try:
            body = await self._client.request(
                "POST", _COLLECTION, payload.model_dump(mode="json"), failure_message=message
            )
        except RequestFailed as exc:
            raise CreateFailed(message, status_code=exc.status_code) from exc
        return _parse_product(body, CreateFailed(message))

    async def update(self, product_id: ProductId, payload: ProductPayload) -> Product:
        message = "Failed to update product"
        try:
            body = await self._client.request(
                "PUT",
                _item_path(product_id),
                payload.model_dump(mode="json"),
                failure_message=message,
            )
        except RequestFailed as exc:
            raise UpdateFailed(message, status_code=exc.status_code) from exc
        return _parse_product(body, UpdateFailed(message))

    async def delete(self, product_id: ProductId) -> bool:
        message = "Failed to delete product"
        try:
            await self._client.request("DELETE", _item_path(product_id), failure_message=message)
        except RequestFailed as exc:
            raise DeleteFailed(message, status_code=exc.status_code) from exc
        return True


def _item_path(product_id: ProductId) -> str:
    return f"{_COLLECTION}/{product_id}"


def _parse_product(payload: Any, error: RequestFailed) -> Product:
    if not isinstance(payload, dict):
        raise error
    try:
        return Product.model_validate(payload)
    except ValidationError as exc:
        raise error from exc


__all__ = ["ProductService"]
