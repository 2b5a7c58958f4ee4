"""Thin async wrapper around the inventory REST API."""

from __future__ import annotations

import json
import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from typing import Any

import httpx

from .exceptions import RequestFailed

logger = logging.getLogger(__name__)


class ApiClient:
    """Issue single-attempt JSON requests against a fixed base URL."""

    def __init__(
        self,
        base_url: str,
        *,
        client: httpx.AsyncClient | None = None,
    ) -> None:
        self._base_url = base_url.rstrip("/")
        self._client = client

    @property
    def base_url(self) -> str:
        return self._base_url

    async def request(
        self,
        method: str,
        path: str,
        body: Any = None,
        *,
        failure_message: str = "Request failed",
    ) -> Any:
        """Send one request and return the decoded JSON body, or ``None`` when empty.

        Any transport error or non-2xx status raises :class:`RequestFailed`
        carrying ``failure_message``; the server's own error body is not surfaced.
        """

        url = f"{self._base_url}/{path.lstrip('/')}"
        verb = method.upper()
        try:
            async with self._client_scope() as client:
                if body is None:
                    response = await client.request(verb, url)
                else:
                    response = await client.request(verb, url, json=body)
            response.raise_for_status()
        except httpx.HTTPStatusError as exc:
            status = exc.response.status_code
            logger.warning("%s %s failed with status %s", verb, path, status)
            raise RequestFailed(failure_message, status_code=status) from exc
        except httpx.HTTPError as exc:
            logger.warning("%s %s failed: %s", verb, path, exc)
            raise RequestFailed(failure_message) from exc

        if not response.content.strip():
            return None
        try:
            return response.json()
        except (json.JSONDecodeError, UnicodeDecodeError) as exc:
            logger.warning("%s %s returned a body that is not JSON", verb, path)
            raise RequestFailed(failure_message, status_code=response.status_code) from exc

    @asynccontextmanager
    async def _client_scope(self) -> AsyncIterator[httpx.AsyncClient]:
        if self._client is not None:
            yield self._client
            return
        async with httpx.AsyncClient() as client:
            yield client


__all__ = ["ApiClient"]
