"""Service container wiring application components."""

from __future__ import annotations

import logging
from dataclasses import dataclass

import httpx

from inventory_client.api import ApiClient
from inventory_client.config import AppSettings
from inventory_client.navigation import NavigationShell
from inventory_client.services import ProductService, UserService
from inventory_client.views import ConfirmGate, decline_all

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class ServiceContainer:
    """Aggregates services built from one read-only settings object."""

    settings: AppSettings
    api_client: ApiClient
    product_service: ProductService
    user_service: UserService

    def build_shell(self, confirm: ConfirmGate = decline_all) -> NavigationShell:
        return NavigationShell(self.product_service, self.user_service, confirm=confirm)


def build_container(
    settings: AppSettings | None = None,
    *,
    http_client: httpx.AsyncClient | None = None,
) -> ServiceContainer:
    """Construct the primary service container."""

    resolved_settings = settings or AppSettings.from_env()
    logger.debug("Using inventory API at %s", resolved_settings.api_base_url)
    api_client = ApiClient(resolved_settings.api_base_url, client=http_client)
    return ServiceContainer(
        settings=resolved_settings,
        api_client=api_client,
        product_service=ProductService(api_client),
        user_service=UserService(api_client),
    )


__all__ = ["ServiceContainer", "build_container"]
