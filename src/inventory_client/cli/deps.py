"""Process-wide settings and container for the inventory CLI."""

from __future__ import annotations

from functools import lru_cache

from inventory_client.config import AppSettings
from inventory_client.container import ServiceContainer, build_container


@lru_cache(maxsize=1)
def get_settings() -> AppSettings:
    """Read ``INVENTORY_*`` variables once per process."""

    return AppSettings.from_env()


@lru_cache(maxsize=1)
def get_container() -> ServiceContainer:
    """Inventory API client and services bound to :func:`get_settings`."""

    return build_container(get_settings())


def reset_container() -> None:
    """Forget cached settings and services so the next command rereads the environment."""

    get_container.cache_clear()
    get_settings.cache_clear()
