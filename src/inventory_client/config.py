"""Lightweight application configuration loader."""

from __future__ import annotations

import os
from dataclasses import dataclass


@dataclass(frozen=True)
class AppSettings:
    """Immutable configuration sourced from environment variables."""

    environment: str = "development"
    api_base_url: str = "http://localhost:8080/api"
    log_level: str = "WARNING"

    @classmethod
    def from_env(cls) -> AppSettings:
        return cls(
            environment=os.getenv("INVENTORY_ENV", cls.environment),
            api_base_url=os.getenv("INVENTORY_API_BASE_URL") or cls.api_base_url,
            log_level=os.getenv("INVENTORY_LOG_LEVEL", cls.log_level).upper(),
        )


__all__ = ["AppSettings"]
