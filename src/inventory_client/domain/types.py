"""Shared type aliases for the domain layer."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, NewType

ProductId = NewType("ProductId", str)
UserId = NewType("UserId", str)
JsonMapping = Mapping[str, Any]

__all__ = ["JsonMapping", "ProductId", "UserId"]
