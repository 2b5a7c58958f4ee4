"""Operation-specific failures raised by entity services."""

from __future__ import annotations

from inventory_client.api import RequestFailed


class FetchFailed(RequestFailed):
    """Raised when a list or single-resource read fails."""


class CreateFailed(RequestFailed):
    """Raised when a resource could not be created."""


class UpdateFailed(RequestFailed):
    """Raised when a resource could not be updated."""


class DeleteFailed(RequestFailed):
    """Raised when a resource could not be deleted."""


__all__ = ["CreateFailed", "DeleteFailed", "FetchFailed", "UpdateFailed"]
