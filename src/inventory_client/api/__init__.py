"""HTTP access to the inventory REST API."""

from .client import ApiClient
from .exceptions import RequestFailed

__all__ = ["ApiClient", "RequestFailed"]
