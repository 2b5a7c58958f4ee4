"""Entity services wrapping the REST resources."""

from .exceptions import CreateFailed, DeleteFailed, FetchFailed, UpdateFailed
from .interfaces import ProductGateway, UserGateway
from .products import ProductService
from .users import UserService

__all__ = [
    "CreateFailed",
    "DeleteFailed",
    "FetchFailed",
    "ProductGateway",
    "ProductService",
    "UpdateFailed",
    "UserGateway",
    "UserService",
]
