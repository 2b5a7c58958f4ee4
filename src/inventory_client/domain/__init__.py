"""Domain models exchanged with the inventory API."""

from .base import DomainModel, MutableDomainModel, ResourceModel
from .enums import BannerKind, FormMode, Route, UserRole
from .product import Product, ProductPayload
from .types import JsonMapping, ProductId, UserId
from .user import User, UserRegistration

__all__ = [
    "BannerKind",
    "DomainModel",
    "FormMode",
    "JsonMapping",
    "MutableDomainModel",
    "Product",
    "ProductId",
    "ProductPayload",
    "ResourceModel",
    "Route",
    "User",
    "UserId",
    "UserRegistration",
    "UserRole",
]
