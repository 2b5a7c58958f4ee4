"""Enumerations shared by the client layers."""

from __future__ import annotations

from enum import StrEnum


class UserRole(StrEnum):
    """Roles a user may register with."""

    USER = "user"
    ADMIN = "admin"


class FormMode(StrEnum):
    """Whether an open form creates a new record or edits an existing one."""

    CREATE = "create"
    EDIT = "edit"


class Route(StrEnum):
    """Screens reachable through the navigation shell."""

    REGISTER = "/register"
    PRODUCTS = "/products"


class BannerKind(StrEnum):
    SUCCESS = "success"
    ERROR = "error"
