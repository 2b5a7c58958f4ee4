"""Navigation errors."""

from __future__ import annotations


class NavigationError(RuntimeError):
    """Base class for navigation shell failures."""


class RouteNotFound(NavigationError, LookupError):
    """Raised when navigating to a path with no screen."""


__all__ = ["NavigationError", "RouteNotFound"]
