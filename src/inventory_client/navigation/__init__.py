"""Navigation shell and routing errors."""

from .exceptions import NavigationError, RouteNotFound
from .shell import DEFAULT_ROUTE, NavigationShell, Screen

__all__ = ["DEFAULT_ROUTE", "NavigationError", "NavigationShell", "RouteNotFound", "Screen"]
