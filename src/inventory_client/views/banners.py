"""Single-slot success/error banners shown after an action."""

from __future__ import annotations

from dataclasses import dataclass

from inventory_client.domain import BannerKind


@dataclass(slots=True)
class BannerState:
    """Holds at most one success and one error message."""

    success: str | None = None
    error: str | None = None

    def clear(self) -> None:
        self.success = None
        self.error = None

    def show_success(self, message: str) -> None:
        self.success = message

    def show_error(self, message: str) -> None:
        self.error = message

    def visible(self) -> tuple[tuple[BannerKind, str], ...]:
        shown: list[tuple[BannerKind, str]] = []
        if self.error:
            shown.append((BannerKind.ERROR, self.error))
        if self.success:
            shown.append((BannerKind.SUCCESS, self.success))
        return tuple(shown)


__all__ = ["BannerState"]
