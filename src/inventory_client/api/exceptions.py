"""Exceptions raised by the HTTP client wrapper."""

from __future__ import annotations


class RequestFailed(RuntimeError):
    """Raised when an API call fails at the transport level or returns a non-2xx status."""

    def __init__(self, message: str, *, status_code: int | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.status_code = status_code


__all__ = ["RequestFailed"]
