"""Form state exceptions."""

from __future__ import annotations

from collections.abc import Mapping


class FormError(RuntimeError):
    """Base class for form controller failures."""


class ValidationFailed(FormError):
    """Raised when a draft fails client-side validation; no request is issued."""

    def __init__(self, errors: Mapping[str, str]) -> None:
        self.errors = dict(errors)
        details = "; ".join(f"{field}: {reason}" for field, reason in self.errors.items())
        super().__init__(f"Invalid form fields ({details})")

    @property
    def fields(self) -> tuple[str, ...]:
        return tuple(self.errors)


class SubmissionInProgress(FormError):
    """Raised when a submit is attempted while the previous one is still pending."""


class FormClosedError(FormError):
    """Raised when editing or submitting with no active form."""


__all__ = ["FormClosedError", "FormError", "SubmissionInProgress", "ValidationFailed"]
