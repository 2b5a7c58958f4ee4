"""Form drafts, validation and submission."""

from .controller import FormController, ProductFormController, RegistrationFormController
from .drafts import ProductDraft, RegistrationDraft
from .exceptions import FormClosedError, FormError, SubmissionInProgress, ValidationFailed

__all__ = [
    "FormClosedError",
    "FormController",
    "FormError",
    "ProductDraft",
    "ProductFormController",
    "RegistrationDraft",
    "RegistrationFormController",
    "SubmissionInProgress",
    "ValidationFailed",
]
