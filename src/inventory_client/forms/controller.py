"""Form state controllers for the product and registration forms."""

from __future__ import annotations

import logging
import math
from decimal import Decimal, InvalidOperation
from typing import Generic, TypeVar

from inventory_client.domain import (
    FormMode,
    MutableDomainModel,
    Product,
    ProductId,
    ProductPayload,
    User,
    UserRegistration,
    UserRole,
)
from inventory_client.services import ProductGateway, UserGateway

from .drafts import ProductDraft, RegistrationDraft
from .exceptions import FormClosedError, SubmissionInProgress, ValidationFailed

logger = logging.getLogger(__name__)

DraftT = TypeVar("DraftT", bound=MutableDomainModel)


class FormController(Generic[DraftT]):
    """Shared draft bookkeeping: field edits, close, and the in-flight guard."""

    draft_type: type[DraftT]

    def __init__(self) -> None:
        self._draft: DraftT | None = None
        self._in_flight = False

    @property
    def draft(self) -> DraftT | None:
        return self._draft

    @property
    def is_open(self) -> bool:
        return self._draft is not None

    @property
    def in_flight(self) -> bool:
        return self._in_flight

    def set_field(self, name: str, value: str) -> None:
        """Overwrite a single draft field without validating it."""

        draft = self._require_draft()
        if name not in self.draft_type.model_fields:
            msg = f"{self.draft_type.__name__} has no field {name!r}"
            raise ValueError(msg)
        setattr(draft, name, value)

    def close(self) -> None:
        self._draft = None

    def _require_draft(self) -> DraftT:
        if self._draft is None:
            raise FormClosedError("No form is open")
        return self._draft

    def _claim_submission(self) -> DraftT:
        draft = self._require_draft()
        if self._in_flight:
            raise SubmissionInProgress("A submission is already in progress")
        return draft

    def _finish(self, draft: DraftT) -> None:
        # Only discard the draft that was submitted; the user may have reopened the form.
        if self._draft is draft:
            self.close()


class ProductFormController(FormController[ProductDraft]):
    """Create/edit dialog state for a single product."""

    draft_type = ProductDraft

    def __init__(self, service: ProductGateway) -> None:
        super().__init__()
        self._service = service
        self._mode: FormMode | None = None
        self._editing_id: ProductId | None = None

    @property
    def mode(self) -> FormMode | None:
        return self._mode

    @property
    def editing_id(self) -> ProductId | None:
        return self._editing_id

    def open_create(self) -> None:
        self._draft = ProductDraft()
        self._mode = FormMode.CREATE
        self._editing_id = None

    def open_edit(self, product: Product) -> None:
        self._draft = ProductDraft.from_product(product)
        self._mode = FormMode.EDIT
        self._editing_id = product.id

    def close(self) -> None:
        super().close()
        self._mode = None
        self._editing_id = None

    def validate(self) -> ProductPayload:
        """Check the current draft and coerce it into a request payload."""

        draft = self._require_draft()
        errors: dict[str, str] = {}

        name = draft.name.strip()
        if not name:
            errors["name"] = "is required"

        price = _parse_price(draft.price, errors)
        stock = _parse_stock(draft.stock, errors)

        if errors or price is None or stock is None:
            raise ValidationFailed(errors)
        return ProductPayload(
            name=name,
            description=draft.description.strip(),
            price=price,
            stock=stock,
        )

    async def submit(self) -> Product:
        """Validate then create or update; the draft survives any failure."""

        draft = self._claim_submission()
        payload = self.validate()
        mode, editing_id = self._mode, self._editing_id

        self._in_flight = True
        try:
            if mode is FormMode.EDIT and editing_id is not None:
                product = await self._service.update(editing_id, payload)
            else:
                product = await self._service.create(payload)
        finally:
            self._in_flight = False

        logger.info("Product %s %s", product.id, "updated" if mode is FormMode.EDIT else "created")
        self._finish(draft)
        return product


class RegistrationFormController(FormController[RegistrationDraft]):
    """Single-mode form that registers a new user."""

    draft_type = RegistrationDraft

    def __init__(self, service: UserGateway) -> None:
        super().__init__()
        self._service = service

    def open(self) -> None:
        self._draft = RegistrationDraft()

    def validate(self) -> UserRegistration:
        draft = self._require_draft()
        errors: dict[str, str] = {}
        values = {
            "name": draft.name.strip(),
            "email": draft.email.strip(),
            "password": draft.password,
            "role": draft.role.strip(),
        }
        for field, value in values.items():
            if not value:
                errors[field] = "is required"

        role: UserRole | None = None
        if values["role"]:
            try:
                role = UserRole(values["role"].lower())
            except ValueError:
                choices = ", ".join(item.value for item in UserRole)
                errors["role"] = f"must be one of {choices}"

        if errors or role is None:
            raise ValidationFailed(errors)
        return UserRegistration(
            name=values["name"],
            email=values["email"],
            password=values["password"],
            role=role,
        )

    async def submit(self) -> User | None:
        draft = self._claim_submission()
        registration = self.validate()

        self._in_flight = True
        try:
            user = await self._service.create(registration)
        finally:
            self._in_flight = False

        self._finish(draft)
        return user


def _parse_price(raw: str, errors: dict[str, str]) -> float | None:
    text = raw.strip()
    if not text:
        errors["price"] = "is required"
        return None
    try:
        value = Decimal(text)
    except InvalidOperation:
        errors["price"] = "must be a number"
        return None
    if not value.is_finite():
        errors["price"] = "must be a number"
        return None
    if value < 0:
        errors["price"] = "must not be negative"
        return None
    price = float(value)
    if math.isinf(price):
        errors["price"] = "is too large"
        return None
    return price


def _parse_stock(raw: str, errors: dict[str, str]) -> int | None:
    text = raw.strip()
    if not text:
        errors["stock"] = "is required"
        return None
    try:
        value = int(text)
    except ValueError:
        errors["stock"] = "must be a whole number"
        return None
    if value < 0:
        errors["stock"] = "must not be negative"
        return None
    return value


__all__ = ["FormController", "ProductFormController", "RegistrationFormController"]
