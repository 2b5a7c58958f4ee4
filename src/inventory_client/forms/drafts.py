"""Typed drafts holding raw form input."""

from __future__ import annotations

from pydantic import Field

from inventory_client.domain import MutableDomainModel, Product, UserRole


class ProductDraft(MutableDomainModel):
    """Text values of the product form, exactly as typed."""

    name: str = ""
    description: str = ""
    price: str = ""
    stock: str = ""

    @classmethod
    def from_product(cls, product: Product) -> ProductDraft:
        return cls(
            name=product.name,
            description=product.description,
            price=_format_price(product.price),
            stock=str(product.stock),
        )


class RegistrationDraft(MutableDomainModel):
    """Text values of the registration form."""

    name: str = ""
    email: str = ""
    password: str = Field(default="", repr=False)
    role: str = UserRole.USER.value


def _format_price(value: float) -> str:
    # 10.0 renders as "10", 9.99 as "9.99"
    return str(int(value)) if value.is_integer() else repr(value)


__all__ = ["ProductDraft", "RegistrationDraft"]
