"""Product aggregate.

Products belong to one company and have their own lifecycle: they are
added, edited, re-priced in bulk and removed.  Price lists only keep a
reference to a product plus the price computed when the list was made,
so nothing here ever touches an existing price list.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum

from catalog.domain.exceptions import ValidationError
from catalog.domain.model.discount import DiscountSpec
from catalog.domain.model.value_objects import Money, blank_to_none
from catalog.domain.service.price_adjustment import adjust_price


class ProductType(Enum):
    POTE = "Pote"
    BLISTER = "Blister"
    FRASCO = "Frasco"


class Manufacturer(Enum):
    UNIAO_FLORA = "União Flora"
    FORCE_SENS = "Force Sens"


def parse_product_type(value: str) -> ProductType:
    try:
        return ProductType(value.strip())
    except ValueError:
        allowed = ", ".join(t.value for t in ProductType)
        raise ValidationError(
            f"Unknown product type '{value}' (expected one of: {allowed})"
        )


def parse_manufacturer(value: str) -> Manufacturer:
    try:
        return Manufacturer(value.strip())
    except ValueError:
        allowed = ", ".join(m.value for m in Manufacturer)
        raise ValidationError(
            f"Unknown manufacturer '{value}' (expected one of: {allowed})"
        )


def _now() -> datetime:
    return datetime.now(timezone.utc)


@dataclass
class Product:
    """A product in a company's catalog.

    Mutable because edits and bulk re-pricing are legitimate mutations
    on the aggregate.  Prices entered by hand must be positive; a bulk
    adjustment may bring a price down to exactly zero.
    """

    id: str
    company_id: str
    description: str
    type: ProductType
    price: Money
    manufacturer: Manufacturer
    portion: str | None = None
    photo_url: str | None = None
    created_at: datetime = field(default_factory=_now)
    updated_at: datetime = field(default_factory=_now)

    @staticmethod
    def create(
        product_id: str,
        company_id: str,
        description: str,
        type: ProductType,
        price: Money,
        manufacturer: Manufacturer,
        portion: str | None = None,
        photo_url: str | None = None,
    ) -> Product:
        """Create a new product, enforcing all invariants."""
        product = Product(
            id=product_id,
            company_id=company_id,
            description="",
            type=type,
            price=price,
            manufacturer=manufacturer,
        )
        product.edit(description, type, price, manufacturer, portion, photo_url)
        return product

    def edit(
        self,
        description: str,
        type: ProductType,
        price: Money,
        manufacturer: Manufacturer,
        portion: str | None = None,
        photo_url: str | None = None,
    ) -> None:
        """Replace every editable field (full update)."""
        if not description or not description.strip():
            raise ValidationError("Product description is required")
        if price.is_zero:
            raise ValidationError("Product price must be greater than zero")
        photo_url = blank_to_none(photo_url)
        if photo_url and not photo_url.startswith("http"):
            raise ValidationError(f"Photo URL must start with http: '{photo_url}'")

        self.description = description.strip()
        self.type = type
        self.price = price
        self.manufacturer = manufacturer
        self.portion = blank_to_none(portion)
        self.photo_url = photo_url
        self.updated_at = _now()

    def apply_adjustment(self, spec: DiscountSpec) -> None:
        """Re-price in place (bulk adjustment).  Clamps at zero."""
        self.price = adjust_price(self.price, spec)
        self.updated_at = _now()
