"""Data Transfer Objects: plain containers that cross layer boundaries.

DTOs carry data between the CLI and application layers without
exposing domain internals to the outside world.  Money is passed as
display strings (two decimal places).
"""

from __future__ import annotations

from dataclasses import dataclass

from catalog.domain.model.company import Company
from catalog.domain.model.product import Product

TIMESTAMP_FORMAT = "%Y-%m-%d %H:%M UTC"


@dataclass(frozen=True)
class ProductInput:
    """Input: one product as typed by the user or read from an import file."""

    description: str
    type: str
    price: str
    manufacturer: str
    portion: str | None = None
    photo_url: str | None = None


@dataclass(frozen=True)
class CompanyDTO:
    id: str
    name: str
    phone: str | None
    contact_person: str | None
    logo_url: str | None
    updated_at: str


@dataclass(frozen=True)
class ProductDTO:
    id: str
    description: str
    type: str
    portion: str | None
    price: str  # formatted, e.g. "BRL 15.00"
    manufacturer: str
    photo_url: str | None


@dataclass(frozen=True)
class PriceListCreatedDTO:
    id: str
    url: str
    item_count: int


@dataclass(frozen=True)
class PriceListSummaryDTO:
    id: str
    name: str
    discount: str | None  # canonical text, e.g. "-10%"
    item_count: int
    created_at: str


@dataclass(frozen=True)
class PublicCompanyDTO:
    name: str
    phone: str | None
    contact_person: str | None
    logo_url: str | None


@dataclass(frozen=True)
class PublicPriceListItemDTO:
    product: ProductDTO
    adjusted_price: str


@dataclass(frozen=True)
class PublicPriceListDTO:
    """Output: what a customer sees when opening a shared list."""

    id: str
    name: str
    company: PublicCompanyDTO
    items: list[PublicPriceListItemDTO]
    generated_at: str


# --- Mapping ------------------------------------------------------------------


def company_to_dto(company: Company) -> CompanyDTO:
    return CompanyDTO(
        id=company.id,
        name=company.name,
        phone=company.phone,
        contact_person=company.contact_person,
        logo_url=company.logo_url,
        updated_at=company.updated_at.strftime(TIMESTAMP_FORMAT),
    )


def product_to_dto(product: Product) -> ProductDTO:
    return ProductDTO(
        id=product.id,
        description=product.description,
        type=product.type.value,
        portion=product.portion,
        price=str(product.price),
        manufacturer=product.manufacturer.value,
        photo_url=product.photo_url,
    )
