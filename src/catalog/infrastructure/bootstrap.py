"""Composition root: wires concrete implementations to domain interfaces.

This is the only place in the codebase that knows about *all* layers.
Every other module depends only on abstractions.
"""

from __future__ import annotations

from pathlib import Path

from catalog.infrastructure.persistence.json_company_repository import (
    JsonCompanyRepository,
)
from catalog.infrastructure.persistence.json_price_list_repository import (
    JsonPriceListRepository,
)
from catalog.infrastructure.persistence.json_product_repository import (
    JsonProductRepository,
)


def company_repository(data_dir: Path) -> JsonCompanyRepository:
    return JsonCompanyRepository(data_dir / "companies.json")


def product_repository(data_dir: Path) -> JsonProductRepository:
    return JsonProductRepository(data_dir / "products.json")


def price_list_repository(data_dir: Path) -> JsonPriceListRepository:
    return JsonPriceListRepository(data_dir / "price_lists.json")
