"""Application service: List Products use case (query).

Supports the catalog screen's search box, type and manufacturer
filters, and column sorting.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from catalog.application.dto import ProductDTO, product_to_dto
from catalog.application.ownership import require_company
from catalog.domain.model.product import Product, parse_manufacturer, parse_product_type
from catalog.domain.repository.company_repository import CompanyRepository
from catalog.domain.repository.product_repository import ProductRepository


class SortField(Enum):
    DESCRIPTION = "description"
    PRICE = "price"
    TYPE = "type"
    MANUFACTURER = "manufacturer"


_SORT_KEYS = {
    SortField.DESCRIPTION: lambda p: p.description.casefold(),
    SortField.PRICE: lambda p: p.price.amount,
    SortField.TYPE: lambda p: p.type.value.casefold(),
    SortField.MANUFACTURER: lambda p: p.manufacturer.value.casefold(),
}


@dataclass(frozen=True)
class ProductQuery:
    search: str | None = None
    type: str | None = None
    manufacturer: str | None = None
    sort_by: SortField | None = None  # None -> newest first
    descending: bool = False


class ListProductsHandler:

    def __init__(
        self,
        company_repo: CompanyRepository,
        product_repo: ProductRepository,
    ) -> None:
        self._company_repo = company_repo
        self._product_repo = product_repo

    def handle(self, user_id: str, query: ProductQuery | None = None) -> list[ProductDTO]:
        query = query or ProductQuery()
        company = require_company(self._company_repo, user_id)
        products = [
            p for p in self._product_repo.list_by_company(company.id)
            if self._matches(p, query)
        ]

        if query.sort_by is None:
            products.sort(key=lambda p: (p.created_at, int(p.id)), reverse=True)
        else:
            products.sort(key=_SORT_KEYS[query.sort_by], reverse=query.descending)

        return [product_to_dto(p) for p in products]

    @staticmethod
    def _matches(product: Product, query: ProductQuery) -> bool:
        if query.search and query.search.casefold() not in product.description.casefold():
            return False
        if query.type and product.type is not parse_product_type(query.type):
            return False
        if query.manufacturer and product.manufacturer is not parse_manufacturer(query.manufacturer):
            return False
        return True
