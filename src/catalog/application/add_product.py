"""Application service: Add Product use case."""

from __future__ import annotations

import logging

from catalog.application.dto import ProductDTO, ProductInput, product_to_dto
from catalog.application.ownership import require_company
from catalog.domain.model.product import Product, parse_manufacturer, parse_product_type
from catalog.domain.model.value_objects import Money
from catalog.domain.repository.company_repository import CompanyRepository
from catalog.domain.repository.product_repository import ProductRepository

logger = logging.getLogger(__name__)


def product_fields(data: ProductInput) -> dict:
    """Convert raw input into validated keyword arguments for Product."""
    return {
        "description": data.description,
        "type": parse_product_type(data.type),
        "price": Money.of(data.price),
        "manufacturer": parse_manufacturer(data.manufacturer),
        "portion": data.portion,
        "photo_url": data.photo_url,
    }


class AddProductHandler:

    def __init__(
        self,
        company_repo: CompanyRepository,
        product_repo: ProductRepository,
    ) -> None:
        self._company_repo = company_repo
        self._product_repo = product_repo

    def handle(self, user_id: str, data: ProductInput) -> ProductDTO:
        """Add a new product to the caller's catalog."""
        company = require_company(self._company_repo, user_id)

        product = Product.create(
            product_id=self._product_repo.next_id(),
            company_id=company.id,
            **product_fields(data),
        )
        self._product_repo.save(product)
        logger.info("Added product #%s '%s' at %s", product.id, product.description, product.price)
        return product_to_dto(product)
