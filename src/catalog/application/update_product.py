"""Application service: Update Product use case."""

from __future__ import annotations

import logging

from catalog.application.add_product import product_fields
from catalog.application.dto import ProductDTO, ProductInput, product_to_dto
from catalog.application.ownership import owned_product, require_company
from catalog.domain.repository.company_repository import CompanyRepository
from catalog.domain.repository.product_repository import ProductRepository

logger = logging.getLogger(__name__)


class UpdateProductHandler:

    def __init__(
        self,
        company_repo: CompanyRepository,
        product_repo: ProductRepository,
    ) -> None:
        self._company_repo = company_repo
        self._product_repo = product_repo

    def handle(self, user_id: str, product_id: str, data: ProductInput) -> ProductDTO:
        """Replace a product's details, including its price.

        This does NOT affect any existing price list. Lists captured
        an adjusted-price snapshot at creation time.
        """
        company = require_company(self._company_repo, user_id)
        product = owned_product(self._product_repo, company, product_id)

        product.edit(**product_fields(data))
        self._product_repo.save(product)
        logger.info("Updated product #%s", product.id)
        return product_to_dto(product)
