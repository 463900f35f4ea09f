"""Application service: Delete Product and Clear Products use cases.

Deleting products also prunes the price-list rows that point at them,
so a shared list never references a product that no longer exists.
Prices already frozen for the remaining rows are left untouched.
"""

from __future__ import annotations

import logging

from catalog.application.ownership import owned_product, require_company
from catalog.domain.model.company import Company
from catalog.domain.repository.company_repository import CompanyRepository
from catalog.domain.repository.price_list_repository import PriceListRepository
from catalog.domain.repository.product_repository import ProductRepository

logger = logging.getLogger(__name__)


class _ProductRemoval:

    def __init__(
        self,
        company_repo: CompanyRepository,
        product_repo: ProductRepository,
        price_list_repo: PriceListRepository,
    ) -> None:
        self._company_repo = company_repo
        self._product_repo = product_repo
        self._price_list_repo = price_list_repo

    def _remove(self, company: Company, product_ids: list[str]) -> None:
        doomed = set(product_ids)
        for price_list in self._price_list_repo.list_by_company(company.id):
            if price_list.drop_products(doomed):
                self._price_list_repo.save(price_list)
        self._product_repo.delete(product_ids)


class DeleteProductHandler(_ProductRemoval):

    def handle(self, user_id: str, product_id: str) -> None:
        company = require_company(self._company_repo, user_id)
        product = owned_product(self._product_repo, company, product_id)
        self._remove(company, [product.id])
        logger.info("Deleted product #%s", product.id)


class ClearProductsHandler(_ProductRemoval):

    def handle(self, user_id: str) -> int:
        """Delete the caller's whole catalog.  Returns the number removed."""
        company = require_company(self._company_repo, user_id)
        product_ids = [p.id for p in self._product_repo.list_by_company(company.id)]
        if product_ids:
            self._remove(company, product_ids)
        logger.info("Cleared %d products of company #%s", len(product_ids), company.id)
        return len(product_ids)
