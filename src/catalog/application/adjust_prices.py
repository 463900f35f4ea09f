"""Application service: Adjust Prices use case (bulk re-pricing).

Applies one discount to a selection of the caller's products and writes
the result back onto each product.  The arithmetic lives in the price
adjustment engine; this handler only decides that the result *replaces*
the stored price.  Price lists created earlier keep their own snapshot.
"""

from __future__ import annotations

import logging

from catalog.application.ownership import owned_products, require_company
from catalog.domain.exceptions import DomainException
from catalog.domain.model.discount import DiscountSpec
from catalog.domain.repository.company_repository import CompanyRepository
from catalog.domain.repository.product_repository import ProductRepository

logger = logging.getLogger(__name__)


class AdjustPricesHandler:

    def __init__(
        self,
        company_repo: CompanyRepository,
        product_repo: ProductRepository,
    ) -> None:
        self._company_repo = company_repo
        self._product_repo = product_repo

    def handle(self, user_id: str, product_ids: list[str], discount: DiscountSpec) -> int:
        """Re-price every product in *product_ids*.  Returns the count updated.

        Ownership of every ID is checked before any price changes, so an
        unknown ID leaves the whole catalog untouched.
        """
        company = require_company(self._company_repo, user_id)
        try:
            products = owned_products(self._product_repo, company, product_ids)
        except DomainException:
            logger.warning("Rejected price adjustment of %d products for company #%s",
                           len(product_ids), company.id)
            raise

        for product in products:
            product.apply_adjustment(discount)
        self._product_repo.save_all(products)

        logger.info("Adjusted %d prices by %s for company #%s", len(products), discount, company.id)
        return len(products)
