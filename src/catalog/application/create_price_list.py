"""Application service: Create Price List use case.

Computes each selected product's adjusted price once and stores it as a
new snapshot row on the list.  Products themselves are never modified;
the same price adjustment engine as bulk re-pricing is used, only the
persistence differs (insert a new list instead of overwriting prices).
"""

from __future__ import annotations

import logging

from catalog.application.dto import PriceListCreatedDTO
from catalog.application.ownership import owned_products, require_company
from catalog.domain.model.discount import DiscountSpec
from catalog.domain.model.price_list import PriceList
from catalog.domain.repository.company_repository import CompanyRepository
from catalog.domain.repository.price_list_repository import PriceListRepository
from catalog.domain.repository.product_repository import ProductRepository

logger = logging.getLogger(__name__)


def public_url(base_url: str, list_id: str) -> str:
    return f"{base_url.rstrip('/')}/lists/{list_id}"


class CreatePriceListHandler:

    def __init__(
        self,
        company_repo: CompanyRepository,
        product_repo: ProductRepository,
        price_list_repo: PriceListRepository,
        public_base_url: str,
    ) -> None:
        self._company_repo = company_repo
        self._product_repo = product_repo
        self._price_list_repo = price_list_repo
        self._public_base_url = public_base_url

    def handle(
        self,
        user_id: str,
        name: str,
        product_ids: list[str],
        discount: DiscountSpec | None = None,
    ) -> PriceListCreatedDTO:
        """Create a shareable list.  A missing discount keeps base prices."""
        company = require_company(self._company_repo, user_id)
        products = owned_products(self._product_repo, company, product_ids)

        price_list = PriceList.create(
            company_id=company.id,
            name=name,
            products=products,
            discount=discount,
        )
        self._price_list_repo.save(price_list)

        logger.info("Created price list %s '%s' with %d items",
                    price_list.id, price_list.name, price_list.item_count)
        return PriceListCreatedDTO(
            id=price_list.id,
            url=public_url(self._public_base_url, price_list.id),
            item_count=price_list.item_count,
        )
