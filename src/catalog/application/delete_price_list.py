"""Application service: Delete Price List use case.

Deleting the list is the only way its snapshot rows go away.
"""

from __future__ import annotations

import logging

from catalog.application.ownership import require_company
from catalog.domain.exceptions import EntityNotFoundError
from catalog.domain.repository.company_repository import CompanyRepository
from catalog.domain.repository.price_list_repository import PriceListRepository

logger = logging.getLogger(__name__)


class DeletePriceListHandler:

    def __init__(
        self,
        company_repo: CompanyRepository,
        price_list_repo: PriceListRepository,
    ) -> None:
        self._company_repo = company_repo
        self._price_list_repo = price_list_repo

    def handle(self, user_id: str, list_id: str) -> None:
        company = require_company(self._company_repo, user_id)
        price_list = self._price_list_repo.get_by_id(list_id)
        if price_list is None or price_list.company_id != company.id:
            raise EntityNotFoundError(f"Price list '{list_id}' not found")

        self._price_list_repo.delete(list_id)
        logger.info("Deleted price list %s", list_id)
