"""Application service: List Price Lists use case (query)."""

from __future__ import annotations

from catalog.application.dto import TIMESTAMP_FORMAT, PriceListSummaryDTO
from catalog.application.ownership import require_company
from catalog.domain.repository.company_repository import CompanyRepository
from catalog.domain.repository.price_list_repository import PriceListRepository


class ListPriceListsHandler:

    def __init__(
        self,
        company_repo: CompanyRepository,
        price_list_repo: PriceListRepository,
    ) -> None:
        self._company_repo = company_repo
        self._price_list_repo = price_list_repo

    def handle(self, user_id: str) -> list[PriceListSummaryDTO]:
        """Return the caller's price lists, newest first."""
        company = require_company(self._company_repo, user_id)
        lists = sorted(
            self._price_list_repo.list_by_company(company.id),
            key=lambda pl: pl.created_at,
            reverse=True,
        )
        return [
            PriceListSummaryDTO(
                id=pl.id,
                name=pl.name,
                discount=str(pl.discount) if pl.discount and not pl.discount.is_neutral else None,
                item_count=pl.item_count,
                created_at=pl.created_at.strftime(TIMESTAMP_FORMAT),
            )
            for pl in lists
        ]
