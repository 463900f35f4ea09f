"""Application service: Show Public Price List use case (query).

This is what a customer sees through a shared link, so it needs no
authenticated user.  Product details are read live; prices come from
the list's frozen snapshot.
"""

from __future__ import annotations

from datetime import datetime, timezone

from catalog.application.dto import (
    PublicCompanyDTO,
    PublicPriceListDTO,
    PublicPriceListItemDTO,
    product_to_dto,
)
from catalog.domain.exceptions import EntityNotFoundError
from catalog.domain.repository.company_repository import CompanyRepository
from catalog.domain.repository.price_list_repository import PriceListRepository
from catalog.domain.repository.product_repository import ProductRepository


class ShowPublicPriceListHandler:

    def __init__(
        self,
        company_repo: CompanyRepository,
        product_repo: ProductRepository,
        price_list_repo: PriceListRepository,
    ) -> None:
        self._company_repo = company_repo
        self._product_repo = product_repo
        self._price_list_repo = price_list_repo

    def handle(self, list_id: str) -> PublicPriceListDTO:
        price_list = self._price_list_repo.get_by_id(list_id)
        company = (
            self._company_repo.get_by_id(price_list.company_id)
            if price_list is not None
            else None
        )
        if price_list is None or company is None:
            raise EntityNotFoundError(f"Price list '{list_id}' not found")

        rows = []
        for item in price_list.items:
            product = self._product_repo.get_by_id(item.product_id)
            if product is None:
                continue
            rows.append((product, item.adjusted_price))
        rows.sort(key=lambda row: row[0].description.casefold())

        return PublicPriceListDTO(
            id=price_list.id,
            name=price_list.name,
            company=PublicCompanyDTO(
                name=company.name,
                phone=company.phone,
                contact_person=company.contact_person,
                logo_url=company.logo_url,
            ),
            items=[
                PublicPriceListItemDTO(product=product_to_dto(product), adjusted_price=str(price))
                for product, price in rows
            ],
            generated_at=datetime.now(timezone.utc).isoformat(),
        )
