"""JSON-file-backed implementation of PriceListRepository.

Items are stored inside their list record; adjusted prices are written
as exact decimal strings so the snapshot survives a round trip unchanged.
"""

from __future__ import annotations

from datetime import datetime
from decimal import Decimal
from pathlib import Path

from catalog.domain.model.discount import DiscountKind, DiscountSpec
from catalog.domain.model.price_list import PriceList, PriceListItem
from catalog.domain.model.value_objects import DEFAULT_CURRENCY, Money
from catalog.domain.repository.price_list_repository import PriceListRepository
from catalog.infrastructure.persistence.json_file import JsonFile


class JsonPriceListRepository(PriceListRepository):

    def __init__(self, file_path: Path) -> None:
        self._file = JsonFile(file_path)

    # --- PriceListRepository interface ----------------------------------------

    def get_by_id(self, list_id: str) -> PriceList | None:
        for raw in self._file.load():
            if raw["id"] == list_id:
                return self._to_domain(raw)
        return None

    def list_by_company(self, company_id: str) -> list[PriceList]:
        return [
            self._to_domain(raw)
            for raw in self._file.load()
            if raw["company_id"] == company_id
        ]

    def save(self, price_list: PriceList) -> None:
        records = self._file.load()

        # Upsert: replace if exists, otherwise append
        replaced = False
        for i, raw in enumerate(records):
            if raw["id"] == price_list.id:
                records[i] = self._to_raw(price_list)
                replaced = True
                break
        if not replaced:
            records.append(self._to_raw(price_list))

        self._file.persist(records)

    def delete(self, list_id: str) -> None:
        records = [raw for raw in self._file.load() if raw["id"] != list_id]
        self._file.persist(records)

    # --- Serialization --------------------------------------------------------

    @staticmethod
    def _to_raw(price_list: PriceList) -> dict:
        discount = price_list.discount
        return {
            "id": price_list.id,
            "company_id": price_list.company_id,
            "name": price_list.name,
            "discount_type": discount.kind.value if discount else None,
            "discount_value": str(discount.magnitude) if discount else "0",
            "created_at": price_list.created_at.isoformat(),
            "items": [
                {
                    "product_id": item.product_id,
                    "adjusted_value": str(item.adjusted_price.amount),
                    "currency": item.adjusted_price.currency,
                }
                for item in price_list.items
            ],
        }

    @staticmethod
    def _to_domain(raw: dict) -> PriceList:
        discount = None
        if raw.get("discount_type"):
            discount = DiscountSpec(
                Decimal(raw["discount_value"]), DiscountKind(raw["discount_type"])
            )
        items = [
            PriceListItem(
                product_id=i["product_id"],
                adjusted_price=Money(
                    Decimal(i["adjusted_value"]), i.get("currency", DEFAULT_CURRENCY)
                ),
            )
            for i in raw["items"]
        ]
        return PriceList(
            id=raw["id"],
            company_id=raw["company_id"],
            name=raw["name"],
            discount=discount,
            items=items,
            created_at=datetime.fromisoformat(raw["created_at"]),
        )
