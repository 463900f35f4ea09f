"""JSON-file-backed implementation of ProductRepository."""

from __future__ import annotations

from datetime import datetime
from decimal import Decimal
from pathlib import Path

from catalog.domain.model.product import Manufacturer, Product, ProductType
from catalog.domain.model.value_objects import DEFAULT_CURRENCY, Money
from catalog.domain.repository.product_repository import ProductRepository
from catalog.infrastructure.persistence.json_file import JsonFile


class JsonProductRepository(ProductRepository):

    def __init__(self, file_path: Path) -> None:
        self._file = JsonFile(file_path)

    # --- ProductRepository interface ------------------------------------------

    def next_id(self) -> str:
        return self._file.next_id()

    def get_by_id(self, product_id: str) -> Product | None:
        return self._load().get(product_id)

    def list_by_company(self, company_id: str) -> list[Product]:
        return [p for p in self._load().values() if p.company_id == company_id]

    def save(self, product: Product) -> None:
        self.save_all([product])

    def save_all(self, products: list[Product]) -> None:
        stored = self._load()
        for product in products:
            stored[product.id] = product
        self._persist(stored)

    def delete(self, product_ids: list[str]) -> None:
        stored = self._load()
        for product_id in product_ids:
            stored.pop(product_id, None)
        self._persist(stored)

    # --- Serialization helpers ------------------------------------------------

    def _load(self) -> dict[str, Product]:
        return {raw["id"]: self._to_domain(raw) for raw in self._file.load()}

    def _persist(self, products: dict[str, Product]) -> None:
        self._file.persist([self._to_raw(p) for p in products.values()])

    @staticmethod
    def _to_raw(product: Product) -> dict:
        return {
            "id": product.id,
            "company_id": product.company_id,
            "description": product.description,
            "type": product.type.value,
            "portion": product.portion,
            "price": str(product.price.amount),
            "currency": product.price.currency,
            "manufacturer": product.manufacturer.value,
            "photo_url": product.photo_url,
            "created_at": product.created_at.isoformat(),
            "updated_at": product.updated_at.isoformat(),
        }

    @staticmethod
    def _to_domain(raw: dict) -> Product:
        return Product(
            id=raw["id"],
            company_id=raw["company_id"],
            description=raw["description"],
            type=ProductType(raw["type"]),
            price=Money(Decimal(raw["price"]), raw.get("currency", DEFAULT_CURRENCY)),
            manufacturer=Manufacturer(raw["manufacturer"]),
            portion=raw.get("portion"),
            photo_url=raw.get("photo_url"),
            created_at=datetime.fromisoformat(raw["created_at"]),
            updated_at=datetime.fromisoformat(raw["updated_at"]),
        )
