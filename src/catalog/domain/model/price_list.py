"""PriceList aggregate: a shareable, frozen set of adjusted prices.

A price list is built once from a discount and a selection of products.
Each PriceListItem stores the adjusted price computed at that moment;
later changes to the product never reach an existing list.
"""

from __future__ import annotations

import uuid
from dataclasses import dataclass, field
from datetime import datetime, timezone

from catalog.domain.exceptions import ValidationError
from catalog.domain.model.discount import NO_DISCOUNT, DiscountSpec
from catalog.domain.model.product import Product
from catalog.domain.model.value_objects import Money
from catalog.domain.service.price_adjustment import adjust_price


@dataclass(frozen=True)
class PriceListItem:
    """Snapshot row: product reference plus its locked adjusted price."""

    product_id: str
    adjusted_price: Money


@dataclass
class PriceList:
    """Aggregate root for price lists.

    Use ``PriceList.create()`` for new lists.  The ``__init__`` stays
    simple so the repository can reconstitute persisted lists as-is.
    """

    id: str
    company_id: str
    name: str
    discount: DiscountSpec | None
    items: list[PriceListItem]
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    @staticmethod
    def create(
        company_id: str,
        name: str,
        products: list[Product],
        discount: DiscountSpec | None = None,
    ) -> PriceList:
        """Build a new list and snapshot the adjusted price of every product."""
        if not name or not name.strip():
            raise ValidationError("Price list name is required")
        if not products:
            raise ValidationError("Price list must contain at least one product")

        spec = discount or NO_DISCOUNT
        items = [
            PriceListItem(product_id=p.id, adjusted_price=adjust_price(p.price, spec))
            for p in products
        ]
        return PriceList(
            id=str(uuid.uuid4()),
            company_id=company_id,
            name=name.strip(),
            discount=discount,
            items=items,
        )

    @property
    def item_count(self) -> int:
        return len(self.items)

    def drop_products(self, product_ids: set[str]) -> int:
        """Remove rows for deleted products.  Returns how many were dropped."""
        kept = [item for item in self.items if item.product_id not in product_ids]
        dropped = len(self.items) - len(kept)
        self.items = kept
        return dropped
