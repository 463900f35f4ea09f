"""Domain service: Price Adjustment Engine.

One pure function decides what a discount does to a price.  It is shared
by both places that re-price products:

- bulk re-pricing, which writes the result back onto the product, and
- price-list creation, which stores the result as a frozen snapshot.

Neither caller may compute prices any other way.
"""

from __future__ import annotations

from decimal import Decimal

from catalog.domain.model.discount import DiscountKind, DiscountSpec
from catalog.domain.model.value_objects import Money

_ZERO = Decimal("0")
_HUNDRED = Decimal("100")


def apply_discount(base_price: Decimal, spec: DiscountSpec) -> Decimal:
    """Return *base_price* adjusted by *spec*, floored at zero.

    No rounding happens here; display code formats to two places.
    """
    if spec.kind is DiscountKind.PERCENTAGE:
        adjusted = base_price * (1 + spec.magnitude / _HUNDRED)
    else:
        adjusted = base_price + spec.magnitude
    return max(_ZERO, adjusted)


def adjust_price(price: Money, spec: DiscountSpec) -> Money:
    """Money-typed wrapper around :func:`apply_discount`."""
    return Money(apply_discount(price.amount, spec), price.currency)
