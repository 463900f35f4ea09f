"""DiscountSpec value object: a signed price adjustment.

The sign of ``magnitude`` carries the meaning: negative is a discount,
positive a surcharge, zero leaves the price unchanged.
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal
from enum import Enum

from catalog.domain.exceptions import ValidationError


class DiscountKind(Enum):
    PERCENTAGE = "percentage"
    FIXED = "fixed"


@dataclass(frozen=True)
class DiscountSpec:

    magnitude: Decimal
    kind: DiscountKind

    def __post_init__(self) -> None:
        if not isinstance(self.magnitude, Decimal):
            raise ValidationError(
                f"Discount magnitude must be a Decimal, got {type(self.magnitude).__name__}"
            )
        if not self.magnitude.is_finite():
            raise ValidationError(f"Discount magnitude must be finite, got {self.magnitude}")

    @staticmethod
    def percentage(magnitude: str | int | Decimal) -> DiscountSpec:
        return DiscountSpec(Decimal(str(magnitude)), DiscountKind.PERCENTAGE)

    @staticmethod
    def fixed(magnitude: str | int | Decimal) -> DiscountSpec:
        return DiscountSpec(Decimal(str(magnitude)), DiscountKind.FIXED)

    @property
    def is_neutral(self) -> bool:
        return self.magnitude == 0

    def __str__(self) -> str:
        """Canonical text form, e.g. ``-10%`` or ``+2.50``."""
        sign = "+" if self.magnitude >= 0 else "-"
        if self.kind is DiscountKind.PERCENTAGE:
            return f"{sign}{abs(self.magnitude).normalize():f}%"
        return f"{sign}{abs(self.magnitude):.2f}"


# Applying this spec returns the base price unchanged.
NO_DISCOUNT = DiscountSpec(Decimal("0"), DiscountKind.PERCENTAGE)
