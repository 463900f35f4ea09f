"""Domain service: Discount Expression Parser.

Turns what a user types into a discount field (``-10%``, ``+5``,
``2,50``) into a :class:`DiscountSpec`.  The parser is called on every
keystroke, so it must tolerate half-typed input and it never raises:
each call returns exactly one outcome value.

Rules are tried in order:

1. blank input                        -> NoValue
2. ``-``, ``+``, or ``?%`` (len <= 2) -> StillTyping   (skipped when final)
3. trailing ``%``                     -> percentage, sign kept as typed
4. leading ``+`` / ``-``              -> fixed amount
5. bare number                        -> percentage if |n| <= 100, else fixed
6. anything else                      -> Unparseable if it still looks like
                                         a number being typed, otherwise
                                         InvalidFormat

Commas are decimal separators: ``"2,50"`` means ``2.50``.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from decimal import Decimal
from typing import Union

from catalog.domain.model.discount import DiscountKind, DiscountSpec

FORMAT_HINT = "-10%, +5%, -2.50, +10"
INVALID_FORMAT_MESSAGE = f"Invalid format. Use: {FORMAT_HINT}"

# Bare numbers up to this absolute value default to a percentage.
PERCENTAGE_BAND = Decimal("100")

# Shape of anything that could still become a valid discount.
_PERMISSIVE_SHAPE = re.compile(r"^[+-]?\d*[.,]?\d*%?$")

# A complete signed decimal number: "12", "-2.50", "+.5", "5."
_NUMBER = re.compile(r"^[+-]?(?:\d+\.?\d*|\.\d+)$")


# --- Outcomes -----------------------------------------------------------------


@dataclass(frozen=True)
class NoValue:
    """Empty input; the field is simply cleared."""

    def describe(self) -> str:
        return ""


@dataclass(frozen=True)
class StillTyping:
    """A recognised partial input; wait for more characters."""

    text: str

    def describe(self) -> str:
        return ""


@dataclass(frozen=True)
class Unparseable:
    """Looks like a number in progress but is not one (e.g. ``"."``)."""

    text: str

    def describe(self) -> str:
        return ""


@dataclass(frozen=True)
class InvalidFormat:
    """Not a discount expression at all; always shown to the user."""

    text: str
    message: str = INVALID_FORMAT_MESSAGE

    def describe(self) -> str:
        return self.message


@dataclass(frozen=True)
class Parsed:
    spec: DiscountSpec

    def describe(self) -> str:
        if self.spec.kind is DiscountKind.PERCENTAGE:
            return "(Percentage)"
        return "(Fixed amount)"


ParseOutcome = Union[NoValue, StillTyping, Unparseable, InvalidFormat, Parsed]


# --- Parser -------------------------------------------------------------------


def parse_discount(text: str | None, *, final: bool = False) -> ParseOutcome:
    """Classify *text* as a discount expression.

    With ``final=True`` the input is treated as committed (a command line
    argument, a stored value) and the still-typing shortcut is skipped, so
    ``"5%"`` parses as five percent and ``"-"`` is Unparseable.
    """
    if text is None or not text.strip():
        return NoValue()

    stripped = text.strip()

    if not final and _is_partial(stripped):
        return StillTyping(stripped)

    normalized = stripped.replace(",", ".")

    if normalized.endswith("%"):
        number = _to_decimal(normalized[:-1])
        if number is not None:
            return Parsed(DiscountSpec(number, DiscountKind.PERCENTAGE))
    elif normalized.startswith(("+", "-")):
        number = _to_decimal(normalized)
        if number is not None:
            return Parsed(DiscountSpec(number, DiscountKind.FIXED))
    else:
        number = _to_decimal(normalized)
        if number is not None:
            return Parsed(DiscountSpec(number, _default_kind(number)))

    if _PERMISSIVE_SHAPE.fullmatch(stripped):
        return Unparseable(stripped)
    return InvalidFormat(stripped)


def _is_partial(text: str) -> bool:
    return text in ("-", "+") or (text.endswith("%") and len(text) <= 2)


def _default_kind(number: Decimal) -> DiscountKind:
    # A bare "100" reads as 100 %, never as a fixed 100.00.
    if abs(number) <= PERCENTAGE_BAND:
        return DiscountKind.PERCENTAGE
    return DiscountKind.FIXED


def _to_decimal(text: str) -> Decimal | None:
    if not _NUMBER.fullmatch(text):
        return None
    return Decimal(text)
