"""Custom click parameter types."""

from __future__ import annotations

import click

from catalog.domain.model.discount import DiscountSpec
from catalog.domain.service.discount_parser import (
    FORMAT_HINT,
    InvalidFormat,
    NoValue,
    Parsed,
    parse_discount,
)


class DiscountParamType(click.ParamType):
    """Converts ``-10%``, ``+5``, ``2,50`` ... into a DiscountSpec.

    Command line values are complete input, so the parser runs in final
    mode.  An empty string converts to None (no discount).
    """

    name = "discount"

    def convert(self, value, param, ctx) -> DiscountSpec | None:
        if isinstance(value, DiscountSpec):
            return value

        outcome = parse_discount(value, final=True)
        if isinstance(outcome, Parsed):
            return outcome.spec
        if isinstance(outcome, NoValue):
            return None
        if isinstance(outcome, InvalidFormat):
            self.fail(outcome.message, param, ctx)
        self.fail(f"'{value}' is not a number. Use: {FORMAT_HINT}", param, ctx)


DISCOUNT = DiscountParamType()
