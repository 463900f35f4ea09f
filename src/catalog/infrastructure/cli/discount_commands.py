"""CLI commands for trying out discount expressions."""

from __future__ import annotations

import click

from catalog.domain.exceptions import DomainException
from catalog.domain.model.value_objects import Money
from catalog.domain.service.discount_parser import (
    InvalidFormat,
    NoValue,
    Parsed,
    StillTyping,
    parse_discount,
)
from catalog.domain.service.price_adjustment import adjust_price


@click.command("parse")
@click.argument("text")
@click.option("--final", is_flag=True, default=False, help="Treat TEXT as committed input.")
@click.option("--price", default=None, help="Also show the result of applying it to this price.")
def discount_parse(text: str, final: bool, price: str | None) -> None:
    """Show how TEXT is read as a discount (use -- before negative values)."""
    outcome = parse_discount(text, final=final)

    if isinstance(outcome, Parsed):
        spec = outcome.spec
        click.echo(f"{spec}  {outcome.describe()}")
        if price is not None:
            try:
                base = Money.of(price)
            except DomainException as exc:
                raise click.BadParameter(str(exc), param_hint="--price")
            click.echo(f"{base} -> {adjust_price(base, spec)}")
        return

    if isinstance(outcome, NoValue):
        click.echo("No value")
    elif isinstance(outcome, StillTyping):
        click.echo("Still typing")
    elif isinstance(outcome, InvalidFormat):
        raise click.ClickException(outcome.message)
    else:
        click.echo("Unparseable")
