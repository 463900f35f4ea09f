"""CLI commands for the PriceList aggregate."""

from __future__ import annotations

import click

from catalog.application.create_price_list import CreatePriceListHandler
from catalog.application.delete_price_list import DeletePriceListHandler
from catalog.application.dto import PublicPriceListDTO
from catalog.application.list_price_lists import ListPriceListsHandler
from catalog.application.show_public_price_list import ShowPublicPriceListHandler
from catalog.domain.exceptions import DomainException
from catalog.infrastructure.cli.context import CliContext, pass_cli_context
from catalog.infrastructure.cli.params import DISCOUNT
from catalog.infrastructure.cli.selection import resolve_selection, selection_options


@click.command("create")
@click.option("--name", required=True, help="Price list name.")
@click.option("--discount", type=DISCOUNT, default=None,
              help="Adjustment such as -10%, +5%, -2.50 or +10 (default: none).")
@selection_options
@pass_cli_context
def price_list_create(
    obj: CliContext,
    name: str,
    discount,
    product_ids: tuple[str, ...],
    select_all: bool,
    search: str | None,
    filter_type: str | None,
    filter_manufacturer: str | None,
) -> None:
    """Create a shareable price list from selected products."""
    handler = CreatePriceListHandler(
        company_repo=obj.companies(),
        product_repo=obj.products(),
        price_list_repo=obj.price_lists(),
        public_base_url=obj.public_base_url,
    )

    try:
        ids = resolve_selection(obj, product_ids, select_all, search, filter_type, filter_manufacturer)
        dto = handler.handle(obj.require_user(), name, ids, discount)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Price list created with {dto.item_count} items.")
    click.echo(f"ID:  {dto.id}")
    click.echo(f"URL: {dto.url}")


@click.command("list")
@pass_cli_context
def price_list_list(obj: CliContext) -> None:
    """List your price lists."""
    handler = ListPriceListsHandler(
        company_repo=obj.companies(),
        price_list_repo=obj.price_lists(),
    )

    try:
        lists = handler.handle(obj.require_user())
    except DomainException as exc:
        raise click.ClickException(str(exc))

    if not lists:
        click.echo("No price lists found.")
        return

    click.echo(f"{'ID':<36}  {'Name':<24} {'Discount':>10} {'Items':>6}  Created")
    click.echo("-" * 100)
    for pl in lists:
        click.echo(
            f"{pl.id:<36}  {pl.name:<24} {pl.discount or '-':>10} {pl.item_count:>6}  {pl.created_at}"
        )


@click.command("delete")
@click.option("--id", "list_id", required=True, help="Price list ID.")
@pass_cli_context
def price_list_delete(obj: CliContext, list_id: str) -> None:
    """Delete a price list and its snapshot."""
    handler = DeletePriceListHandler(
        company_repo=obj.companies(),
        price_list_repo=obj.price_lists(),
    )

    try:
        handler.handle(obj.require_user(), list_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Price list {list_id} deleted.")


def _display_public(dto: PublicPriceListDTO) -> None:
    company = dto.company
    click.echo(dto.name)
    click.echo(company.name)
    if company.contact_person:
        click.echo(f"Contact: {company.contact_person}")
    if company.phone:
        click.echo(f"Phone:   {company.phone}")
    click.echo()
    click.echo(f"  {'Product':<30} {'Type':<8} {'Portion':<12} {'Price':>12}")
    click.echo(f"  {'-'*65}")
    for item in dto.items:
        p = item.product
        click.echo(
            f"  {p.description:<30} {p.type:<8} {p.portion or '':<12} {item.adjusted_price:>12}"
        )
    click.echo(f"  {'-'*65}")
    click.echo(f"Generated at {dto.generated_at}")


@click.command("show")
@click.option("--id", "list_id", required=True, help="Price list ID.")
@pass_cli_context
def price_list_show(obj: CliContext, list_id: str) -> None:
    """Show a price list as customers see it (no login needed)."""
    handler = ShowPublicPriceListHandler(
        company_repo=obj.companies(),
        product_repo=obj.products(),
        price_list_repo=obj.price_lists(),
    )

    try:
        dto = handler.handle(list_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    _display_public(dto)
