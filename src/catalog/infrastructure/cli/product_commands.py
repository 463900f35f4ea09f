"""CLI commands for the Product aggregate."""

from __future__ import annotations

import json

import click

from catalog.application.add_product import AddProductHandler
from catalog.application.adjust_prices import AdjustPricesHandler
from catalog.application.delete_product import ClearProductsHandler, DeleteProductHandler
from catalog.application.dto import ProductDTO, ProductInput
from catalog.application.import_products import ImportProductsHandler
from catalog.application.list_products import ListProductsHandler, ProductQuery, SortField
from catalog.application.update_product import UpdateProductHandler
from catalog.domain.exceptions import DomainException
from catalog.infrastructure.cli.context import CliContext, pass_cli_context
from catalog.infrastructure.cli.params import DISCOUNT
from catalog.infrastructure.cli.selection import resolve_selection, selection_options

_IMPORT_FIELDS = ("description", "type", "price", "manufacturer", "portion", "photo_url")


def _product_options(func):
    func = click.option("--photo-url", default=None, help="Photo URL (http...).")(func)
    func = click.option("--portion", default=None, help="Portion, e.g. '60 caps'.")(func)
    func = click.option("--manufacturer", required=True, help="Manufacturer.")(func)
    func = click.option("--price", required=True, help="Price (e.g. 15.00 or 15,00).")(func)
    func = click.option("--type", "type_", required=True, help="Pote, Blister or Frasco.")(func)
    func = click.option("--description", required=True, help="Product description.")(func)
    return func


def _print_table(products: list[ProductDTO]) -> None:
    click.echo(f"{'ID':<6} {'Description':<30} {'Type':<8} {'Manufacturer':<14} {'Price':>12}")
    click.echo("-" * 74)
    for p in products:
        click.echo(
            f"{p.id:<6} {p.description:<30} {p.type:<8} {p.manufacturer:<14} {p.price:>12}"
        )


@click.command("add")
@_product_options
@pass_cli_context
def product_add(
    obj: CliContext,
    description: str,
    type_: str,
    price: str,
    manufacturer: str,
    portion: str | None,
    photo_url: str | None,
) -> None:
    """Add a new product to your catalog."""
    handler = AddProductHandler(company_repo=obj.companies(), product_repo=obj.products())
    data = ProductInput(description, type_, price, manufacturer, portion, photo_url)

    try:
        dto = handler.handle(user_id=obj.require_user(), data=data)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Product #{dto.id} '{dto.description}' added at {dto.price}")


@click.command("list")
@click.option("--search", default=None, help="Text contained in the description.")
@click.option("--type", "type_", default=None, help="Only this product type.")
@click.option("--manufacturer", default=None, help="Only this manufacturer.")
@click.option("--sort", "sort_by", type=click.Choice([f.value for f in SortField]),
              default=None, help="Sort column (default: newest first).")
@click.option("--desc", is_flag=True, default=False, help="Sort descending.")
@pass_cli_context
def product_list(
    obj: CliContext,
    search: str | None,
    type_: str | None,
    manufacturer: str | None,
    sort_by: str | None,
    desc: bool,
) -> None:
    """List the products in your catalog."""
    handler = ListProductsHandler(company_repo=obj.companies(), product_repo=obj.products())
    query = ProductQuery(
        search=search,
        type=type_,
        manufacturer=manufacturer,
        sort_by=SortField(sort_by) if sort_by else None,
        descending=desc,
    )

    try:
        products = handler.handle(obj.require_user(), query)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    if not products:
        click.echo("No products found.")
        return
    _print_table(products)


@click.command("update")
@click.option("--id", "product_id", required=True, help="Product ID.")
@_product_options
@pass_cli_context
def product_update(
    obj: CliContext,
    product_id: str,
    description: str,
    type_: str,
    price: str,
    manufacturer: str,
    portion: str | None,
    photo_url: str | None,
) -> None:
    """Replace a product's details."""
    handler = UpdateProductHandler(company_repo=obj.companies(), product_repo=obj.products())
    data = ProductInput(description, type_, price, manufacturer, portion, photo_url)

    try:
        dto = handler.handle(obj.require_user(), product_id, data)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Product #{dto.id} updated ({dto.price})")


@click.command("delete")
@click.option("--id", "product_id", required=True, help="Product ID.")
@pass_cli_context
def product_delete(obj: CliContext, product_id: str) -> None:
    """Delete a product."""
    handler = DeleteProductHandler(
        company_repo=obj.companies(),
        product_repo=obj.products(),
        price_list_repo=obj.price_lists(),
    )

    try:
        handler.handle(obj.require_user(), product_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Product #{product_id} deleted.")


@click.command("clear")
@click.confirmation_option(prompt="Delete every product in your catalog?")
@pass_cli_context
def product_clear(obj: CliContext) -> None:
    """Delete every product in your catalog."""
    handler = ClearProductsHandler(
        company_repo=obj.companies(),
        product_repo=obj.products(),
        price_list_repo=obj.price_lists(),
    )

    try:
        count = handler.handle(obj.require_user())
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"{count} products deleted.")


def _optional_text(value) -> str | None:
    return None if value is None else str(value)


def _read_import_file(stream) -> list[ProductInput]:
    """Parse a JSON array of product objects into ProductInput records."""
    try:
        raw = json.load(stream)
    except json.JSONDecodeError as exc:
        raise click.BadParameter(f"Not valid JSON: {exc}", param_hint="FILE")
    if not isinstance(raw, list) or not all(isinstance(r, dict) for r in raw):
        raise click.BadParameter("Expected a JSON array of objects.", param_hint="FILE")

    records: list[ProductInput] = []
    for row in raw:
        values = {key: row.get(key) for key in _IMPORT_FIELDS}
        records.append(
            ProductInput(
                description=str(values["description"] or ""),
                type=str(values["type"] or ""),
                price=str(values["price"] if values["price"] is not None else ""),
                manufacturer=str(values["manufacturer"] or ""),
                portion=_optional_text(values["portion"]),
                photo_url=_optional_text(values["photo_url"]),
            )
        )
    return records


@click.command("import")
@click.argument("file", type=click.File("r", encoding="utf-8"))
@pass_cli_context
def product_import(obj: CliContext, file) -> None:
    """Import products from a JSON FILE (all or nothing)."""
    records = _read_import_file(file)
    handler = ImportProductsHandler(company_repo=obj.companies(), product_repo=obj.products())

    try:
        count = handler.handle(obj.require_user(), records)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"{count} products imported.")


@click.command("adjust")
@click.option("--discount", type=DISCOUNT, required=True,
              help="Adjustment such as -10%, +5%, -2.50 or +10.")
@selection_options
@pass_cli_context
def product_adjust(
    obj: CliContext,
    discount,
    product_ids: tuple[str, ...],
    select_all: bool,
    search: str | None,
    filter_type: str | None,
    filter_manufacturer: str | None,
) -> None:
    """Re-price products in place by a discount or surcharge."""
    if discount is None:
        raise click.BadParameter("A discount is required.", param_hint="--discount")

    handler = AdjustPricesHandler(company_repo=obj.companies(), product_repo=obj.products())

    try:
        ids = resolve_selection(obj, product_ids, select_all, search, filter_type, filter_manufacturer)
        count = handler.handle(obj.require_user(), ids, discount)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"{count} prices adjusted by {discount}.")
