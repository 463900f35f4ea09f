"""Product selection shared by bulk commands.

Products are chosen either one by one (``-p 3 -p 7``) or with ``--all``,
optionally narrowed by the same filters the product list offers.
"""

from __future__ import annotations

import click

from catalog.application.list_products import ListProductsHandler, ProductQuery
from catalog.infrastructure.cli.context import CliContext


def selection_options(func):
    func = click.option("--manufacturer", "filter_manufacturer", default=None,
                        help="With --all: only this manufacturer.")(func)
    func = click.option("--type", "filter_type", default=None,
                        help="With --all: only this product type.")(func)
    func = click.option("--search", default=None,
                        help="With --all: only descriptions containing this text.")(func)
    func = click.option("--all", "select_all", is_flag=True, default=False,
                        help="Select every product in the catalog.")(func)
    func = click.option("-p", "--product", "product_ids", multiple=True,
                        help="Product ID (repeatable).")(func)
    return func


def resolve_selection(
    obj: CliContext,
    product_ids: tuple[str, ...],
    select_all: bool,
    search: str | None,
    filter_type: str | None,
    filter_manufacturer: str | None,
) -> list[str]:
    """Return the selected product IDs.  Raises DomainException on bad filters."""
    if product_ids and select_all:
        raise click.UsageError("Use either --product or --all, not both.")
    if not select_all:
        if search or filter_type or filter_manufacturer:
            raise click.UsageError("--search, --type and --manufacturer require --all.")
        return list(product_ids)

    handler = ListProductsHandler(
        company_repo=obj.companies(),
        product_repo=obj.products(),
    )
    query = ProductQuery(search=search, type=filter_type, manufacturer=filter_manufacturer)
    return [dto.id for dto in handler.handle(obj.require_user(), query)]
