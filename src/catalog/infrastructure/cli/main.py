from __future__ import annotations

import logging
from pathlib import Path

import click

from catalog.infrastructure.cli.company_commands import (
    company_register,
    company_show,
    company_update,
)
from catalog.infrastructure.cli.context import CliContext
from catalog.infrastructure.cli.discount_commands import discount_parse
from catalog.infrastructure.cli.price_list_commands import (
    price_list_create,
    price_list_delete,
    price_list_list,
    price_list_show,
)
from catalog.infrastructure.cli.product_commands import (
    product_add,
    product_adjust,
    product_clear,
    product_delete,
    product_import,
    product_list,
    product_update,
)
from catalog.infrastructure.config import get_settings
from catalog.infrastructure.logging_setup import setup_logging

logger = logging.getLogger(__name__)

_LOG_LEVELS = ["DEBUG", "INFO", "WARNING", "ERROR"]


@click.group()
@click.option("--data-dir", type=click.Path(file_okay=False, path_type=Path),
              default=None, help="Directory holding the JSON data files.")
@click.option("--user", "user_id", default=None,
              help="Authenticated user ID (from the identity service).")
@click.option("--log-level", type=click.Choice(_LOG_LEVELS, case_sensitive=False),
              default=None, help="Logging verbosity.")
@click.pass_context
def cli(ctx: click.Context, data_dir: Path | None, user_id: str | None, log_level: str | None) -> None:
    """Price Catalog: products, bulk re-pricing and shareable price lists"""
    settings = get_settings()
    setup_logging(log_level or settings.log_level)

    ctx.obj = CliContext(
        data_dir=data_dir or settings.data_dir,
        user_id=user_id or settings.user_id,
        public_base_url=settings.public_base_url,
    )
    logger.debug("Using data directory %s", ctx.obj.data_dir)


@cli.group()
def company() -> None:
    """Manage your company."""


@cli.group()
def product() -> None:
    """Manage products."""


@cli.group("pricelist")
def pricelist() -> None:
    """Manage shareable price lists."""


@cli.group()
def discount() -> None:
    """Inspect discount expressions."""


# Register subcommands
company.add_command(company_register)
company.add_command(company_show)
company.add_command(company_update)
product.add_command(product_add)
product.add_command(product_adjust)
product.add_command(product_clear)
product.add_command(product_delete)
product.add_command(product_import)
product.add_command(product_list)
product.add_command(product_update)
pricelist.add_command(price_list_create)
pricelist.add_command(price_list_delete)
pricelist.add_command(price_list_list)
pricelist.add_command(price_list_show)
discount.add_command(discount_parse)
