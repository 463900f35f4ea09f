"""Per-invocation state shared by every CLI command."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

import click

from catalog.infrastructure import bootstrap
from catalog.infrastructure.persistence.json_company_repository import (
    JsonCompanyRepository,
)
from catalog.infrastructure.persistence.json_price_list_repository import (
    JsonPriceListRepository,
)
from catalog.infrastructure.persistence.json_product_repository import (
    JsonProductRepository,
)


@dataclass(frozen=True)
class CliContext:
    data_dir: Path
    user_id: str | None
    public_base_url: str

    def require_user(self) -> str:
        if not self.user_id:
            raise click.UsageError(
                "No user given. Pass --user or set CATALOG_USER_ID."
            )
        return self.user_id

    def companies(self) -> JsonCompanyRepository:
        return bootstrap.company_repository(self.data_dir)

    def products(self) -> JsonProductRepository:
        return bootstrap.product_repository(self.data_dir)

    def price_lists(self) -> JsonPriceListRepository:
        return bootstrap.price_list_repository(self.data_dir)


pass_cli_context = click.make_pass_decorator(CliContext)
