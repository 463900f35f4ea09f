"""CLI commands for the Company aggregate."""

from __future__ import annotations

import click

from catalog.application.dto import CompanyDTO
from catalog.application.register_company import RegisterCompanyHandler
from catalog.application.show_company import ShowCompanyHandler
from catalog.application.update_company import UpdateCompanyHandler
from catalog.domain.exceptions import DomainException
from catalog.infrastructure.cli.context import CliContext, pass_cli_context


def _company_options(func):
    func = click.option("--logo-url", default=None, help="Logo image URL.")(func)
    func = click.option("--contact", "contact_person", default=None, help="Contact person.")(func)
    func = click.option("--phone", default=None, help="Phone number.")(func)
    func = click.option("--name", required=True, help="Company name.")(func)
    return func


def _display_company(dto: CompanyDTO) -> None:
    click.echo(f"Company #{dto.id}  {dto.name}")
    click.echo(f"Phone:    {dto.phone or '-'}")
    click.echo(f"Contact:  {dto.contact_person or '-'}")
    click.echo(f"Logo:     {dto.logo_url or '-'}")
    click.echo(f"Updated:  {dto.updated_at}")


@click.command("register")
@_company_options
@pass_cli_context
def company_register(
    obj: CliContext,
    name: str,
    phone: str | None,
    contact_person: str | None,
    logo_url: str | None,
) -> None:
    """Register your company."""
    handler = RegisterCompanyHandler(company_repo=obj.companies())

    try:
        dto = handler.handle(
            user_id=obj.require_user(),
            name=name,
            phone=phone,
            contact_person=contact_person,
            logo_url=logo_url,
        )
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Company #{dto.id} '{dto.name}' registered")


@click.command("update")
@_company_options
@pass_cli_context
def company_update(
    obj: CliContext,
    name: str,
    phone: str | None,
    contact_person: str | None,
    logo_url: str | None,
) -> None:
    """Update your company's details."""
    handler = UpdateCompanyHandler(company_repo=obj.companies())

    try:
        dto = handler.handle(
            user_id=obj.require_user(),
            name=name,
            phone=phone,
            contact_person=contact_person,
            logo_url=logo_url,
        )
    except DomainException as exc:
        raise click.ClickException(str(exc))

    _display_company(dto)


@click.command("show")
@pass_cli_context
def company_show(obj: CliContext) -> None:
    """Show your company."""
    dto = ShowCompanyHandler(company_repo=obj.companies()).handle(obj.require_user())
    if dto is None:
        click.echo("No company registered yet.")
        return
    _display_company(dto)
