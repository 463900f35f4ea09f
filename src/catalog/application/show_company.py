"""Application service: Show Company use case (query)."""

from __future__ import annotations

from catalog.application.dto import CompanyDTO, company_to_dto
from catalog.domain.repository.company_repository import CompanyRepository


class ShowCompanyHandler:

    def __init__(self, company_repo: CompanyRepository) -> None:
        self._company_repo = company_repo

    def handle(self, user_id: str) -> CompanyDTO | None:
        """Return the caller's company, or None when none is registered yet."""
        company = self._company_repo.get_by_user_id(user_id)
        if company is None:
            return None
        return company_to_dto(company)
