"""Application service: Update Company use case."""

from __future__ import annotations

import logging

from catalog.application.dto import CompanyDTO, company_to_dto
from catalog.application.ownership import require_company
from catalog.domain.repository.company_repository import CompanyRepository

logger = logging.getLogger(__name__)


class UpdateCompanyHandler:

    def __init__(self, company_repo: CompanyRepository) -> None:
        self._company_repo = company_repo

    def handle(
        self,
        user_id: str,
        name: str,
        phone: str | None = None,
        contact_person: str | None = None,
        logo_url: str | None = None,
    ) -> CompanyDTO:
        company = require_company(self._company_repo, user_id)
        company.update_details(name, phone, contact_person, logo_url)
        self._company_repo.save(company)
        logger.info("Updated company #%s", company.id)
        return company_to_dto(company)
