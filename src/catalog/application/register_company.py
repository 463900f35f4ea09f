"""Application service: Register Company use case."""

from __future__ import annotations

import logging

from catalog.application.dto import CompanyDTO, company_to_dto
from catalog.domain.exceptions import ValidationError
from catalog.domain.model.company import Company
from catalog.domain.repository.company_repository import CompanyRepository

logger = logging.getLogger(__name__)


class RegisterCompanyHandler:

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
        """Register the company owned by *user_id* (one per user)."""
        if self._company_repo.get_by_user_id(user_id) is not None:
            raise ValidationError("A company is already registered for this user")

        company = Company.register(
            company_id=self._company_repo.next_id(),
            user_id=user_id,
            name=name,
            phone=phone,
            contact_person=contact_person,
            logo_url=logo_url,
        )
        self._company_repo.save(company)
        logger.info("Registered company #%s '%s' for user %s", company.id, company.name, user_id)
        return company_to_dto(company)
