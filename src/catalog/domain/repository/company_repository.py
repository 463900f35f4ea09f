"""Abstract repository for Company aggregate."""

from __future__ import annotations

from abc import ABC, abstractmethod

from catalog.domain.model.company import Company


class CompanyRepository(ABC):

    @abstractmethod
    def next_id(self) -> str:
        """Generate the next unique company ID."""

    @abstractmethod
    def get_by_user_id(self, user_id: str) -> Company | None:
        """Return the company owned by *user_id*, or None."""

    @abstractmethod
    def get_by_id(self, company_id: str) -> Company | None:
        """Return a company by its ID, or None if not found."""

    @abstractmethod
    def save(self, company: Company) -> None:
        """Persist a new or updated company."""
