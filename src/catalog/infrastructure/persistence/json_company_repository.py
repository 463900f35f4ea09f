"""JSON-file-backed implementation of CompanyRepository."""

from __future__ import annotations

from datetime import datetime
from pathlib import Path

from catalog.domain.model.company import Company
from catalog.domain.repository.company_repository import CompanyRepository
from catalog.infrastructure.persistence.json_file import JsonFile


class JsonCompanyRepository(CompanyRepository):

    def __init__(self, file_path: Path) -> None:
        self._file = JsonFile(file_path)

    # --- CompanyRepository interface ------------------------------------------

    def next_id(self) -> str:
        return self._file.next_id()

    def get_by_user_id(self, user_id: str) -> Company | None:
        for raw in self._file.load():
            if raw["user_id"] == user_id:
                return self._to_domain(raw)
        return None

    def get_by_id(self, company_id: str) -> Company | None:
        for raw in self._file.load():
            if raw["id"] == company_id:
                return self._to_domain(raw)
        return None

    def save(self, company: Company) -> None:
        records = self._file.load()
        replaced = False
        for i, raw in enumerate(records):
            if raw["id"] == company.id:
                records[i] = self._to_raw(company)
                replaced = True
                break
        if not replaced:
            records.append(self._to_raw(company))
        self._file.persist(records)

    # --- Serialization --------------------------------------------------------

    @staticmethod
    def _to_raw(company: Company) -> dict:
        return {
            "id": company.id,
            "user_id": company.user_id,
            "name": company.name,
            "phone": company.phone,
            "contact_person": company.contact_person,
            "logo_url": company.logo_url,
            "created_at": company.created_at.isoformat(),
            "updated_at": company.updated_at.isoformat(),
        }

    @staticmethod
    def _to_domain(raw: dict) -> Company:
        return Company(
            id=raw["id"],
            user_id=raw["user_id"],
            name=raw["name"],
            phone=raw.get("phone"),
            contact_person=raw.get("contact_person"),
            logo_url=raw.get("logo_url"),
            created_at=datetime.fromisoformat(raw["created_at"]),
            updated_at=datetime.fromisoformat(raw["updated_at"]),
        )
