"""Company aggregate: the tenant that owns a catalog.

Each authenticated user owns at most one company.  The ``user_id`` comes
from the external identity service and is never validated here.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone

from catalog.domain.exceptions import ValidationError
from catalog.domain.model.value_objects import blank_to_none


def _now() -> datetime:
    return datetime.now(timezone.utc)


@dataclass
class Company:

    id: str
    user_id: str
    name: str
    phone: str | None = None
    contact_person: str | None = None
    logo_url: str | None = None
    created_at: datetime = field(default_factory=_now)
    updated_at: datetime = field(default_factory=_now)

    @staticmethod
    def register(
        company_id: str,
        user_id: str,
        name: str,
        phone: str | None = None,
        contact_person: str | None = None,
        logo_url: str | None = None,
    ) -> Company:
        """Create a new company, enforcing all invariants."""
        company = Company(id=company_id, user_id=user_id, name="")
        company.update_details(name, phone, contact_person, logo_url)
        return company

    def update_details(
        self,
        name: str,
        phone: str | None = None,
        contact_person: str | None = None,
        logo_url: str | None = None,
    ) -> None:
        if not name or not name.strip():
            raise ValidationError("Company name is required")
        self.name = name.strip()
        self.phone = blank_to_none(phone)
        self.contact_person = blank_to_none(contact_person)
        self.logo_url = blank_to_none(logo_url)
        self.updated_at = _now()
