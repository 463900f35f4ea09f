"""Unit tests for the Company aggregate."""

import pytest

from catalog.domain.exceptions import ValidationError
from catalog.domain.model.company import Company


class TestRegister:

    def test_optional_fields_normalized(self):
        company = Company.register("1", "u1", "  Flora Ltda ", phone=" ", contact_person=" Ana ")
        assert company.name == "Flora Ltda"
        assert company.phone is None
        assert company.contact_person == "Ana"
        assert company.logo_url is None

    def test_name_required(self):
        with pytest.raises(ValidationError, match="Company name is required"):
            Company.register("1", "u1", "")


class TestUpdateDetails:

    def test_touches_updated_at(self):
        company = Company.register("1", "u1", "Flora")
        before = company.updated_at
        company.update_details("Flora Two", phone="555")
        assert company.name == "Flora Two"
        assert company.phone == "555"
        assert company.updated_at >= before
