"""Application service: Import Products use case.

Imports a batch of products into the caller's catalog.  Uses the same
two-phase approach as other batch operations:

  Phase 1: validate every record and collect all problems.  Any
            problem rejects the whole batch before anything is saved.
  Phase 2: build and persist every product in one write.
"""

from __future__ import annotations

import logging

from catalog.application.add_product import product_fields
from catalog.application.dto import ProductInput
from catalog.application.ownership import require_company
from catalog.domain.exceptions import DomainException, ValidationError
from catalog.domain.model.product import Product
from catalog.domain.repository.company_repository import CompanyRepository
from catalog.domain.repository.product_repository import ProductRepository

logger = logging.getLogger(__name__)


class ImportProductsHandler:

    def __init__(
        self,
        company_repo: CompanyRepository,
        product_repo: ProductRepository,
    ) -> None:
        self._company_repo = company_repo
        self._product_repo = product_repo

    def handle(self, user_id: str, records: list[ProductInput]) -> int:
        """Import *records*; returns the number of products created."""
        company = require_company(self._company_repo, user_id)
        if not records:
            raise ValidationError("No products to import")

        # Phase 1: validate everything
        validated: list[dict] = []
        errors: list[str] = []
        for row, data in enumerate(records, start=1):
            try:
                fields = product_fields(data)
                # Run the aggregate's own checks without keeping the result.
                Product.create(product_id="0", company_id=company.id, **fields)
            except DomainException as exc:
                errors.append(f"row {row}: {exc}")
                continue
            validated.append(fields)

        if errors:
            logger.warning("Rejected import of %d products: %d invalid", len(records), len(errors))
            raise ValidationError("Import rejected; " + "; ".join(errors))

        # Phase 2: create and persist
        first_id = int(self._product_repo.next_id())
        products = [
            Product.create(product_id=str(first_id + i), company_id=company.id, **fields)
            for i, fields in enumerate(validated)
        ]
        self._product_repo.save_all(products)
        logger.info("Imported %d products into company #%s", len(products), company.id)
        return len(products)
