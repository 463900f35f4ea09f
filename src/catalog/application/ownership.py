"""Tenant scoping shared by the use cases.

Every owner-scoped operation starts from the authenticated user id and
may only see the company that user owns, and that company's products.
"""

from __future__ import annotations

from catalog.domain.exceptions import EntityNotFoundError, ValidationError
from catalog.domain.model.company import Company
from catalog.domain.model.product import Product
from catalog.domain.repository.company_repository import CompanyRepository
from catalog.domain.repository.product_repository import ProductRepository


def require_company(company_repo: CompanyRepository, user_id: str) -> Company:
    company = company_repo.get_by_user_id(user_id)
    if company is None:
        raise EntityNotFoundError("Company not found. Register your company first.")
    return company


def owned_product(
    product_repo: ProductRepository, company: Company, product_id: str
) -> Product:
    product = product_repo.get_by_id(product_id)
    if product is None or product.company_id != company.id:
        raise EntityNotFoundError(f"Product with ID '{product_id}' not found")
    return product


def owned_products(
    product_repo: ProductRepository, company: Company, product_ids: list[str]
) -> list[Product]:
    """Resolve every ID to a product of *company*, or fail on any miss.

    Duplicate IDs collapse to one product; input order is kept.
    """
    if not product_ids:
        raise ValidationError("At least one product must be selected")

    products: list[Product] = []
    seen: set[str] = set()
    for product_id in product_ids:
        if product_id in seen:
            continue
        seen.add(product_id)
        product = product_repo.get_by_id(product_id)
        if product is None or product.company_id != company.id:
            raise EntityNotFoundError("Some products were not found")
        products.append(product)
    return products
