"""Integration tests for the product use cases.

Uses in-memory fake repositories; no file I/O.
"""

from decimal import Decimal

import pytest

from catalog.application.add_product import AddProductHandler
from catalog.application.create_price_list import CreatePriceListHandler
from catalog.application.delete_product import ClearProductsHandler, DeleteProductHandler
from catalog.application.dto import ProductInput
from catalog.application.import_products import ImportProductsHandler
from catalog.application.list_products import ListProductsHandler, ProductQuery, SortField
from catalog.application.update_product import UpdateProductHandler
from catalog.domain.exceptions import EntityNotFoundError, ValidationError
from catalog.domain.model.product import Manufacturer, ProductType
from tests.builders import ALICE, BOB, companies, product
from tests.fakes import FakeCompanyRepository, FakePriceListRepository, FakeProductRepository


def _input(description="Omega 3", type="Pote", price="49.90",
           manufacturer="Force Sens", **kwargs) -> ProductInput:
    return ProductInput(description, type, price, manufacturer, **kwargs)


def _setup(products=None):
    company_repo = FakeCompanyRepository(companies())
    product_repo = FakeProductRepository(products or [])
    price_list_repo = FakePriceListRepository()
    return company_repo, product_repo, price_list_repo


class TestAddProduct:

    def test_adds_to_callers_company(self):
        company_repo, product_repo, _ = _setup()
        dto = AddProductHandler(company_repo, product_repo).handle(ALICE, _input(price="49,90"))

        assert dto.id == "1"
        assert dto.price == "BRL 49.90"
        saved = product_repo.get_by_id("1")
        assert saved.company_id == "1"
        assert saved.type is ProductType.POTE

    def test_requires_company(self):
        _, product_repo, _ = _setup()
        handler = AddProductHandler(FakeCompanyRepository(), product_repo)
        with pytest.raises(EntityNotFoundError, match="Register your company first"):
            handler.handle(ALICE, _input())

    def test_rejects_unknown_type(self):
        company_repo, product_repo, _ = _setup()
        with pytest.raises(ValidationError, match="Unknown product type"):
            AddProductHandler(company_repo, product_repo).handle(ALICE, _input(type="Box"))

    def test_rejects_non_positive_price(self):
        company_repo, product_repo, _ = _setup()
        with pytest.raises(ValidationError):
            AddProductHandler(company_repo, product_repo).handle(ALICE, _input(price="0"))
        with pytest.raises(ValidationError):
            AddProductHandler(company_repo, product_repo).handle(ALICE, _input(price="-3"))


class TestListProducts:

    def _catalog(self):
        return [
            product("1", "30.00", "Vitamin C", type=ProductType.FRASCO),
            product("2", "10.00", "Zinc", manufacturer=Manufacturer.FORCE_SENS),
            product("3", "20.00", "Omega 3", type=ProductType.BLISTER),
            product("4", "99.00", "Bob's Magnesium", company_id="2"),
        ]

    def _list(self, query=None, user=ALICE):
        company_repo, product_repo, _ = _setup(self._catalog())
        return [p.description for p in ListProductsHandler(company_repo, product_repo).handle(user, query)]

    def test_only_callers_products(self):
        assert sorted(self._list()) == ["Omega 3", "Vitamin C", "Zinc"]
        assert self._list(user=BOB) == ["Bob's Magnesium"]

    def test_search_is_case_insensitive(self):
        assert self._list(ProductQuery(search="VITA")) == ["Vitamin C"]

    def test_filter_by_type_and_manufacturer(self):
        assert self._list(ProductQuery(type="Blister")) == ["Omega 3"]
        assert self._list(ProductQuery(manufacturer="Force Sens")) == ["Zinc"]

    def test_sort_by_price(self):
        assert self._list(ProductQuery(sort_by=SortField.PRICE)) == ["Zinc", "Omega 3", "Vitamin C"]

    def test_sort_by_description_descending(self):
        query = ProductQuery(sort_by=SortField.DESCRIPTION, descending=True)
        assert self._list(query) == ["Zinc", "Vitamin C", "Omega 3"]

    def test_unknown_filter_value_rejected(self):
        with pytest.raises(ValidationError, match="Unknown manufacturer"):
            self._list(ProductQuery(manufacturer="Acme"))


class TestUpdateProduct:

    def test_full_update(self):
        company_repo, product_repo, _ = _setup([product("1", "10.00")])
        dto = UpdateProductHandler(company_repo, product_repo).handle(
            ALICE, "1", _input(description="Omega 3 Plus", price="55", portion="120 caps")
        )
        assert dto.description == "Omega 3 Plus"
        assert product_repo.get_by_id("1").price.amount == Decimal("55")
        assert product_repo.get_by_id("1").portion == "120 caps"

    def test_other_tenants_product_not_found(self):
        company_repo, product_repo, _ = _setup([product("1", "10.00", company_id="2")])
        with pytest.raises(EntityNotFoundError, match="not found"):
            UpdateProductHandler(company_repo, product_repo).handle(ALICE, "1", _input())


class TestDeleteProduct:

    def test_deletes_and_prunes_price_list_rows(self):
        company_repo, product_repo, price_list_repo = _setup(
            [product("1", "10.00"), product("2", "20.00")]
        )
        created = CreatePriceListHandler(
            company_repo, product_repo, price_list_repo, "http://x"
        ).handle(ALICE, "List", ["1", "2"])

        DeleteProductHandler(company_repo, product_repo, price_list_repo).handle(ALICE, "1")

        assert product_repo.get_by_id("1") is None
        remaining = price_list_repo.get_by_id(created.id).items
        assert [i.product_id for i in remaining] == ["2"]
        assert remaining[0].adjusted_price.amount == Decimal("20.00")

    def test_cannot_delete_other_tenants_product(self):
        company_repo, product_repo, price_list_repo = _setup([product("1", "10.00", company_id="2")])
        with pytest.raises(EntityNotFoundError):
            DeleteProductHandler(company_repo, product_repo, price_list_repo).handle(ALICE, "1")
        assert product_repo.get_by_id("1") is not None


class TestClearProducts:

    def test_clears_only_callers_catalog(self):
        company_repo, product_repo, price_list_repo = _setup(
            [product("1", "1"), product("2", "2"), product("3", "3", company_id="2")]
        )
        count = ClearProductsHandler(company_repo, product_repo, price_list_repo).handle(ALICE)

        assert count == 2
        assert product_repo.list_by_company("1") == []
        assert len(product_repo.list_by_company("2")) == 1

    def test_empty_catalog(self):
        company_repo, product_repo, price_list_repo = _setup()
        assert ClearProductsHandler(company_repo, product_repo, price_list_repo).handle(ALICE) == 0


class TestImportProducts:

    def test_imports_all_records(self):
        company_repo, product_repo, _ = _setup([product("7", "1")])
        count = ImportProductsHandler(company_repo, product_repo).handle(ALICE, [
            _input(description="A"),
            _input(description="B", type="Frasco", manufacturer="União Flora",
                   photo_url="https://example.com/b.jpg"),
        ])

        assert count == 2
        assert product_repo.get_by_id("8").description == "A"
        assert product_repo.get_by_id("9").photo_url == "https://example.com/b.jpg"

    def test_any_invalid_record_rejects_the_batch(self):
        company_repo, product_repo, _ = _setup()
        with pytest.raises(ValidationError) as excinfo:
            ImportProductsHandler(company_repo, product_repo).handle(ALICE, [
                _input(description="Good"),
                _input(description="", price="1"),
                _input(description="Bad price", price="abc"),
            ])

        message = str(excinfo.value)
        assert "row 2" in message
        assert "row 3" in message
        assert product_repo.list_by_company("1") == []

    def test_empty_import_rejected(self):
        company_repo, product_repo, _ = _setup()
        with pytest.raises(ValidationError, match="No products"):
            ImportProductsHandler(company_repo, product_repo).handle(ALICE, [])
