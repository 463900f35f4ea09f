"""Integration tests for the price list use cases."""

from decimal import Decimal

import pytest

from catalog.application.adjust_prices import AdjustPricesHandler
from catalog.application.create_price_list import CreatePriceListHandler
from catalog.application.delete_price_list import DeletePriceListHandler
from catalog.application.list_price_lists import ListPriceListsHandler
from catalog.application.show_public_price_list import ShowPublicPriceListHandler
from catalog.domain.exceptions import EntityNotFoundError, ValidationError
from catalog.domain.model.discount import DiscountSpec
from tests.builders import ALICE, BOB, companies, product
from tests.fakes import FakeCompanyRepository, FakePriceListRepository, FakeProductRepository


def _setup():
    company_repo = FakeCompanyRepository(companies())
    product_repo = FakeProductRepository([
        product("1", "100.00", "Zinc"),
        product("2", "40.00", "Omega 3"),
        product("3", "50.00", "Bob's Magnesium", company_id="2"),
    ])
    price_list_repo = FakePriceListRepository()
    create = CreatePriceListHandler(
        company_repo, product_repo, price_list_repo, "https://catalog.example/"
    )
    return create, company_repo, product_repo, price_list_repo


class TestCreatePriceList:

    def test_returns_share_url(self):
        create, *_ = _setup()
        dto = create.handle(ALICE, "Wholesale", ["1", "2"], DiscountSpec.percentage(-10))
        assert dto.url == f"https://catalog.example/lists/{dto.id}"
        assert dto.item_count == 2

    def test_stores_snapshot(self):
        create, _, _, price_list_repo = _setup()
        dto = create.handle(ALICE, "Wholesale", ["1", "2"], DiscountSpec.fixed("-5"))
        saved = price_list_repo.get_by_id(dto.id)
        assert [i.adjusted_price.amount for i in saved.items] == [Decimal("95.00"), Decimal("35.00")]
        assert saved.discount == DiscountSpec.fixed("-5")

    def test_foreign_product_rejected(self):
        create, _, _, price_list_repo = _setup()
        with pytest.raises(EntityNotFoundError, match="Some products were not found"):
            create.handle(ALICE, "Sneaky", ["1", "3"])
        assert price_list_repo.list_by_company("1") == []

    def test_blank_name_rejected(self):
        create, *_ = _setup()
        with pytest.raises(ValidationError, match="name is required"):
            create.handle(ALICE, "  ", ["1"])

    def test_requires_company(self):
        create, *_ = _setup()
        with pytest.raises(EntityNotFoundError, match="Register your company first"):
            create.handle("stranger", "List", ["1"])


class TestSnapshotImmutability:

    def test_bulk_adjustment_does_not_reach_existing_list(self):
        create, company_repo, product_repo, price_list_repo = _setup()

        dto = create.handle(ALICE, "Promo", ["1"], DiscountSpec.percentage(-10))
        AdjustPricesHandler(company_repo, product_repo).handle(ALICE, ["1"], DiscountSpec.fixed(5))

        assert product_repo.get_by_id("1").price.amount == Decimal("105.00")
        snapshot = price_list_repo.get_by_id(dto.id).items[0]
        assert snapshot.adjusted_price.amount == Decimal("90.00")

        public = ShowPublicPriceListHandler(company_repo, product_repo, price_list_repo).handle(dto.id)
        assert public.items[0].adjusted_price == "BRL 90.00"
        assert public.items[0].product.price == "BRL 105.00"


class TestListPriceLists:

    def test_summaries_for_caller_only(self):
        create, company_repo, _, price_list_repo = _setup()
        create.handle(ALICE, "No discount", ["1"])
        create.handle(ALICE, "Ten off", ["1", "2"], DiscountSpec.percentage(-10))

        summaries = ListPriceListsHandler(company_repo, price_list_repo).handle(ALICE)

        by_name = {s.name: s for s in summaries}
        assert set(by_name) == {"No discount", "Ten off"}
        assert by_name["Ten off"].discount == "-10%"
        assert by_name["Ten off"].item_count == 2
        assert by_name["No discount"].discount is None
        assert ListPriceListsHandler(company_repo, price_list_repo).handle(BOB) == []


class TestDeletePriceList:

    def test_owner_can_delete(self):
        create, company_repo, _, price_list_repo = _setup()
        dto = create.handle(ALICE, "Temp", ["1"])
        DeletePriceListHandler(company_repo, price_list_repo).handle(ALICE, dto.id)
        assert price_list_repo.get_by_id(dto.id) is None

    def test_other_tenant_cannot_delete(self):
        create, company_repo, _, price_list_repo = _setup()
        dto = create.handle(ALICE, "Mine", ["1"])
        with pytest.raises(EntityNotFoundError):
            DeletePriceListHandler(company_repo, price_list_repo).handle(BOB, dto.id)
        assert price_list_repo.get_by_id(dto.id) is not None


class TestPublicPriceList:

    def test_company_details_and_items_sorted_by_description(self):
        create, company_repo, product_repo, price_list_repo = _setup()
        dto = create.handle(ALICE, "Public", ["1", "2"], DiscountSpec.percentage(-50))

        view = ShowPublicPriceListHandler(company_repo, product_repo, price_list_repo).handle(dto.id)

        assert view.name == "Public"
        assert view.company.name == "Alice Naturals"
        assert view.company.phone == "555-0100"
        assert [i.product.description for i in view.items] == ["Omega 3", "Zinc"]
        assert [i.adjusted_price for i in view.items] == ["BRL 20.00", "BRL 50.00"]
        assert view.generated_at

    def test_unknown_list(self):
        _, company_repo, product_repo, price_list_repo = _setup()
        with pytest.raises(EntityNotFoundError, match="not found"):
            ShowPublicPriceListHandler(company_repo, product_repo, price_list_repo).handle("nope")

    def test_rows_of_vanished_products_skipped(self):
        create, company_repo, product_repo, price_list_repo = _setup()
        dto = create.handle(ALICE, "Public", ["1", "2"])
        product_repo.delete(["2"])

        view = ShowPublicPriceListHandler(company_repo, product_repo, price_list_repo).handle(dto.id)
        assert [i.product.description for i in view.items] == ["Zinc"]
