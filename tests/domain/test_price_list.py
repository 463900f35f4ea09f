"""Unit tests for the PriceList aggregate."""

from decimal import Decimal

import pytest

from catalog.domain.exceptions import ValidationError
from catalog.domain.model.discount import DiscountSpec
from catalog.domain.model.price_list import PriceList
from catalog.domain.model.value_objects import Money
from tests.builders import product


class TestCreate:

    def test_snapshots_adjusted_prices(self):
        products = [product("1", "100.00"), product("2", "20.00")]
        pl = PriceList.create("1", "Wholesale", products, DiscountSpec.percentage(-10))

        assert [i.product_id for i in pl.items] == ["1", "2"]
        assert [i.adjusted_price.amount for i in pl.items] == [Decimal("90"), Decimal("18")]

    def test_without_discount_keeps_base_prices(self):
        pl = PriceList.create("1", "Retail", [product("1", "12.34")])
        assert pl.discount is None
        assert pl.items[0].adjusted_price == Money.of("12.34")

    def test_assigns_unique_ids(self):
        a = PriceList.create("1", "A", [product("1", "1")])
        b = PriceList.create("1", "B", [product("1", "1")])
        assert a.id != b.id

    def test_does_not_touch_products(self):
        p = product("1", "100.00")
        PriceList.create("1", "Promo", [p], DiscountSpec.fixed(-30))
        assert p.price == Money.of("100.00")

    def test_later_product_change_does_not_reach_snapshot(self):
        p = product("1", "100.00")
        pl = PriceList.create("1", "Promo", [p], DiscountSpec.percentage(-10))
        p.apply_adjustment(DiscountSpec.fixed(5))
        assert pl.items[0].adjusted_price.amount == Decimal("90")

    def test_name_required(self):
        with pytest.raises(ValidationError, match="name is required"):
            PriceList.create("1", " ", [product("1", "1")])

    def test_products_required(self):
        with pytest.raises(ValidationError, match="at least one product"):
            PriceList.create("1", "Empty", [])


class TestDropProducts:

    def test_removes_only_matching_rows(self):
        pl = PriceList.create("1", "A", [product("1", "1"), product("2", "2"), product("3", "3")])
        assert pl.drop_products({"2", "9"}) == 1
        assert [i.product_id for i in pl.items] == ["1", "3"]
        assert pl.item_count == 2
