"""Tests for yml_export/catalog/assembler.py"""

import pytest

from yml_export.catalog.assembler import build_catalog, format_price, product_to_offer
from yml_export.models import Product


class TestFormatPrice:
    @pytest.mark.parametrize("price, expected", [
        (19.5, "19.50"),
        (0.0, "0.00"),
        (1234.567, "1234.57"),
        (100.0, "100.00"),
    ])
    def test_two_decimals(self, price, expected):
        assert format_price(price) == expected


class TestProductToOffer:
    def test_copies_fields(self, full_product):
        offer = product_to_offer(full_product)
        assert offer.id == "101"
        assert offer.name == full_product.name
        assert offer.url == full_product.url
        assert offer.currency_id == "RUR"
        assert offer.category_id == "2"
        assert offer.pictures == full_product.pictures
        assert offer.vendor == full_product.vendor
        assert offer.description == full_product.description
        assert offer.sales_notes == full_product.sales_notes
        assert offer.params == full_product.params

    def test_formats_price_and_availability(self, full_product):
        offer = product_to_offer(full_product)
        assert offer.price == "19.50"
        assert offer.available == "true"

    def test_unavailable(self):
        offer = product_to_offer(Product(id="1", name="Ручка", available=False))
        assert offer.available == "false"
        assert offer.price == "0.00"


class TestBuildCatalog:
    def test_date_format(self, shop_settings, currencies, categories, full_product, generated_at):
        catalog = build_catalog(shop_settings, currencies, categories, [full_product], generated_at)
        assert catalog.date == "2024-03-15 09:05"

    def test_default_date_is_now(self, shop_settings, currencies, categories, full_product):
        catalog = build_catalog(shop_settings, currencies, categories, [full_product])
        assert len(catalog.date) == len("2024-03-15 09:05")

    def test_preserves_order(self, shop_settings, currencies, categories, full_product, minimal_product):
        catalog = build_catalog(shop_settings, currencies, categories, [minimal_product, full_product])
        assert [offer.id for offer in catalog.offers] == ["200", "101"]
        assert [c.id for c in catalog.currencies] == ["RUR", "USD"]
        assert [c.id for c in catalog.categories] == ["1", "2"]

    def test_dangling_references_accepted(self, shop_settings, currencies, categories):
        product = Product(id="1", name="Ручка", currency_id="XXX", category_id="999")
        catalog = build_catalog(shop_settings, currencies, categories, [product])
        assert catalog.offers[0].currency_id == "XXX"
        assert catalog.offers[0].category_id == "999"
