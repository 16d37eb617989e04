"""Tests for yml_export/models/catalog.py"""

from dataclasses import FrozenInstanceError

import pytest

from yml_export.models import Category, Param, Product


class TestCategory:
    def test_root_by_default(self):
        assert Category(id="1", name="Книги").parent_id == ""


class TestParam:
    def test_unit_defaults_to_empty(self):
        assert Param(name="Цвет", value="синий").unit == ""


class TestProduct:
    def test_default_values(self, minimal_product):
        assert minimal_product.available is True
        assert minimal_product.price == 0.0
        assert minimal_product.pictures == ()
        assert minimal_product.params == ()
        assert minimal_product.vendor == ""

    def test_raises_on_empty_id(self):
        with pytest.raises(ValueError, match="id is required"):
            Product(id="", name="Блокнот")

    def test_raises_on_empty_name(self):
        with pytest.raises(ValueError, match="name is required"):
            Product(id="1", name="")

    def test_is_immutable(self, full_product):
        with pytest.raises(FrozenInstanceError):
            full_product.price = 1.0
