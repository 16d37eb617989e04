"""Shared test fixtures."""

from datetime import datetime

import pytest
from openpyxl import Workbook as OpenpyxlWorkbook

from yml_export.extraction.workbook import Workbook
from yml_export.models import Category, Currency, Param, Product, ShopSettings

SETTINGS_SHEET = "Настройки магазина"
CURRENCIES_SHEET = "Валюты"
CATEGORIES_SHEET = "Категории"
PRODUCTS_SHEET = "Товары"

PRODUCT_HEADERS = [
    "ID товара",
    "Название товара",
    "Доступность (true/false)",
    "URL товара",
    "Цена",
    "Валюта (ID)",
    "ID категории",
    "URL изображения",
    "Производитель",
    "Описание",
    "Примечания",
    "Параметр: Цвет",
    "Parameter: Weight (kg)",
]


def _sample_sheets():
    return {
        SETTINGS_SHEET: [
            ["Параметр", "Значение"],
            ["Название магазина", "Книжная лавка"],
            ["Название компании", "ООО Лавка"],
            ["URL сайта", "https://lavka.example.com"],
        ],
        CURRENCIES_SHEET: [
            ["ID", "Курс"],
            ["RUR", "1"],
            ["USD", "CBRF"],
        ],
        CATEGORIES_SHEET: [
            ["ID", "Название", "Родитель"],
            ["1", "Книги"],
            ["2", "Детективы", "1"],
        ],
        PRODUCTS_SHEET: [
            PRODUCT_HEADERS,
            ["101", "Шерлок Холмс", "Да", "https://lavka.example.com/101", "19.5", "RUR", "2",
             "a.jpg, b.jpg ,  , c.jpg", "Эксмо", "Сборник рассказов", "Предоплата", "синий", "2.5"],
            ["102", "Без наличия", "нет", "https://lavka.example.com/102", "abc", "RUR", "1",
             "", "", "", "", "", ""],
            ["", "Без артикула", "true", "", "10", "RUR", "1"],
            ["104", "", "true", "", "10", "RUR", "1"],
        ],
    }


@pytest.fixture
def make_workbook(tmp_path):
    """
    Build an .xlsx file from {sheet name: rows}.

    Returns a function taking the sheets dict (and an optional file name)
    and returning the workbook path.
    """
    def _make(sheets, filename="shop.xlsx"):
        book = OpenpyxlWorkbook()
        book.remove(book.active)
        for name, rows in sheets.items():
            worksheet = book.create_sheet(title=name)
            for row in rows:
                worksheet.append(row)
        path = tmp_path / filename
        book.save(path)
        return path

    return _make


@pytest.fixture
def sample_sheets():
    """Rows of a complete, valid shop workbook."""
    return _sample_sheets()


@pytest.fixture
def sample_workbook_path(make_workbook, sample_sheets):
    return make_workbook(sample_sheets)


@pytest.fixture
def open_workbook(make_workbook):
    """Open a workbook built from sheets; closed after the test."""
    opened = []

    def _open(sheets):
        workbook = Workbook(make_workbook(sheets))
        opened.append(workbook)
        return workbook

    yield _open

    for workbook in opened:
        workbook.close()


@pytest.fixture
def generated_at():
    return datetime(2024, 3, 15, 9, 5)


@pytest.fixture
def shop_settings():
    return ShopSettings(name="Книжная лавка", company="ООО Лавка", url="https://lavka.example.com")


@pytest.fixture
def currencies():
    return [Currency(id="RUR", rate="1"), Currency(id="USD", rate="CBRF")]


@pytest.fixture
def categories():
    return [Category(id="1", name="Книги"), Category(id="2", name="Детективы", parent_id="1")]


@pytest.fixture
def minimal_product():
    """Create a minimal product with only required fields."""
    return Product(id="200", name="Блокнот")


@pytest.fixture
def full_product():
    """Create a fully populated product with all fields."""
    return Product(
        id="101",
        name="Шерлок Холмс",
        available=True,
        price=19.5,
        currency_id="RUR",
        category_id="2",
        url="https://lavka.example.com/101",
        pictures=("a.jpg", "b.jpg"),
        vendor="Эксмо",
        description="Сборник рассказов",
        sales_notes="Предоплата",
        params=(Param(name="Weight", value="2.5", unit="kg"), Param(name="Цвет", value="синий")),
    )
