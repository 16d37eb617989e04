"""
Catalog data models.

Pure data classes for the records read from the workbook and the
catalog they are assembled into. No business logic - only data
structure definitions. Every record is frozen once constructed.
"""

from dataclasses import dataclass, field
from typing import Tuple


@dataclass(frozen=True)
class ShopSettings:
    """Shop header block of the feed."""
    name: str
    company: str
    url: str


@dataclass(frozen=True)
class Currency:
    """Currency with its exchange rate (passed through as written)."""
    id: str
    rate: str


@dataclass(frozen=True)
class Category:
    """Catalog category. Empty parent_id marks a root category."""
    id: str
    name: str
    parent_id: str = ""


@dataclass(frozen=True)
class Param:
    """Product characteristic taken from a "Параметр: Name (unit)" column."""
    name: str
    value: str
    unit: str = ""


@dataclass(frozen=True)
class Product:
    """
    Product row from the products sheet.

    Field Groups:
    - Identity: id and name (required, rows without them never get here)
    - Commerce: availability, price, currency and category references
    - Content: url, pictures, vendor, description, sales notes
    - Params: characteristics in column order
    """

    # Identity (required)
    id: str
    name: str

    # Commerce
    available: bool = True
    price: float = 0.0
    currency_id: str = ""
    category_id: str = ""

    # Content
    url: str = ""
    pictures: Tuple[str, ...] = ()
    vendor: str = ""
    description: str = ""
    sales_notes: str = ""

    params: Tuple[Param, ...] = ()

    def __post_init__(self):
        """Validate required fields after initialization."""
        if not self.id:
            raise ValueError("Product id is required")
        if not self.name:
            raise ValueError("Product name is required")


@dataclass(frozen=True)
class Offer:
    """
    XML projection of a Product.

    All values are already formatted for output: available is
    "true"/"false" and price carries exactly two decimals.
    """
    id: str
    available: str
    url: str
    price: str
    currency_id: str
    category_id: str
    name: str
    pictures: Tuple[str, ...] = ()
    vendor: str = ""
    description: str = ""
    sales_notes: str = ""
    params: Tuple[Param, ...] = ()


@dataclass(frozen=True)
class Catalog:
    """Root export record (yml_catalog element)."""
    date: str
    shop: ShopSettings
    currencies: Tuple[Currency, ...] = field(default_factory=tuple)
    categories: Tuple[Category, ...] = field(default_factory=tuple)
    offers: Tuple[Offer, ...] = field(default_factory=tuple)
