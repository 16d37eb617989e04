"""
Catalog Assembler

Combines shop settings, currencies, categories and products into the
Catalog record that the XML writer renders.
"""

from datetime import datetime
from typing import Optional, Sequence

from ..common.constants import DATE_FORMAT
from ..models import Catalog, Category, Currency, Offer, Product, ShopSettings


def format_price(price: float) -> str:
    """Format a price with exactly two decimals (19.5 -> '19.50')."""
    return f"{price:.2f}"


def product_to_offer(product: Product) -> Offer:
    """
    Convert a product to its offer projection.

    Args:
        product: Product to convert

    Returns:
        Offer with output-ready string values
    """
    return Offer(
        id=product.id,
        available='true' if product.available else 'false',
        url=product.url,
        price=format_price(product.price),
        currency_id=product.currency_id,
        category_id=product.category_id,
        name=product.name,
        pictures=product.pictures,
        vendor=product.vendor,
        description=product.description,
        sales_notes=product.sales_notes,
        params=product.params,
    )


def build_catalog(
    shop: ShopSettings,
    currencies: Sequence[Currency],
    categories: Sequence[Category],
    products: Sequence[Product],
    generated_at: Optional[datetime] = None,
) -> Catalog:
    """
    Build the root catalog record.

    Cross references (offer currency/category ids, category parents) are
    taken as-is; see validation.reference_checker for warnings.

    Args:
        shop: Shop settings
        currencies: Currencies in sheet order
        categories: Categories in sheet order
        products: Products in sheet order
        generated_at: Catalog timestamp (default: current local time)

    Returns:
        Catalog
    """
    if generated_at is None:
        generated_at = datetime.now()

    return Catalog(
        date=generated_at.strftime(DATE_FORMAT),
        shop=shop,
        currencies=tuple(currencies),
        categories=tuple(categories),
        offers=tuple(product_to_offer(product) for product in products),
    )
