"""Catalog assembly."""

from .assembler import build_catalog, format_price, product_to_offer

__all__ = ['build_catalog', 'format_price', 'product_to_offer']
