"""
Data models for catalog export.

This module contains pure data classes with no business logic.
"""

from .catalog import Catalog, Category, Currency, Offer, Param, Product, ShopSettings

__all__ = ['ShopSettings', 'Currency', 'Category', 'Param', 'Product', 'Offer', 'Catalog']
