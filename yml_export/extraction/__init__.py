"""
Sheet extraction modules.

Modules:
    workbook - Workbook reader (openpyxl, read-only)
    settings_reader - Shop settings, currencies and categories sheets
    product_reader - ProductReader for the products sheet
    param_parser - "Параметр: Name (unit)" columns
"""

from .workbook import Workbook
from .settings_reader import read_categories, read_currencies, read_shop_settings
from .product_reader import ProductReader, read_products
from .param_parser import ParamColumn, extract_params, find_param_columns, parse_param_header

__all__ = [
    'Workbook',
    'read_shop_settings',
    'read_currencies',
    'read_categories',
    'ProductReader',
    'read_products',
    'ParamColumn',
    'parse_param_header',
    'find_param_columns',
    'extract_params',
]
