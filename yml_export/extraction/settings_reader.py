"""
Settings Readers

Map the shop settings, currencies and categories sheets onto records.
Row 1 of every sheet is a header and is skipped.
"""

import logging
from typing import Dict, List, Optional

from ..common.config_loader import (
    build_key_lookup,
    load_sheet_names,
    load_shop_settings_layout,
)
from ..errors import EmptyCollectionError
from ..models import Category, Currency, ShopSettings
from .workbook import Workbook

logger = logging.getLogger(__name__)


def read_shop_settings(
    workbook: Workbook,
    sheet_name: Optional[str] = None,
    layout: Optional[Dict] = None,
) -> ShopSettings:
    """
    Read the key/value shop settings sheet.

    Unrecognized keys are ignored and missing values fall back to the
    configured defaults, so this never fails once the sheet exists.

    Args:
        workbook: Open workbook
        sheet_name: Sheet to read (if None, loads from config)
        layout: Keys and defaults (if None, loads from config)

    Returns:
        ShopSettings
    """
    if sheet_name is None:
        sheet_name = load_sheet_names()['shop_settings']
    if layout is None:
        layout = load_shop_settings_layout()

    lookup = build_key_lookup(layout.get('keys', {}))
    defaults = layout.get('defaults', {})
    values: Dict[str, str] = {}

    for row in workbook.get_rows(sheet_name)[1:]:
        if len(row) < 2:
            continue
        field_name = lookup.get(row[0])
        if field_name is None:
            logger.debug("Ignoring unknown shop setting %r", row[0])
            continue
        values[field_name] = row[1]

    resolved = {}
    for field_name in ('name', 'company', 'url'):
        value = values.get(field_name, '')
        if not value:
            value = defaults.get(field_name, '')
            logger.info("Shop %s not set, using default %r", field_name, value)
        resolved[field_name] = value

    return ShopSettings(**resolved)


def read_currencies(workbook: Workbook, sheet_name: Optional[str] = None) -> List[Currency]:
    """
    Read (id, rate) rows.

    Args:
        workbook: Open workbook
        sheet_name: Sheet to read (if None, loads from config)

    Returns:
        Currencies in row order

    Raises:
        EmptyCollectionError: If no row has a currency id
    """
    if sheet_name is None:
        sheet_name = load_sheet_names()['currencies']

    currencies = []
    for row_number, row in enumerate(workbook.get_rows(sheet_name)[1:], start=2):
        if len(row) < 2 or not row[0]:
            if row:
                logger.debug("Skipping currency row %d: id or rate missing", row_number)
            continue
        currencies.append(Currency(id=row[0], rate=row[1]))

    if not currencies:
        raise EmptyCollectionError(sheet_name, f"no currencies in sheet '{sheet_name}'")

    logger.info("Read %d currencies", len(currencies))
    return currencies


def read_categories(workbook: Workbook, sheet_name: Optional[str] = None) -> List[Category]:
    """
    Read (id, name, parent id) rows.

    Args:
        workbook: Open workbook
        sheet_name: Sheet to read (if None, loads from config)

    Returns:
        Categories in row order

    Raises:
        EmptyCollectionError: If no row has both an id and a name
    """
    if sheet_name is None:
        sheet_name = load_sheet_names()['categories']

    categories = []
    for row_number, row in enumerate(workbook.get_rows(sheet_name)[1:], start=2):
        if len(row) < 2 or not row[0] or not row[1]:
            if row:
                logger.debug("Skipping category row %d: id or name missing", row_number)
            continue
        parent_id = row[2] if len(row) > 2 else ''
        categories.append(Category(id=row[0], name=row[1], parent_id=parent_id))

    if not categories:
        raise EmptyCollectionError(sheet_name, f"no categories in sheet '{sheet_name}'")

    logger.info("Read %d categories", len(categories))
    return categories
