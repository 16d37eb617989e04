"""
Product Reader

Maps rows of the products sheet onto Product records.

Columns are located by header text (row 1). Rows without an id or a
name are skipped silently; malformed optional cells fall back to their
defaults instead of failing the run.
"""

import logging
from typing import Dict, List, Optional, Sequence

from ..common.coercion import parse_availability, parse_price, split_pictures
from ..common.config_loader import (
    load_param_prefixes,
    load_product_columns,
    load_sheet_names,
    load_truthy_values,
)
from ..errors import NoProductsFoundError
from ..models import Product
from .param_parser import ParamColumn, extract_params, find_param_columns
from .workbook import Workbook

logger = logging.getLogger(__name__)


class ProductReader:
    """
    Reads the products sheet.

    Usage:
        reader = ProductReader()
        products = reader.read(workbook)
    """

    def __init__(
        self,
        columns: Optional[Dict[str, List[str]]] = None,
        param_prefixes: Optional[List[str]] = None,
        truthy_values: Optional[set] = None,
        sheet_name: Optional[str] = None,
    ):
        """
        Initialize the reader.

        Args:
            columns: Product field -> accepted headers (if None, loads from config)
            param_prefixes: Parameter header prefixes (if None, loads from config)
            truthy_values: Availability words meaning "in stock" (if None, loads from config)
            sheet_name: Products sheet name (if None, loads from config)
        """
        self.columns = columns if columns is not None else load_product_columns()
        self.param_prefixes = param_prefixes if param_prefixes is not None else load_param_prefixes()
        self.truthy_values = truthy_values if truthy_values is not None else load_truthy_values()
        self.sheet_name = sheet_name or load_sheet_names()['products']

    def build_header_index(self, headers: Sequence[str]) -> Dict[str, int]:
        """
        Map product fields to column indexes.

        The first column carrying any accepted header of a field wins.

        Args:
            headers: Header row

        Returns:
            Dictionary of field name -> column index, only for present fields
        """
        positions: Dict[str, int] = {}
        for index, header in enumerate(headers):
            positions.setdefault(header.strip(), index)

        index_map = {}
        for field_name, labels in self.columns.items():
            found = [positions[label] for label in labels if label in positions]
            if found:
                index_map[field_name] = min(found)
        return index_map

    def read(self, workbook: Workbook) -> List[Product]:
        """
        Read all products.

        Args:
            workbook: Open workbook

        Returns:
            Products in row order

        Raises:
            SheetNotFoundError: If the products sheet is absent
            NoProductsFoundError: If the sheet is empty or no row qualifies
        """
        rows = workbook.get_rows(self.sheet_name)
        if not any(rows):
            raise NoProductsFoundError(
                self.sheet_name, f"sheet '{self.sheet_name}' contains no data"
            )

        headers = [header.strip() for header in rows[0]]
        index_map = self.build_header_index(headers)
        param_columns = find_param_columns(headers, self.param_prefixes)

        for field_name in ('id', 'name'):
            if field_name not in index_map:
                logger.warning("Products sheet has no %s column", field_name)
        if param_columns:
            logger.debug("Parameter columns: %s", ", ".join(c.name for c in param_columns))

        products = []
        skipped = 0
        for row_number, row in enumerate(rows[1:], start=2):
            if not row:
                continue
            product = self.row_to_product(row, index_map, param_columns, row_number)
            if product is None:
                skipped += 1
                continue
            products.append(product)

        if skipped:
            logger.info("Skipped %d product rows without id or name", skipped)

        if not products:
            raise NoProductsFoundError(self.sheet_name)

        logger.info("Read %d products", len(products))
        return products

    def row_to_product(
        self,
        row: Sequence[str],
        index_map: Dict[str, int],
        param_columns: Sequence[ParamColumn],
        row_number: int = 0,
    ) -> Optional[Product]:
        """
        Convert one row to a Product.

        Args:
            row: Cell strings
            index_map: Field -> column index (from build_header_index)
            param_columns: Parameter columns (from find_param_columns)
            row_number: 1-based sheet row, for log messages

        Returns:
            Product, or None if id or name is missing
        """
        def cell(field_name: str) -> Optional[str]:
            index = index_map.get(field_name)
            if index is None or index >= len(row):
                return None
            return row[index]

        product_id = cell('id') or ''
        name = cell('name') or ''
        if not product_id or not name:
            logger.debug("Skipping product row %d: id or name missing", row_number)
            return None

        available, _ = parse_availability(cell('available'), self.truthy_values)

        price_text = cell('price')
        price, price_defaulted = parse_price(price_text)
        if price_defaulted and price_text:
            logger.debug("Product %s: unparseable price %r, using 0", product_id, price_text)

        return Product(
            id=product_id,
            name=name,
            available=available,
            price=price,
            currency_id=cell('currency_id') or '',
            category_id=cell('category_id') or '',
            url=cell('url') or '',
            pictures=split_pictures(cell('pictures')),
            vendor=cell('vendor') or '',
            description=cell('description') or '',
            sales_notes=cell('sales_notes') or '',
            params=extract_params(row, param_columns),
        )


def read_products(workbook: Workbook) -> List[Product]:
    """Read the products sheet with the configured layout."""
    return ProductReader().read(workbook)
