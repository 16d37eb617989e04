"""
Workbook to YML Converter

Runs the whole conversion: open workbook -> read the four sheets ->
assemble catalog -> check references (if asked) -> write XML.

The first error aborts the run. Errors keep their type and are tagged
with the stage that raised them.
"""

import logging
from contextlib import contextmanager
from dataclasses import dataclass, field
from datetime import datetime
from pathlib import Path
from typing import Iterator, List, Optional

from .catalog.assembler import build_catalog
from .errors import YMLExportError
from .export.xml_writer import YMLWriter
from .extraction.product_reader import ProductReader
from .extraction.settings_reader import read_categories, read_currencies, read_shop_settings
from .extraction.workbook import Workbook
from .validation.reference_checker import check_references

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ConversionResult:
    """Summary of a finished conversion."""
    output_path: str
    currencies: int
    categories: int
    offers: int
    warnings: List[str] = field(default_factory=list)


@contextmanager
def stage(name: str) -> Iterator[None]:
    """Tag any export error raised inside the block with a stage label."""
    try:
        yield
    except YMLExportError as e:
        if e.stage is None:
            e.stage = name
        raise


def convert(
    input_path: str | Path,
    output_path: str | Path,
    generated_at: Optional[datetime] = None,
    writer: Optional[YMLWriter] = None,
    check_refs: bool = False,
) -> ConversionResult:
    """
    Convert a workbook to a YML feed.

    Args:
        input_path: Source .xlsx workbook
        output_path: Destination XML file
        generated_at: Catalog timestamp (default: now)
        writer: XML writer (default: YMLWriter())
        check_refs: Log warnings for undeclared currency, category and
            parent ids and for duplicate offer ids

    Returns:
        ConversionResult

    Raises:
        YMLExportError: On the first failure (nothing is written unless
            all sheets were read successfully)
    """
    logger.info("Converting %s -> %s", input_path, output_path)

    with stage("opening workbook"):
        workbook = Workbook(input_path)

    with workbook:
        with stage("reading shop settings"):
            shop = read_shop_settings(workbook)
        with stage("reading currencies"):
            currencies = read_currencies(workbook)
        with stage("reading categories"):
            categories = read_categories(workbook)
        with stage("reading products"):
            products = ProductReader().read(workbook)

    catalog = build_catalog(shop, currencies, categories, products, generated_at=generated_at)

    warnings = check_references(catalog) if check_refs else []
    for warning in warnings:
        logger.warning(warning)

    with stage("writing XML"):
        (writer or YMLWriter()).write(catalog, str(output_path))

    return ConversionResult(
        output_path=str(output_path),
        currencies=len(catalog.currencies),
        categories=len(catalog.categories),
        offers=len(catalog.offers),
        warnings=warnings,
    )
