"""
Workbook Reader

Opens an .xlsx workbook with openpyxl and returns sheet rows as lists
of cell strings. The first row of every sheet is its header row.
"""

import logging
from pathlib import Path
from typing import List

from openpyxl import load_workbook

from ..common.coercion import cell_to_str
from ..errors import DocumentOpenError, SheetNotFoundError, SheetReadError

logger = logging.getLogger(__name__)


def _trim_row(cells: List[str]) -> List[str]:
    """Drop trailing empty cells so a row ends at its last filled cell."""
    end = len(cells)
    while end and not cells[end - 1]:
        end -= 1
    return cells[:end]


class Workbook:
    """
    Read-only view of a spreadsheet document.

    Usage:
        with Workbook("template.xlsx") as workbook:
            rows = workbook.get_rows("Валюты")
    """

    def __init__(self, path: str | Path):
        """
        Open the workbook.

        Args:
            path: Path to the .xlsx file

        Raises:
            DocumentOpenError: If the file is missing or not a workbook
        """
        self.path = Path(path)

        if not self.path.is_file():
            raise DocumentOpenError(str(self.path), "file does not exist")

        try:
            self._book = load_workbook(self.path, read_only=True, data_only=True)
        except Exception as e:
            raise DocumentOpenError(str(self.path), str(e) or type(e).__name__) from e

        logger.debug("Opened %s (sheets: %s)", self.path, ", ".join(self._book.sheetnames))

    def __enter__(self):
        return self

    def __exit__(self, *args):
        self.close()

    def close(self):
        self._book.close()

    def sheet_names(self) -> List[str]:
        """Sheet names in workbook order."""
        return list(self._book.sheetnames)

    def has_sheet(self, name: str) -> bool:
        return name in self._book.sheetnames

    def get_rows(self, name: str) -> List[List[str]]:
        """
        Read all rows of a sheet.

        Args:
            name: Exact sheet name

        Returns:
            Rows as lists of cell strings, trailing empty cells removed

        Raises:
            SheetNotFoundError: If the sheet is absent
            SheetReadError: If the sheet data cannot be parsed
        """
        if not self.has_sheet(name):
            raise SheetNotFoundError(name)

        try:
            worksheet = self._book[name]
            # Stored <dimension> can be stale (e.g. "A1"); read the real extent
            worksheet.reset_dimensions()
            rows = [
                _trim_row([cell_to_str(value) for value in row])
                for row in worksheet.iter_rows(values_only=True)
            ]
        except Exception as e:
            raise SheetReadError(name, str(e) or type(e).__name__) from e

        logger.debug("Sheet '%s': %d rows", name, len(rows))
        return rows
