"""
Export Errors

Exception hierarchy for the workbook to YML conversion.
Every error is terminal: the first one raised aborts the run.
"""

from typing import Optional


class YMLExportError(Exception):
    """
    Base class for conversion errors.

    The pipeline sets ``stage`` to the step that was running when the
    error surfaced; it is rendered as a prefix of the message so the
    CLI can print a single line.
    """

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message
        self.stage: Optional[str] = None

    def __str__(self) -> str:
        if self.stage:
            return f"{self.stage}: {self.message}"
        return self.message


class DocumentOpenError(YMLExportError):
    """Input workbook is missing or cannot be parsed."""

    def __init__(self, path: str, reason: str):
        super().__init__(f"cannot open workbook '{path}': {reason}")
        self.path = path


class SheetNotFoundError(YMLExportError):
    """A required sheet is absent from the workbook."""

    def __init__(self, sheet_name: str):
        super().__init__(f"sheet '{sheet_name}' not found")
        self.sheet_name = sheet_name


class SheetReadError(YMLExportError):
    """Rows of an existing sheet could not be retrieved."""

    def __init__(self, sheet_name: str, reason: str):
        super().__init__(f"cannot read sheet '{sheet_name}': {reason}")
        self.sheet_name = sheet_name


class EmptyCollectionError(YMLExportError):
    """A sheet yielded no usable rows."""

    def __init__(self, sheet_name: str, message: Optional[str] = None):
        super().__init__(message or f"no usable rows in sheet '{sheet_name}'")
        self.sheet_name = sheet_name


class NoProductsFoundError(EmptyCollectionError):
    """Products sheet has no row with both an id and a name."""

    def __init__(self, sheet_name: str, message: Optional[str] = None):
        super().__init__(
            sheet_name,
            message or f"no products to export in sheet '{sheet_name}'",
        )


class WriteError(YMLExportError):
    """Output file cannot be created or the XML cannot be encoded."""

    def __init__(self, path: str, reason: str):
        super().__init__(f"cannot write '{path}': {reason}")
        self.path = path
