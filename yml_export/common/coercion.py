"""
Cell Coercion

Pure functions turning spreadsheet cell text into typed values.

Malformed cells are never errors: every parser falls back to a default
and reports that it did so, as ``(value, used_default)``. Callers decide
whether the fallback is worth a log line.
"""

import math
from datetime import date, datetime, time
from numbers import Number
from typing import Callable, Iterable, Optional, Tuple, TypeVar

T = TypeVar('T')


def cell_to_str(value) -> str:
    """
    Normalize a raw openpyxl cell value to text.

    Numbers stored as whole floats lose their decimal part
    (5225.0 -> '5225') so numeric ids read the way they are displayed.

    Args:
        value: Cell value as returned by openpyxl (values_only)

    Returns:
        Cell text, empty string for empty cells
    """
    if value is None:
        return ""
    if isinstance(value, bool):
        return "TRUE" if value else "FALSE"
    if isinstance(value, Number):
        if isinstance(value, float) and value.is_integer():
            return str(int(value))
        return str(value)
    if isinstance(value, (datetime, date, time)):
        return value.isoformat()
    return str(value)


def parse_optional(
    text: Optional[str],
    parser: Callable[[str], T],
    default: T,
) -> Tuple[T, bool]:
    """
    Parse a cell, falling back to a default on any failure.

    Args:
        text: Cell text, None when the column or cell is absent
        parser: Converter raising ValueError on malformed input
        default: Value used when the cell is absent or malformed

    Returns:
        (value, used_default)
    """
    if text is None:
        return default, True
    try:
        return parser(text), False
    except (ValueError, TypeError):
        return default, True


def _finite_float(text: str) -> float:
    # float() also takes surrounding spaces and digit separators; a cell
    # holding either is treated as malformed
    if text != text.strip() or '_' in text:
        raise ValueError(f"malformed price: {text!r}")
    value = float(text)
    if not math.isfinite(value):
        raise ValueError(f"non-finite price: {text!r}")
    return value


def parse_price(text: Optional[str]) -> Tuple[float, bool]:
    """
    Parse a price cell.

    Examples:
        '19.5'  -> (19.5, False)
        'abc'   -> (0.0, True)
        None    -> (0.0, True)
    """
    return parse_optional(text, _finite_float, 0.0)


def parse_availability(text: Optional[str], truthy: Iterable[str]) -> Tuple[bool, bool]:
    """
    Parse an availability cell.

    An absent cell (no column, or the row ends before it) means
    available. A present cell means available only when its text
    matches one of the truthy words (case-insensitive); any other text,
    blank included, means not available.

    Args:
        text: Cell text, None when the column or cell is absent
        truthy: Lowercase words meaning "in stock"

    Returns:
        (available, used_default)
    """
    if text is None:
        return True, True
    words = set(truthy)
    return text.strip().lower() in words, False


def split_pictures(text: Optional[str]) -> Tuple[str, ...]:
    """
    Split a comma-separated list of picture URLs.

    Segments are trimmed and empty ones dropped; order is kept.

    Example:
        'a.jpg, b.jpg ,  , c.jpg' -> ('a.jpg', 'b.jpg', 'c.jpg')
    """
    if not text:
        return ()
    return tuple(part.strip() for part in text.split(',') if part.strip())
