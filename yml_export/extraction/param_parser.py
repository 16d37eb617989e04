"""
Parameter Column Parser

Recognizes product columns whose header reads "Параметр: Name (unit)"
and turns the filled cells of a row into Param records.

Parameter columns are kept in original column order, so params come out
in the order they appear in the sheet.
"""

import logging
from dataclasses import dataclass
from typing import List, Optional, Sequence, Tuple

from ..common.config_loader import load_param_prefixes
from ..models import Param

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ParamColumn:
    """A parameter column: its position and the parsed header."""
    index: int
    name: str
    unit: str = ""


def parse_param_header(header: str, prefixes: Sequence[str]) -> Optional[Tuple[str, str]]:
    """
    Parse a parameter header into (name, unit).

    Args:
        header: Column header text
        prefixes: Accepted header prefixes (e.g. 'Параметр:')

    Returns:
        (name, unit), or None if the header is not a parameter header

    Examples:
        'Параметр: Вес (кг)'   -> ('Вес', 'кг')
        'Parameter: Color'     -> ('Color', '')
        'Цена'                 -> None
    """
    for prefix in prefixes:
        if header.startswith(prefix):
            remainder = header[len(prefix):]
            break
    else:
        return None

    name, paren, unit = remainder.partition('(')
    if not paren:
        return remainder.strip(), ''

    unit = unit.strip()
    if unit.endswith(')'):
        unit = unit[:-1]
    return name.strip(), unit


def find_param_columns(
    headers: Sequence[str],
    prefixes: Optional[Sequence[str]] = None,
) -> List[ParamColumn]:
    """
    Find parameter columns in a header row.

    Args:
        headers: Header row of the products sheet
        prefixes: Accepted header prefixes (if None, loads from config)

    Returns:
        Parameter columns sorted by column index
    """
    if prefixes is None:
        prefixes = load_param_prefixes()

    columns = []
    for index, header in enumerate(headers):
        parsed = parse_param_header(header, prefixes)
        if parsed is None:
            continue
        name, unit = parsed
        if not name:
            logger.warning("Ignoring parameter column %d with no name: %r", index + 1, header)
            continue
        columns.append(ParamColumn(index=index, name=name, unit=unit))

    return sorted(columns, key=lambda column: column.index)


def extract_params(row: Sequence[str], columns: Sequence[ParamColumn]) -> Tuple[Param, ...]:
    """
    Build the params of one product row.

    A param is produced only for non-empty cells.

    Args:
        row: Product row (cell strings)
        columns: Parameter columns from find_param_columns()

    Returns:
        Params in column order
    """
    params = []
    for column in columns:
        if column.index >= len(row):
            continue
        value = row[column.index]
        if value:
            params.append(Param(name=column.name, value=value, unit=column.unit))
    return tuple(params)
