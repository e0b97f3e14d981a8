"""Spreadsheet cell parsing utilities.

Cells arrive as openpyxl gives them: ``int``/``float`` for numeric cells,
``str`` for text cells, ``None`` for empty cells, and date or boolean types for
anything else.
"""

import re
from typing import Any, Optional

_INTEGER_TEXT = re.compile(r"[+-]?\d+")


def _is_number(value: Any) -> bool:
    # bool is an int subclass but a boolean cell is not a number
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def _integral(value: float) -> int:
    if isinstance(value, float) and not value.is_integer():
        raise ValueError(f"expected a whole number, got {value}")
    return int(value)


def is_blank(value: Any) -> bool:
    """Return True for an empty cell or a cell holding only whitespace."""
    return value is None or (isinstance(value, str) and not value.strip())


def parse_row_id(value: Any) -> int:
    """Parse the id cell of a row.

    Args:
        value: Raw cell value

    Returns:
        Row id

    Raises:
        ValueError: If the cell is empty or not numeric
    """
    if value is None:
        raise ValueError("id is missing")
    if not _is_number(value):
        raise ValueError(f"id must be a number, got '{value}'")
    return _integral(value)


def parse_name(value: Any) -> str:
    """Parse the name cell of a row.

    Raises:
        ValueError: If the cell is empty, blank, or not text
    """
    if value is None:
        raise ValueError("name is missing")
    if not isinstance(value, str):
        raise ValueError(f"name must be text, got '{value}'")
    name = value.strip()
    if not name:
        raise ValueError("name must not be empty")
    return name


def parse_parent_id(value: Any) -> Optional[int]:
    """Parse the parent_id cell of a row.

    Handles:
    - empty cell or blank text (no parent)
    - numeric cell, e.g. 3 or 3.0
    - numeric text, e.g. "3" or " 3 "
    - zero in either form (no parent)

    Returns:
        Parent row id, or None when the row is a root

    Raises:
        ValueError: If the cell holds anything else
    """
    if is_blank(value):
        return None

    if _is_number(value):
        parent_id = _integral(value)
    elif isinstance(value, str) and _INTEGER_TEXT.fullmatch(value.strip()):
        parent_id = int(value.strip())
    else:
        raise ValueError(f"parent_id must be a number, got '{value}'")

    return parent_id or None
