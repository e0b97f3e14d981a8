"""Domain model entities for categorytree.

These are pure data classes representing business concepts, independent of
database schema. Services pass them to and receive them from the Database
interface, never ORM objects.
"""

from dataclasses import dataclass
from datetime import datetime
from typing import Optional


@dataclass(frozen=True)
class Category:
    """Category domain entity with hierarchical structure.

    ``id`` is None until the category has been saved.
    """

    id: Optional[int]
    name: str
    parent_id: Optional[int] = None
    created_at: Optional[datetime] = None

    @property
    def is_root(self) -> bool:
        return self.parent_id is None


@dataclass(frozen=True)
class ParsedRow:
    """One data row of an imported spreadsheet.

    ``row_id`` and ``parent_row_id`` are only meaningful inside the file they
    were read from; they never refer to stored category ids.
    """

    row_id: int
    name: str
    parent_row_id: Optional[int]
    row_number: int
