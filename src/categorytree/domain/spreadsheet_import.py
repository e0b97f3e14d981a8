"""Spreadsheet import domain service.

Imports a flat (id, name, parent_id) sheet into the category forest. The ids in
the sheet are local to the file: parent references are resolved against the
other rows of the same file, and each row is then matched to a stored category
by name. Existing categories are reused, missing ones are created, and parent
links are set from the file. The whole merge is one transaction.
"""

from dataclasses import replace
from io import BytesIO
from pathlib import Path
from typing import Any, Optional, Sequence, Union

from openpyxl import load_workbook

from categorytree.database.base import Database
from categorytree.domain.entities import Category, ParsedRow
from categorytree.domain.errors import (
    CyclicHierarchyError,
    InvalidRowFormatError,
    InvalidSpreadsheetError,
    SizeLimitExceededError,
)
from categorytree.domain.spreadsheet_export import MAX_FILE_SIZE
from categorytree.logger import get_logger
from categorytree.utils.cell_parser import (
    is_blank,
    parse_name,
    parse_parent_id,
    parse_row_id,
)

logger = get_logger()

# Row 1 holds the headers
FIRST_DATA_ROW = 2
COLUMN_COUNT = 3


class SpreadsheetImporter:
    """Service for importing categories from a spreadsheet."""

    def __init__(self, db: Database, max_file_size: int = MAX_FILE_SIZE):
        """Initialize spreadsheet importer.

        Args:
            db: Database instance
            max_file_size: Largest payload, in bytes, that will be parsed
        """
        self.db = db
        self.max_file_size = max_file_size

    def import_file(self, path: Union[str, Path]) -> dict[str, Any]:
        """Import categories from an .xlsx file on disk.

        The size limit is checked before the file is read.

        Raises:
            FileNotFoundError: If the file doesn't exist
            SizeLimitExceededError: If the file is larger than the limit
        """
        path = Path(path)
        if not path.exists():
            raise FileNotFoundError(f"Spreadsheet not found: {path}")

        size = path.stat().st_size
        if size > self.max_file_size:
            raise SizeLimitExceededError(size, self.max_file_size)

        return self.import_workbook(path.read_bytes())

    def import_workbook(self, payload: bytes) -> dict[str, Any]:
        """Parse a workbook and merge its rows into the store.

        Args:
            payload: Raw .xlsx contents

        Returns:
            Dict with import statistics:
            - created: number of categories created
            - reused: number of existing categories matched by name
            - relinked: number of parent links written
            - demoted: row ids whose parent row doesn't exist (imported as roots)

        Raises:
            SizeLimitExceededError: If the payload is larger than the limit
            InvalidSpreadsheetError: If the payload is not a readable workbook
            InvalidRowFormatError: If any row is malformed; nothing is imported
            CyclicHierarchyError: If the file's parent links would form a cycle
        """
        rows = self.parse_workbook(payload)
        return self.reconcile(rows)

    def parse_workbook(self, payload: bytes) -> dict[int, ParsedRow]:
        """Parse every data row of the first sheet.

        Returns:
            Parsed rows keyed by row id, in file order
        """
        if len(payload) > self.max_file_size:
            raise SizeLimitExceededError(len(payload), self.max_file_size)

        try:
            workbook = load_workbook(BytesIO(payload), data_only=True)
        except Exception as e:
            raise InvalidSpreadsheetError(f"Could not read spreadsheet: {e}") from e

        sheet = workbook.worksheets[0]
        rows: dict[int, ParsedRow] = {}
        for row_number, values in enumerate(
            sheet.iter_rows(min_row=FIRST_DATA_ROW, max_col=COLUMN_COUNT, values_only=True),
            start=FIRST_DATA_ROW,
        ):
            if all(is_blank(value) for value in values):
                continue

            row = self.parse_row(row_number, values)
            previous = rows.get(row.row_id)
            if previous is not None:
                raise InvalidRowFormatError(
                    row_number,
                    f"id {row.row_id} is already used in row {previous.row_number}",
                )
            rows[row.row_id] = row

        workbook.close()
        return rows

    def parse_row(self, row_number: int, values: Sequence[Any]) -> ParsedRow:
        """Parse one (id, name, parent_id) row.

        Args:
            row_number: 1-based sheet row number, used in error messages
            values: Raw cell values

        Raises:
            InvalidRowFormatError: If any cell is invalid
        """
        values = list(values) + [None] * (COLUMN_COUNT - len(values))
        id_value, name_value, parent_value = values[:COLUMN_COUNT]
        try:
            return ParsedRow(
                row_id=parse_row_id(id_value),
                name=parse_name(name_value),
                parent_row_id=parse_parent_id(parent_value),
                row_number=row_number,
            )
        except ValueError as e:
            raise InvalidRowFormatError(row_number, str(e)) from e

    def reconcile(self, rows: dict[int, ParsedRow]) -> dict[str, Any]:
        """Merge parsed rows into the store, matching categories by name.

        A row whose parent id doesn't match any row in the file is imported as
        a root instead of failing the import. An existing category keeps its
        current parent unless the file gives it one.

        Args:
            rows: Parsed rows keyed by row id

        Returns:
            Import statistics, see import_workbook()
        """
        parent_rows, demoted = self._resolve_parent_rows(rows)
        declared_parents = self._declared_parents(rows, parent_rows)

        with self.db.transaction():
            names = list(dict.fromkeys(row.name for row in rows.values()))
            existing = {cat.name: cat for cat in self.db.find_by_name_in(names)}

            self._check_for_cycles(names, declared_parents)

            staged = [Category(id=None, name=name) for name in names if name not in existing]
            created = self.db.save_all(staged)

            by_name: dict[str, Category] = {**existing, **{cat.name: cat for cat in created}}
            row_categories = {row_id: by_name[row.name] for row_id, row in rows.items()}

            relinked = 0
            for name, parent_row in declared_parents.items():
                category = by_name[name]
                parent = row_categories[parent_row.row_id]
                if category.parent_id != parent.id:
                    by_name[name] = self.db.save(replace(category, parent_id=parent.id))
                    relinked += 1

        logger.info(
            f"Imported {len(rows)} rows: {len(created)} created, "
            f"{len(existing)} reused, {relinked} parent links set"
        )
        return {
            "created": len(created),
            "reused": len(existing),
            "relinked": relinked,
            "demoted": demoted,
        }

    def _resolve_parent_rows(
        self, rows: dict[int, ParsedRow]
    ) -> tuple[dict[int, ParsedRow], list[int]]:
        """Look up each row's parent row in the file.

        Returns:
            Parent row by child row id, and the ids of rows demoted to root
        """
        parent_rows: dict[int, ParsedRow] = {}
        demoted: list[int] = []
        for row in rows.values():
            if row.parent_row_id is None:
                continue
            parent = rows.get(row.parent_row_id)
            if parent is None:
                logger.warning(
                    f"Row {row.row_number}: parent id {row.parent_row_id} not found in file, "
                    f"importing '{row.name}' as a root"
                )
                demoted.append(row.row_id)
            else:
                parent_rows[row.row_id] = parent
        return parent_rows, demoted

    def _declared_parents(
        self, rows: dict[int, ParsedRow], parent_rows: dict[int, ParsedRow]
    ) -> dict[str, ParsedRow]:
        """Collapse rows to one declared parent row per category name.

        Rows that repeat a name refer to the same category, so they may not
        disagree about its parent.

        Raises:
            InvalidRowFormatError: If two rows give one name different parents
        """
        declared: dict[str, ParsedRow] = {}
        for row_id, parent in parent_rows.items():
            row = rows[row_id]
            previous = declared.get(row.name)
            if previous is not None and previous.name != parent.name:
                raise InvalidRowFormatError(
                    row.row_number,
                    f"'{row.name}' is already placed under '{previous.name}' by another row",
                )
            declared[row.name] = parent
        return declared

    def _check_for_cycles(self, names: list[str], declared_parents: dict[str, ParsedRow]) -> None:
        """Fail if the store's parent links plus the file's would form a cycle.

        Raises:
            CyclicHierarchyError: If a cycle would be created
        """
        stored = self.db.find_all()
        names_by_id = {cat.id: cat.name for cat in stored}

        parent_of: dict[str, Optional[str]] = {
            cat.name: names_by_id.get(cat.parent_id) for cat in stored
        }
        for name in names:
            parent_of.setdefault(name, None)
        for name, parent_row in declared_parents.items():
            parent_of[name] = parent_row.name

        # Names already known to lead up to a root
        rooted: set[str] = set()
        for name in declared_parents:
            path = [name]
            seen = {name}
            current = parent_of.get(name)
            while current is not None and current not in rooted:
                if current in seen:
                    raise CyclicHierarchyError(path + [current])
                seen.add(current)
                path.append(current)
                current = parent_of.get(current)
            rooted.update(path)
