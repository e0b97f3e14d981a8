"""Spreadsheet export domain service."""

from io import BytesIO
from pathlib import Path
from typing import Union

from openpyxl import Workbook
from openpyxl.styles import Font
from openpyxl.utils import get_column_letter

from categorytree.database.base import Database
from categorytree.domain.errors import EmptyStoreError, SizeLimitExceededError
from categorytree.logger import get_logger

logger = get_logger()

# Default upper bound for spreadsheets read or written, in bytes
MAX_FILE_SIZE = 50_000_000

SHEET_TITLE = "Categories"
HEADERS = ("id", "name", "parent_id")

ExportRow = tuple[int, str, Union[int, str]]


class SpreadsheetExporter:
    """Service for exporting categories to a spreadsheet."""

    def __init__(self, db: Database, max_file_size: int = MAX_FILE_SIZE):
        """Initialize spreadsheet exporter.

        Args:
            db: Database instance
            max_file_size: Largest workbook, in bytes, that may be written out
        """
        self.db = db
        self.max_file_size = max_file_size

    def export_rows(self) -> list[ExportRow]:
        """Flatten every stored category into an (id, name, parent_id) row.

        All categories are exported, including any that are not reachable from
        a root. Rows are ordered by id. A root gets "" as its parent_id.

        Raises:
            EmptyStoreError: If the store holds no categories
        """
        categories = self.db.find_all()
        if not categories:
            raise EmptyStoreError()

        return [
            (cat.id, cat.name, cat.parent_id if cat.parent_id is not None else "")
            for cat in categories
        ]

    def export_workbook(self) -> bytes:
        """Build an .xlsx workbook holding the exported rows.

        Returns:
            Workbook contents

        Raises:
            EmptyStoreError: If the store holds no categories
        """
        return self._build_workbook(self.export_rows())

    def _build_workbook(self, rows: list[ExportRow]) -> bytes:
        workbook = Workbook()
        sheet = workbook.active
        sheet.title = SHEET_TITLE

        sheet.append(HEADERS)
        for cell in sheet[1]:
            cell.font = Font(bold=True)
        for row in rows:
            sheet.append(row)

        # openpyxl has no autosize; fit each column to its longest value
        for index, header in enumerate(HEADERS, start=1):
            width = max(len(str(value)) for value in [header, *(row[index - 1] for row in rows)])
            sheet.column_dimensions[get_column_letter(index)].width = width + 2

        output = BytesIO()
        workbook.save(output)
        logger.info(f"Exported {len(rows)} categories to workbook")
        return output.getvalue()

    def export_file(self, path: Union[str, Path]) -> int:
        """Write the workbook to a file.

        Args:
            path: Destination path

        Returns:
            Number of categories exported

        Raises:
            EmptyStoreError: If the store holds no categories
            SizeLimitExceededError: If the workbook is larger than the limit
        """
        rows = self.export_rows()
        payload = self._build_workbook(rows)
        if len(payload) > self.max_file_size:
            raise SizeLimitExceededError(len(payload), self.max_file_size)

        Path(path).write_bytes(payload)
        return len(rows)
