"""Shared pytest fixtures for categorytree tests."""

import tempfile
import os
from io import BytesIO
import pytest
from openpyxl import Workbook

from categorytree.database.factories import create_sqlite_database
from categorytree.domain.category import CategoryService
from categorytree.domain.tree import TreeRenderer
from categorytree.domain.spreadsheet_export import SpreadsheetExporter
from categorytree.domain.spreadsheet_import import SpreadsheetImporter


@pytest.fixture
def temp_db():
    """Create a temporary database for testing."""
    # Create a temporary file for the database
    fd, db_path = tempfile.mkstemp(suffix=".db")
    os.close(fd)

    # Create database
    db = create_sqlite_database(database_path=db_path)
    # Store the path for tests that need it
    db.database_path = db_path
    db.connect()
    db.initialize_schema()

    yield db

    # Cleanup
    db.disconnect()
    if os.path.exists(db_path):
        os.unlink(db_path)


@pytest.fixture
def category_service(temp_db):
    """Create a CategoryService with a temporary database."""
    return CategoryService(temp_db)


@pytest.fixture
def tree_renderer(temp_db):
    """Create a TreeRenderer with a temporary database."""
    return TreeRenderer(temp_db)


@pytest.fixture
def exporter(temp_db):
    """Create a SpreadsheetExporter with a temporary database."""
    return SpreadsheetExporter(temp_db)


@pytest.fixture
def importer(temp_db):
    """Create a SpreadsheetImporter with a temporary database."""
    return SpreadsheetImporter(temp_db)


@pytest.fixture
def sample_tree(category_service):
    """Build a small forest and return the categories by name.

    Food
      Groceries
        Fruit
      Restaurants
    Transport
    """
    categories = {}
    categories["Food"] = category_service.add_root("Food")
    categories["Groceries"] = category_service.add_child("Food", "Groceries")
    categories["Fruit"] = category_service.add_child("Groceries", "Fruit")
    categories["Restaurants"] = category_service.add_child("Food", "Restaurants")
    categories["Transport"] = category_service.add_root("Transport")
    return categories


@pytest.fixture
def make_workbook():
    """Return a function building .xlsx bytes from data rows.

    The header row (id, name, parent_id) is added unless one is given.
    """

    def _make(rows, header=("id", "name", "parent_id")):
        workbook = Workbook()
        sheet = workbook.active
        if header is not None:
            sheet.append(list(header))
        for row in rows:
            sheet.append(list(row))
        output = BytesIO()
        workbook.save(output)
        return output.getvalue()

    return _make


@pytest.fixture
def cli_runner():
    """Create a Click CLI test runner."""
    from click.testing import CliRunner

    return CliRunner()


@pytest.fixture
def parent_names(temp_db):
    """Return a function mapping every category name to its parent's name."""

    def _parent_names():
        categories = temp_db.find_all()
        names_by_id = {cat.id: cat.name for cat in categories}
        return {cat.name: names_by_id.get(cat.parent_id) for cat in categories}

    return _parent_names
