"""Database layer for categorytree application."""

from categorytree.database.base import Database
from categorytree.database.factories import create_sqlite_database

__all__ = ["Database", "create_sqlite_database"]
