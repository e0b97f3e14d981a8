"""Abstract database interface."""

from abc import ABC, abstractmethod
from contextlib import AbstractContextManager
from typing import Optional, Iterable

# Import entities directly to avoid circular import through domain/__init__.py
from categorytree.domain.entities import Category


class Database(ABC):
    """Abstract database interface for categorytree.

    This is the repository the domain services are written against. Any
    persistence engine may implement it.
    """

    @abstractmethod
    def connect(self) -> None:
        """Connect to the database."""
        pass

    @abstractmethod
    def disconnect(self) -> None:
        """Disconnect from the database."""
        pass

    @abstractmethod
    def initialize_schema(self) -> None:
        """Initialize database schema (create tables)."""
        pass

    @abstractmethod
    def transaction(self) -> AbstractContextManager[None]:
        """Group the writes made inside the block into one atomic unit.

        Either every write inside the block becomes visible when the block
        exits normally, or none does if it exits with an exception.
        Transactions may be nested; only the outermost one commits.
        """
        pass

    # Write operations
    @abstractmethod
    def save(self, category: Category) -> Category:
        """Insert a category (id is None) or update its name and parent.

        Returns the stored category with its id assigned.
        """
        pass

    @abstractmethod
    def save_all(self, categories: Iterable[Category]) -> list[Category]:
        """Save several categories, preserving input order in the result."""
        pass

    @abstractmethod
    def delete(self, category: Category) -> int:
        """Delete a category and all its descendants. Returns number deleted."""
        pass

    # Read operations
    @abstractmethod
    def get_category(self, category_id: int) -> Optional[Category]:
        """Get category by ID."""
        pass

    @abstractmethod
    def find_by_name(self, name: str) -> Optional[Category]:
        """Get category by its (globally unique) name."""
        pass

    @abstractmethod
    def exists_by_name(self, name: str) -> bool:
        """Check whether a category with this name exists."""
        pass

    @abstractmethod
    def find_all_by_parent_is_null(self) -> list[Category]:
        """List root categories."""
        pass

    @abstractmethod
    def find_children(self, parent_id: int) -> list[Category]:
        """List immediate children of a category."""
        pass

    @abstractmethod
    def find_by_name_in(self, names: Iterable[str]) -> list[Category]:
        """List categories whose names are in the given collection."""
        pass

    @abstractmethod
    def find_all(self) -> list[Category]:
        """List all categories, ordered by ID."""
        pass
