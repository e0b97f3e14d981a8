"""Category domain service."""

from typing import Optional
from categorytree.database.base import Database
from categorytree.domain.entities import Category
from categorytree.domain.errors import (
    ValidationError,
    DuplicateNameError,
    CategoryNotFoundError,
    ParentNotFoundError,
    empty_category_name,
)
from categorytree.logger import get_logger

logger = get_logger()


def normalize_name(name: Optional[str]) -> str:
    """Strip a category name and reject blank ones.

    Raises:
        ValidationError: If the name is None or blank
    """
    name = (name or "").strip()
    if not name:
        raise ValidationError(empty_category_name())
    return name


class CategoryService:
    """Service for managing the category forest.

    Names are unique across the whole forest, not just among siblings, so a
    name alone identifies a category.
    """

    def __init__(self, db: Database):
        """Initialize category service.

        Args:
            db: Database instance
        """
        self.db = db

    def add_root(self, name: str) -> Category:
        """Create a root category.

        Args:
            name: Category name

        Returns:
            The created category

        Raises:
            ValidationError: If the name is blank
            DuplicateNameError: If any category already has this name
        """
        name = normalize_name(name)
        if self.db.exists_by_name(name):
            raise DuplicateNameError(name)

        category = self.db.save(Category(id=None, name=name))
        logger.info(f"Created root category '{name}' (ID: {category.id})")
        return category

    def add_child(self, parent_name: str, child_name: str) -> Category:
        """Create a category under an existing parent.

        Args:
            parent_name: Name of the parent category
            child_name: Name of the new category

        Returns:
            The created category

        Raises:
            ValidationError: If either name is blank
            ParentNotFoundError: If the parent doesn't exist
            DuplicateNameError: If the child name is already taken anywhere
        """
        parent_name = normalize_name(parent_name)
        child_name = normalize_name(child_name)

        parent = self.db.find_by_name(parent_name)
        if parent is None:
            raise ParentNotFoundError(parent_name)
        if self.db.exists_by_name(child_name):
            raise DuplicateNameError(child_name)

        category = self.db.save(Category(id=None, name=child_name, parent_id=parent.id))
        logger.info(
            f"Created category '{child_name}' under '{parent_name}' (ID: {category.id})"
        )
        return category

    def remove(self, name: str) -> int:
        """Remove a category together with all of its descendants.

        Args:
            name: Category name

        Returns:
            Number of categories removed

        Raises:
            CategoryNotFoundError: If the category doesn't exist
        """
        category = self.db.find_by_name((name or "").strip())
        if category is None:
            raise CategoryNotFoundError(name)

        with self.db.transaction():
            removed = self.db.delete(category)
        logger.info(f"Removed category '{category.name}' ({removed} categories in total)")
        return removed

    def find_by_name(self, name: str) -> Optional[Category]:
        """Get category by name, or None if not found."""
        return self.db.find_by_name(name)

    def exists_by_name(self, name: str) -> bool:
        """Check whether a category with this name exists."""
        return self.db.exists_by_name(name)

    def list_roots(self) -> list[Category]:
        """List root categories in store order."""
        return self.db.find_all_by_parent_is_null()

    def list_all(self) -> list[Category]:
        """List every category in store order."""
        return self.db.find_all()

    def list_children(self, name: str) -> list[Category]:
        """List the immediate children of a category.

        Raises:
            CategoryNotFoundError: If the category doesn't exist
        """
        category = self.db.find_by_name(name)
        if category is None:
            raise CategoryNotFoundError(name)
        return self.db.find_children(category.id)

    def get_path(self, name: str) -> str:
        """Get full path for a category.

        Args:
            name: Category name

        Returns:
            Full category path (e.g., "Food > Groceries")

        Raises:
            CategoryNotFoundError: If the category doesn't exist
        """
        cat = self.db.find_by_name(name)
        if cat is None:
            raise CategoryNotFoundError(name)

        path_parts = [cat.name]
        seen = {cat.id}
        current_parent_id = cat.parent_id

        while current_parent_id is not None and current_parent_id not in seen:
            parent = self.db.get_category(current_parent_id)
            if parent is None:
                break
            path_parts.append(parent.name)
            seen.add(parent.id)
            current_parent_id = parent.parent_id

        return " > ".join(reversed(path_parts))
