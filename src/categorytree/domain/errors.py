"""Shared domain error messages and error types."""

from typing import Optional


class DomainError(ValueError):
    """Base class for domain-level errors.

    Subclasses provide semantic categories while preserving ValueError
    compatibility for existing error handling.
    """


class ValidationError(DomainError):
    """Invalid input or failed validation in domain logic."""


class NotFoundError(DomainError):
    """Requested domain entity does not exist."""


class ConflictError(DomainError):
    """Domain conflict, such as uniqueness violations."""


class DuplicateNameError(ConflictError):
    """A category with the given name already exists somewhere in the forest."""

    def __init__(self, name: str, message: Optional[str] = None):
        self.name = name
        super().__init__(message or category_exists(name))


class CategoryNotFoundError(NotFoundError):
    """No category with the given name exists."""

    def __init__(self, name: str, message: Optional[str] = None):
        self.name = name
        super().__init__(message or category_not_found(name))


class ParentNotFoundError(CategoryNotFoundError):
    """The parent named for a new child category does not exist."""

    def __init__(self, name: str):
        super().__init__(name, parent_not_found(name))


class EmptyTreeError(DomainError):
    """The forest has no root categories to render."""

    def __init__(self):
        super().__init__("Category tree is empty")


class EmptyStoreError(DomainError):
    """The store holds no categories to export."""

    def __init__(self):
        super().__init__("There are no categories to export")


class InvalidRowFormatError(ValidationError):
    """A spreadsheet row could not be turned into a category record."""

    def __init__(self, row_number: int, reason: str):
        self.row_number = row_number
        self.reason = reason
        super().__init__(f"Row {row_number}: {reason}")


class InvalidSpreadsheetError(ValidationError):
    """The payload is not a readable spreadsheet."""


class CyclicHierarchyError(ValidationError):
    """Applying the imported parent links would create a cycle."""

    def __init__(self, names: list[str]):
        self.names = names
        super().__init__(
            "Import would create a cycle between categories: " + " > ".join(names)
        )


class SizeLimitExceededError(DomainError):
    """A spreadsheet is larger than the configured limit."""

    def __init__(self, size: int, limit: int):
        self.size = size
        self.limit = limit
        super().__init__(f"File is too large ({size} bytes, limit is {limit} bytes)")


class TransferError(DomainError):
    """Reading or delivering a file failed outside the domain logic."""


def category_not_found(name: str) -> str:
    """Return message for missing category by name."""
    return f"Category '{name}' not found"


def parent_not_found(name: str) -> str:
    """Return message for a missing parent category."""
    return f"Parent category '{name}' not found"


def category_exists(name: str) -> str:
    """Return message for a name that is already taken."""
    return f"Category '{name}' already exists"


def empty_category_name() -> str:
    """Return message for a blank category name."""
    return "Category name must not be empty"
