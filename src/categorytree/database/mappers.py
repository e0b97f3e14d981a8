"""Mapper functions to convert between domain models and SQLAlchemy models.

This layer isolates the conversion logic, so ORM objects never leak out of
the database package.
"""

from categorytree.domain import entities as domain
from categorytree.database.models import Category as ORMCategory


def category_to_domain(orm_category: ORMCategory) -> domain.Category:
    """Convert SQLAlchemy Category model to domain Category entity."""
    return domain.Category(
        id=orm_category.id,
        name=orm_category.name,
        parent_id=orm_category.parent_id,
        created_at=orm_category.created_at,
    )


def category_to_orm(category: domain.Category) -> ORMCategory:
    """Build a new SQLAlchemy Category row from a domain Category entity."""
    return ORMCategory(name=category.name, parent_id=category.parent_id)
