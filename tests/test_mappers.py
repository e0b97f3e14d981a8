"""Tests for database mappers."""

from datetime import datetime, UTC

from categorytree.database.models import Category as ORMCategory
from categorytree.database.mappers import category_to_domain, category_to_orm
from categorytree.domain.entities import Category


class TestCategoryMapper:
    """Tests for Category mapper."""

    def test_category_to_domain(self):
        """Test converting ORM Category to domain Category."""
        orm_category = ORMCategory(
            id=1,
            name="Food",
            parent_id=None,
            created_at=datetime.now(UTC),
        )
        domain_category = category_to_domain(orm_category)

        assert isinstance(domain_category, Category)
        assert domain_category.id == 1
        assert domain_category.name == "Food"
        assert domain_category.parent_id is None
        assert domain_category.created_at == orm_category.created_at

    def test_category_with_parent_to_domain(self):
        """Test converting ORM Category with parent to domain Category."""
        orm_category = ORMCategory(
            id=2,
            name="Groceries",
            parent_id=1,
            created_at=datetime.now(UTC),
        )
        domain_category = category_to_domain(orm_category)

        assert domain_category.parent_id == 1
        assert not domain_category.is_root

    def test_category_to_orm(self):
        """Test building a new ORM row from a domain Category."""
        orm_category = category_to_orm(Category(id=None, name="Fruit", parent_id=2))

        assert isinstance(orm_category, ORMCategory)
        assert orm_category.id is None
        assert orm_category.name == "Fruit"
        assert orm_category.parent_id == 2
