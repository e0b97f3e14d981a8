"""Tests for Database interface returning domain models."""

import pytest
from datetime import datetime

from categorytree.domain import entities
from categorytree.domain.entities import Category
from categorytree.domain.errors import DuplicateNameError, CategoryNotFoundError


class TestDatabaseInterface:
    """Tests to verify Database interface returns domain models."""

    def test_save_returns_domain_model(self, temp_db):
        """Test that save assigns an id and returns a domain Category."""
        category = temp_db.save(Category(id=None, name="Food"))

        assert isinstance(category, entities.Category)
        assert isinstance(category.id, int)
        assert category.name == "Food"
        assert category.parent_id is None
        assert isinstance(category.created_at, datetime)

    def test_save_updates_existing(self, temp_db):
        """Test that saving a category with an id updates it."""
        food = temp_db.save(Category(id=None, name="Food"))
        fruit = temp_db.save(Category(id=None, name="Fruit"))

        updated = temp_db.save(Category(id=fruit.id, name="Fruit", parent_id=food.id))

        assert updated.id == fruit.id
        assert temp_db.get_category(fruit.id).parent_id == food.id

    def test_save_unknown_id(self, temp_db):
        """Test that updating a missing category fails."""
        with pytest.raises(CategoryNotFoundError):
            temp_db.save(Category(id=999, name="Ghost"))

    def test_save_duplicate_name(self, temp_db):
        """Test that the unique constraint surfaces as DuplicateNameError."""
        temp_db.save(Category(id=None, name="Food"))

        with pytest.raises(DuplicateNameError):
            temp_db.save(Category(id=None, name="Food"))

        assert [c.name for c in temp_db.find_all()] == ["Food"]

    def test_find_by_name(self, temp_db):
        """Test lookups by name."""
        saved = temp_db.save(Category(id=None, name="Food"))

        assert temp_db.find_by_name("Food") == saved
        assert temp_db.find_by_name("Nope") is None
        assert temp_db.exists_by_name("Food")
        assert not temp_db.exists_by_name("Nope")

    def test_find_by_name_in(self, temp_db):
        """Test bulk lookup by names."""
        for name in ("A", "B", "C"):
            temp_db.save(Category(id=None, name=name))

        found = temp_db.find_by_name_in(["C", "A", "Z", "A"])

        assert [c.name for c in found] == ["A", "C"]
        assert temp_db.find_by_name_in([]) == []

    def test_roots_and_children(self, temp_db):
        """Test root and child listings."""
        a = temp_db.save(Category(id=None, name="A"))
        temp_db.save(Category(id=None, name="A1", parent_id=a.id))
        temp_db.save(Category(id=None, name="A2", parent_id=a.id))
        temp_db.save(Category(id=None, name="B"))

        assert [c.name for c in temp_db.find_all_by_parent_is_null()] == ["A", "B"]
        assert [c.name for c in temp_db.find_children(a.id)] == ["A1", "A2"]
        assert [c.name for c in temp_db.find_all()] == ["A", "A1", "A2", "B"]

    def test_delete_cascades(self, temp_db):
        """Test that delete removes the whole subtree."""
        a = temp_db.save(Category(id=None, name="A"))
        a1 = temp_db.save(Category(id=None, name="A1", parent_id=a.id))
        temp_db.save(Category(id=None, name="A1x", parent_id=a1.id))
        temp_db.save(Category(id=None, name="B"))

        deleted = temp_db.delete(a)

        assert deleted == 3
        assert [c.name for c in temp_db.find_all()] == ["B"]

    def test_delete_missing(self, temp_db):
        """Test deleting a category that doesn't exist."""
        with pytest.raises(CategoryNotFoundError):
            temp_db.delete(Category(id=999, name="Ghost"))


class TestTransaction:
    """Tests for the transaction() unit of work."""

    def test_commit(self, temp_db):
        """Test that writes inside the block are kept."""
        with temp_db.transaction():
            temp_db.save(Category(id=None, name="A"))
            temp_db.save(Category(id=None, name="B"))

        assert [c.name for c in temp_db.find_all()] == ["A", "B"]

    def test_rollback(self, temp_db):
        """Test that an exception discards every write in the block."""
        temp_db.save(Category(id=None, name="Before"))

        with pytest.raises(RuntimeError):
            with temp_db.transaction():
                temp_db.save(Category(id=None, name="A"))
                temp_db.save(Category(id=None, name="B"))
                raise RuntimeError("abort")

        assert [c.name for c in temp_db.find_all()] == ["Before"]

    def test_nested_rollback(self, temp_db):
        """Test that an inner failure rolls back the outer block too."""
        with pytest.raises(DuplicateNameError):
            with temp_db.transaction():
                temp_db.save(Category(id=None, name="A"))
                temp_db.save_all([Category(id=None, name="B"), Category(id=None, name="B")])

        assert temp_db.find_all() == []

    def test_visible_to_other_connections_after_commit(self, temp_db):
        """Test that committed data is visible to a second database object."""
        from categorytree.database.factories import create_sqlite_database

        with temp_db.transaction():
            temp_db.save(Category(id=None, name="A"))

        other = create_sqlite_database(temp_db.database_path)
        try:
            assert other.exists_by_name("A")
        finally:
            other.disconnect()
