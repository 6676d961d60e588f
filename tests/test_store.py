"""
Tests for the SQLAlchemy-backed entity store.
"""

import pytest

from core.errors import ContentConflictError, ContentNotFoundError
from models.content import Category, Tag


class TestQueries:
    """Lookups by field and primary key."""

    def test_find_one(self, store) -> None:
        with store.transaction():
            design = store.create(Category, name='Design', slug='design')

        assert store.find_one(Category, 'slug', 'design').id == design.id
        assert store.find_one(Category, 'slug', 'missing') is None

    def test_find_one_excluding_id(self, store) -> None:
        with store.transaction():
            design = store.create(Category, name='Design', slug='design')

        assert store.find_one(Category, 'slug', 'design', exclude_id=design.id) is None

    def test_get_or_raise(self, store) -> None:
        with pytest.raises(ContentNotFoundError) as exc_info:
            store.get_or_raise(Category, 404, 'Category')
        assert exc_info.value.status_code == 404
        assert exc_info.value.details == {'resource_type': 'Category', 'resource_id': 404}

    def test_get_many_skips_missing(self, store) -> None:
        with store.transaction():
            a = store.create(Tag, name='A', slug='a')
            b = store.create(Tag, name='B', slug='b')

        found = store.get_many(Tag, [a.id, b.id, 999])
        assert sorted(tag.slug for tag in found) == ['a', 'b']
        assert store.get_many(Tag, []) == []


class TestWrites:
    """Create, update and delete."""

    def test_create_assigns_id(self, store) -> None:
        with store.transaction():
            tag = store.create(Tag, name='Python', slug='python')
            assert tag.id is not None

    def test_create_many_keeps_order(self, store) -> None:
        with store.transaction():
            tags = store.create_many(Tag, [
                {'name': 'One', 'slug': 'one'},
                {'name': 'Two', 'slug': 'two'},
            ])
        assert [tag.slug for tag in tags] == ['one', 'two']
        assert store.create_many(Tag, []) == []

    def test_update(self, store) -> None:
        with store.transaction():
            tag = store.create(Tag, name='Pyhton', slug='pyhton')
            store.update(Tag, tag.id, name='Python', slug='python')

        assert store.get(Tag, tag.id).slug == 'python'

    def test_update_missing_record(self, store) -> None:
        with pytest.raises(ContentNotFoundError):
            with store.transaction():
                store.update(Tag, 12345, name='Nothing')

    def test_delete(self, store) -> None:
        with store.transaction():
            tag = store.create(Tag, name='Old', slug='old')
        tag_id = tag.id

        with store.transaction():
            store.delete(Tag, tag_id)
        assert store.get(Tag, tag_id) is None

    def test_delete_many_returns_count(self, store) -> None:
        with store.transaction():
            store.create_many(Category, [
                {'name': 'A', 'slug': 'a', 'description': 'x'},
                {'name': 'B', 'slug': 'b', 'description': 'x'},
                {'name': 'C', 'slug': 'c', 'description': 'y'},
            ])
            removed = store.delete_many(Category, 'description', 'x')

        assert removed == 2
        assert [c.slug for c in store.list(Category, Category.name.asc())] == ['c']


class TestTransactions:
    """All-or-nothing behavior of transaction()."""

    def test_rollback_on_error(self, store) -> None:
        with pytest.raises(RuntimeError):
            with store.transaction():
                store.create(Tag, name='Temp', slug='temp')
                raise RuntimeError('boom')

        assert store.find_one(Tag, 'slug', 'temp') is None

    def test_unique_violation_is_conflict(self, store) -> None:
        with store.transaction():
            store.create(Tag, name='Python', slug='python')

        with pytest.raises(ContentConflictError) as exc_info:
            with store.transaction():
                store.create(Tag, name='Other', slug='other')
                store.create(Tag, name='Python again', slug='python')

        assert exc_info.value.status_code == 409
        assert store.find_one(Tag, 'slug', 'other') is None

    def test_nested_blocks_commit_together(self, store) -> None:
        with pytest.raises(RuntimeError):
            with store.transaction():
                with store.transaction():
                    store.create(Tag, name='Inner', slug='inner')
                store.create(Tag, name='Outer', slug='outer')
                raise RuntimeError('boom')

        assert store.find_one(Tag, 'slug', 'inner') is None
        assert store.find_one(Tag, 'slug', 'outer') is None

    def test_depth_resets_after_failure(self, store) -> None:
        with pytest.raises(RuntimeError):
            with store.transaction():
                raise RuntimeError('boom')

        with store.transaction():
            store.create(Tag, name='After', slug='after')

        assert store.find_one(Tag, 'slug', 'after') is not None
