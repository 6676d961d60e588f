"""
Test fixtures for the content core.

This module provides the pytest fixtures shared by the test suite:

- Application configured for testing with a fresh in-memory database
- The content store bound to that database
- Test clients: anonymous, signed-in editor and signed-in admin
- Small factories for commonly needed records

Every test gets its own application and database, so tests never observe
each other's data.
"""

from typing import Any

import pytest
from flask import Flask
from flask.testing import FlaskClient

from core.factory import create_app
from core.store import ContentStore
from extensions import db, get_store, reset_store
from services import AuthorService, BlogPostService, CategoryService, IndustryService


# Application Fixtures
@pytest.fixture
def app() -> Flask:
    """
    Create an application instance configured for testing.

    The application context stays pushed for the duration of the test so
    services can be called directly and requests made through the test
    client share the same database session.

    Example:
        def test_app_config(app):
            assert app.config['TESTING'] is True
    """
    test_app = create_app('testing')

    with test_app.app_context():
        db.create_all()
        yield test_app
        reset_store()
        db.drop_all()


@pytest.fixture
def store(app) -> ContentStore:
    """Content store bound to the test database."""
    return get_store()


@pytest.fixture
def client(app) -> FlaskClient:
    """Anonymous test client."""
    return app.test_client()


def _client_with_role(app: Flask, user_id: int, role: str) -> FlaskClient:
    test_client = app.test_client()
    with test_client.session_transaction() as sess:
        sess['user_id'] = user_id
        sess['user_role'] = role
    return test_client


@pytest.fixture
def admin_client(app) -> FlaskClient:
    """
    Test client signed in as an admin.

    Example:
        def test_list_authors(admin_client):
            response = admin_client.get('/api/admin/authors')
            assert response.status_code == 200
    """
    return _client_with_role(app, 1, 'ADMIN')


@pytest.fixture
def editor_client(app) -> FlaskClient:
    """Test client signed in without the admin role."""
    return _client_with_role(app, 2, 'EDITOR')


@pytest.fixture
def runner(app) -> Any:
    """CLI runner for the application's commands."""
    return app.test_cli_runner()


# Record Fixtures
@pytest.fixture
def author(app):
    """A saved author."""
    return AuthorService().create({'name': 'Grace Hopper', 'bio': 'Compiler pioneer'})


@pytest.fixture
def categories(app):
    """Three saved categories: Engineering, Design, Marketing."""
    service = CategoryService()
    return [service.create({'name': name}) for name in ('Engineering', 'Design', 'Marketing')]


@pytest.fixture
def industry(app):
    """A saved industry."""
    return IndustryService().create({'name': 'Healthcare'})


@pytest.fixture
def post(app, author):
    """A saved, unpublished blog post without associations."""
    return BlogPostService().create({
        'title': 'Hello World',
        'description': 'First post',
        'content': 'Body',
        'author_id': author.id,
    })
