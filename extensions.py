"""
Flask extensions initialization module for the content core.

This module initializes the extensions used throughout the application and
keeps them as module-level objects to avoid circular imports. Binding to an
application happens in init_extensions, called by the application factory.

Extensions included:
- Database ORM via Flask-SQLAlchemy
- The process-wide content store wrapping the database session
"""

import logging
from typing import Optional

from flask import Flask
from flask_sqlalchemy import SQLAlchemy

from core.store import ContentStore

# Initialize logger
logger = logging.getLogger(__name__)

# Database - Required for models
db = SQLAlchemy()
"""
SQLAlchemy ORM integration for Flask.

Examples:
    Define a model:
    ```
    class Tag(db.Model):
        id = db.Column(db.Integer, primary_key=True)
        slug = db.Column(db.String(120), unique=True)
    ```
"""

# Content store - created lazily on first use
_content_store: Optional[ContentStore] = None


def get_store() -> ContentStore:
    """
    Return the process-wide content store, creating it on first use.

    The store wraps the scoped database session, so a single instance is safe
    to share across requests; each request still works on its own session.
    """
    global _content_store
    if _content_store is None:
        _content_store = ContentStore(db.session)
        logger.debug("Content store initialized")
    return _content_store


def reset_store() -> None:
    """Tear down the process-wide content store."""
    global _content_store
    if _content_store is not None:
        _content_store.close()
    _content_store = None


def init_store(app: Flask) -> None:
    """
    Register the content store with an application.

    Any transaction left open by a failed request is rolled back when the
    application context tears down.
    """
    app.extensions['content_store'] = get_store()

    @app.teardown_appcontext
    def _rollback_unfinished(exc: Optional[BaseException]) -> None:
        if exc is not None and _content_store is not None:
            _content_store.rollback()


def init_extensions(app: Flask) -> None:
    """
    Initialize all Flask extensions with the application.

    Args:
        app: Flask application instance
    """
    db.init_app(app)
    init_store(app)
    logger.debug("Extensions initialized")


__all__ = [
    'db',
    'get_store',
    'reset_store',
    'init_store',
    'init_extensions',
]
