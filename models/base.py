"""
Base model definitions for the content core.

This module provides the base model class and mixins shared by every table in
the data model layer.

Key components:
- TimestampMixin: Adds automatic timestamp tracking for all models
- PublishableMixin: Adds the published flag and publication date
- BaseModel: Abstract base class for every table

Persistence goes through core.store.ContentStore and serialization through the
API schemas; models carry columns and relationships only.
"""

from datetime import datetime, timezone
from typing import ClassVar, Optional

from extensions import db


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


class TimestampMixin:
    """
    Mixin class that adds created and updated timestamps to models.

    created_at is set once when the record is first inserted, updated_at is
    refreshed whenever the record is modified.

    Attributes:
        created_at: Datetime when the record was created
        updated_at: Datetime when the record was last updated
    """

    created_at = db.Column(
        db.DateTime(timezone=True),
        default=utcnow,
        nullable=False,
        index=True
    )

    updated_at = db.Column(
        db.DateTime(timezone=True),
        default=utcnow,
        onupdate=utcnow,
        nullable=False
    )


class PublishableMixin:
    """
    Mixin for content that moves between draft and published.

    published_at is stamped when an entry transitions to published and cleared
    when it is unpublished; see apply_publication.
    """

    published = db.Column(db.Boolean, default=False, nullable=False, index=True)
    published_at = db.Column(db.DateTime(timezone=True), nullable=True, index=True)

    def apply_publication(self, published: Optional[bool]) -> None:
        """Apply a requested published flag, keeping published_at consistent."""
        if published is None:
            return
        if published and not self.published:
            self.published_at = utcnow()
        elif not published:
            self.published_at = None
        self.published = published


class BaseModel(db.Model, TimestampMixin):
    """
    Abstract base model that provides common functionality for all models.

    Attributes:
        __abstract__: SQLAlchemy flag marking this as an abstract class
        __resource_name__: Human-readable name used in error messages
    """
    __abstract__ = True

    __resource_name__: ClassVar[str] = 'Resource'

    def __repr__(self) -> str:
        return f"<{self.__class__.__name__} {getattr(self, 'id', None)}>"
