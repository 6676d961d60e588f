"""
Data models package for the content core.

This package defines the data model layer using SQLAlchemy ORM:

- A base model with timestamp tracking and a publication mixin
- Content models (blog posts, authors, categories, tags, gallery images,
  industries, case studies, services)
- Site settings, some stored encrypted
- Leads captured from public contact forms

Models hold columns and relationships only. Reads and writes go through
core.store.ContentStore so that every change happens inside a store
transaction.
"""

import logging

from extensions import db

# Set up package logger
logger = logging.getLogger(__name__)

# Import base classes first to avoid circular imports
from .base import BaseModel, TimestampMixin, PublishableMixin

# Content models
from .content import (
    Author,
    BlogPost,
    CaseStudy,
    Category,
    GalleryImage,
    Industry,
    Service,
    Tag,
)

# Site models
from .setting import Setting
from .lead import Lead

__all__ = [
    'db',
    'BaseModel',
    'TimestampMixin',
    'PublishableMixin',
    'Author',
    'BlogPost',
    'CaseStudy',
    'Category',
    'GalleryImage',
    'Industry',
    'Service',
    'Tag',
    'Setting',
    'Lead',
]
