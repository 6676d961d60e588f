"""
Services package for the content core.

This package holds the business logic behind the admin and public APIs,
independent of the HTTP layer so the CLI and tests can call it directly:

- content_service: slugged CRUD for authors, categories, industries,
  case studies and site services
- blog_service: blog posts with their association sets
- sync_service: replace-set synchronization of post associations
- settings_service: site settings with encryption of sensitive keys
- lead_service: lead capture and triage
"""

from .content_service import (
    SluggedContentService,
    AuthorService,
    CategoryService,
    IndustryService,
    CaseStudyService,
    OfferingService,
)
from .blog_service import BlogPostService
from .sync_service import sync_associations
from .settings_service import SettingsService, SENSITIVE_KEYS, DECRYPTION_FAILED
from .lead_service import LeadService

__all__ = [
    'SluggedContentService',
    'AuthorService',
    'CategoryService',
    'IndustryService',
    'CaseStudyService',
    'OfferingService',
    'BlogPostService',
    'sync_associations',
    'SettingsService',
    'SENSITIVE_KEYS',
    'DECRYPTION_FAILED',
    'LeadService',
]
