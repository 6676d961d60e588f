"""
Core utility functions for the content core.

Key modules:
- string: Slugification and text validation helpers
"""

from .string import (
    slugify,
    is_valid_slug,
    is_valid_email,
    SLUG_PATTERN,
    EMAIL_PATTERN,
)

__all__ = [
    'slugify',
    'is_valid_slug',
    'is_valid_email',
    'SLUG_PATTERN',
    'EMAIL_PATTERN',
]
