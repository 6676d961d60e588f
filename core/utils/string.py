"""
String utility functions for the marketing site content core.

This module provides reusable string handling shared by the content services:
- Slugification for URL-friendly identifiers
- Slug format validation for explicitly requested slugs
- Email format validation for lead capture

Slugification is purely textual. Uniqueness of a slug within a collection is
the responsibility of core.slugs.
"""

import re
import unicodedata
from typing import Optional

# Slug generation defaults
DEFAULT_SLUG_SEPARATOR = "-"

# Centralized patterns
SLUG_PATTERN = r'^[a-z0-9]+(?:-[a-z0-9]+)*$'
EMAIL_PATTERN = r'^[^\s@]+@[^\s@]+\.[^\s@]+$'

# Compiled regexes
SLUG_REGEX = re.compile(SLUG_PATTERN)
EMAIL_REGEX = re.compile(EMAIL_PATTERN)

_WHITESPACE_RUN = re.compile(r'\s+')
_NON_SLUG_CHARS = re.compile(r'[^a-z0-9_-]+')
_SEPARATOR_RUN = re.compile(r'[_-]+')


def slugify(text: Optional[str], separator: str = DEFAULT_SLUG_SEPARATOR) -> str:
    """
    Convert text to a URL-friendly slug.

    The text is lowercased and trimmed, diacritics are folded to their ASCII
    base letters, whitespace runs become a single separator, anything outside
    ``[a-z0-9_-]`` is dropped, separator runs (including underscores) collapse
    to one separator and leading/trailing separators are removed.

    Accented letters keep their base letter instead of being dropped
    ("Café" -> "cafe") and underscores are treated as separators
    ("snake_case" -> "snake-case"), so slugs only ever hold ``[a-z0-9-]``
    and always pass is_valid_slug.

    Example: "My Awesome Post!" -> "my-awesome-post"

    Args:
        text: String to convert to slug
        separator: Character to use between words (default: '-')

    Returns:
        URL-friendly slug string, empty when text is empty or None
    """
    if not text:
        return ""

    text = str(text).lower().strip()

    # Fold accented characters to ASCII, drop combining marks
    text = unicodedata.normalize('NFKD', text)
    text = ''.join(c for c in text if not unicodedata.combining(c)).lower()

    text = _WHITESPACE_RUN.sub(separator, text)
    text = _NON_SLUG_CHARS.sub('', text)
    text = _SEPARATOR_RUN.sub(separator, text)

    return text.strip(separator)


def is_valid_slug(value: Optional[str]) -> bool:
    """
    Check whether a value is already a well-formed slug.

    Args:
        value: Candidate slug

    Returns:
        True if value is non-empty, lowercase and hyphen-separated
    """
    if not value:
        return False
    return bool(SLUG_REGEX.match(value))


def is_valid_email(value: Optional[str]) -> bool:
    """Return True if value looks like an email address."""
    if not value:
        return False
    return bool(EMAIL_REGEX.match(value))
