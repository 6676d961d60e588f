"""
Content models package.

This package contains the models managed through the admin content API:
- Blog posts with categories, tags and an owned image gallery
- Authors credited on posts
- Industries and the case studies filed under them
- Services offered on the marketing site

Every model here carries a ``slug`` that is unique within its own table and
resolved through core.slugs.
"""

from .author import Author
from .category import Category
from .tag import Tag
from .post import BlogPost, post_categories, post_tags
from .gallery_image import GalleryImage
from .industry import Industry
from .case_study import CaseStudy
from .service import Service

# Define exports explicitly to control the public API
__all__ = [
    # Blog models
    "Author",
    "BlogPost",
    "Category",
    "GalleryImage",
    "Tag",
    "post_categories",
    "post_tags",

    # Marketing models
    "CaseStudy",
    "Industry",
    "Service",
]
