"""
Administrative API module for the content core.

Provides RESTful endpoints under /api/admin for managing blog posts, authors,
categories, industries, case studies and site services, plus tags, site
settings and leads. Every endpoint requires a signed-in user; writes require
the ADMIN role (see api.admin.decorators).
"""

from api.admin.routes import admin_api

__all__ = ['admin_api']
