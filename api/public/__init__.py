"""
Public API module.

Endpoints reachable without signing in. Currently only lead capture from the
site's contact forms:

- POST /api/leads: Submit a contact form
"""

from api.public.routes import public_api

__all__ = ['public_api']
