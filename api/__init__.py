"""
API package for the content core.

This package provides the JSON endpoints of the marketing site: the admin
content API and the public lead capture endpoint. All responses are JSON,
errors included (see api.errors).

Key API areas:
- Admin: Content CRUD, tags, encrypted settings and lead triage
- Public: Contact form submissions
"""

import logging

from flask import Blueprint, Flask

# Create main API blueprint
api_bp = Blueprint('api', __name__, url_prefix='/api')

logger = logging.getLogger(__name__)


@api_bp.after_request
def after_request(response):
    """Add security and cache headers to every API response."""
    response.headers['X-Content-Type-Options'] = 'nosniff'
    response.headers['X-Frame-Options'] = 'DENY'

    # Admin data must never be cached by intermediaries
    response.headers['Cache-Control'] = 'no-store, no-cache, must-revalidate, max-age=0'
    response.headers['Pragma'] = 'no-cache'

    return response


# Import and register API modules
from api.admin import admin_api  # noqa: E402
from api.public import public_api  # noqa: E402

api_bp.register_blueprint(admin_api)
api_bp.register_blueprint(public_api)


def init_app(app: Flask) -> None:
    """
    Initialize the API module within the Flask application.

    Args:
        app: The Flask application instance
    """
    app.register_blueprint(api_bp)
    logger.info("API module initialized successfully")
