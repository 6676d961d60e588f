"""
Configuration constants for the content core.

Environment names and default values shared by the configuration classes.
"""

from typing import Any, Dict, List

# Environment constants
ENVIRONMENT_DEVELOPMENT = 'development'
ENVIRONMENT_TESTING = 'testing'
ENVIRONMENT_PRODUCTION = 'production'

ALLOWED_ENVIRONMENTS: List[str] = [
    ENVIRONMENT_DEVELOPMENT,
    ENVIRONMENT_TESTING,
    ENVIRONMENT_PRODUCTION,
]

# SECRET_KEY values that must never reach production
INSECURE_SECRET_KEYS = ('dev', 'development', 'secret', 'changeme', 'dev-secret-key')

# Default configuration values
DEFAULT_ENV_VALUES: Dict[str, Any] = {
    'ENVIRONMENT': ENVIRONMENT_DEVELOPMENT,
    'DEBUG': False,
    'TESTING': False,

    # Database configuration
    'SQLALCHEMY_TRACK_MODIFICATIONS': False,

    # Session cookie settings (the auth provider writes the session)
    'SESSION_COOKIE_HTTPONLY': True,
    'SESSION_COOKIE_SAMESITE': 'Lax',

    # Content settings
    'SLUG_MAX_ATTEMPTS': 100,
    'LEADS_PAGE_SIZE_MAX': 100,

    # Logging and error reporting
    'LOG_LEVEL': 'INFO',
    'LOG_TO_FILE': False,
    'LOG_DIR': 'logs',
    'SENTRY_DSN': None,
    'SENTRY_TRACES_SAMPLE_RATE': 0.1,

    'VERSION': '1.0.0',
}
