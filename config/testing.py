"""
Testing environment configuration for the content core.

Optimized for automated testing with an in-memory database, a fixed
encryption key and minimal logging.
"""

import os

from .base import Config
from .config_constants import ENVIRONMENT_TESTING


class TestingConfig(Config):
    """
    Configuration for testing environment.
    """

    DEBUG = False
    TESTING = True
    ENVIRONMENT = ENVIRONMENT_TESTING

    SECRET_KEY = 'testing-secret-key'

    # Test database (in-memory SQLite by default)
    SQLALCHEMY_DATABASE_URI = os.environ.get('TEST_DATABASE_URL', 'sqlite:///:memory:')

    # Fixed 32-byte key so encrypted fixtures are reproducible
    SETTINGS_ENCRYPTION_KEY = '0123456789abcdef0123456789abcdef'

    # Skip interference with server responses
    PRESERVE_CONTEXT_ON_EXCEPTION = False
    TRAP_HTTP_EXCEPTIONS = False

    # Testing-specific logging - minimize noise but capture errors
    LOG_LEVEL = 'ERROR'
    LOG_TO_FILE = False

    @classmethod
    def init_app(cls, app):
        """
        Initialize application with testing configuration.

        Environment overrides are skipped so a developer's shell cannot leak
        into the test run.

        Args:
            app: Flask application instance
        """
        for key, value in cls.ENV_DEFAULTS.items():
            app.config.setdefault(key, value)

        cls._validate_configuration(app)

        app.config['TESTING'] = True
        app.logger.setLevel(app.config['LOG_LEVEL'])
