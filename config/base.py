"""
Base configuration class for the content core.
"""

import logging
import os
import secrets
from typing import Any, Dict, List

from .config_constants import DEFAULT_ENV_VALUES

# Set up module logger
logger = logging.getLogger(__name__)


class Config:
    """
    Configuration management class for the application.

    Class attributes are loaded with ``app.config.from_object``; init_app then
    fills in ENV_DEFAULTS for anything a subclass did not set and applies
    environment variables, which take precedence over everything else.

    Class Attributes:
        REQUIRED_VARS (List[str]): Variables that must be set in production
        ENV_DEFAULTS (Dict[str, Any]): Default values for environment settings
        ENV_PASSTHROUGH (List[str]): Variables copied verbatim from the
            process environment
    """

    REQUIRED_VARS: List[str] = [
        'SECRET_KEY',
        'DATABASE_URL',
    ]

    ENV_DEFAULTS: Dict[str, Any] = dict(DEFAULT_ENV_VALUES)

    ENV_PASSTHROUGH: List[str] = [
        'SECRET_KEY',
        'SETTINGS_ENCRYPTION_KEY',
        'SENTRY_DSN',
        'LOG_LEVEL',
        'LOG_DIR',
    ]

    ENVIRONMENT = 'development'

    # Application settings
    SECRET_KEY = os.environ.get('SECRET_KEY') or secrets.token_hex(32)

    # 32-byte key for settings encryption; checked on first use, not at startup
    SETTINGS_ENCRYPTION_KEY = os.environ.get('SETTINGS_ENCRYPTION_KEY')

    # Database settings
    SQLALCHEMY_DATABASE_URI = os.environ.get('DATABASE_URL', 'sqlite:///content.db')

    @classmethod
    def init_app(cls, app) -> None:
        """
        Initialize the application with configuration settings.

        Args:
            app: Flask application instance

        Raises:
            ValueError: If required settings are missing or insecure in production
        """
        # Load default configuration without clobbering class-level overrides
        for key, value in cls.ENV_DEFAULTS.items():
            app.config.setdefault(key, value)

        # Load settings from environment variables (highest priority)
        cls._load_from_environment(app)

        # Validate configuration
        cls._validate_configuration(app)

    @classmethod
    def _load_from_environment(cls, app) -> None:
        """
        Load configuration from environment variables.

        ``FLASK_``-prefixed variables map to the config key without the
        prefix, with booleans and numbers converted. Keys listed in
        ENV_PASSTHROUGH keep their string value.

        Args:
            app: Flask application instance
        """
        for key, value in os.environ.items():
            if key.startswith('FLASK_'):
                name = key[6:]
                if name in cls.ENV_PASSTHROUGH:
                    app.config[name] = value
                else:
                    app.config[name] = cls._convert_env_value(value)

        for var in cls.ENV_PASSTHROUGH:
            if os.environ.get(var):
                app.config[var] = os.environ[var]

        if 'DATABASE_URL' in os.environ:
            app.config['SQLALCHEMY_DATABASE_URI'] = os.environ['DATABASE_URL']

    @staticmethod
    def _convert_env_value(value: str) -> Any:
        """
        Convert environment variable string to appropriate Python type.

        Args:
            value: String value from environment variable

        Returns:
            Value converted to appropriate type (bool, int, float, str)
        """
        if value.lower() in ('true', 'yes'):
            return True
        elif value.lower() in ('false', 'no'):
            return False
        elif value.isdigit():
            return int(value)
        elif value.replace('.', '', 1).isdigit() and value.count('.') == 1:
            return float(value)
        return value

    @classmethod
    def _validate_configuration(cls, app) -> None:
        """
        Validate settings whose values are not checked anywhere else.

        Args:
            app: Flask application instance

        Raises:
            ValueError: If SLUG_MAX_ATTEMPTS or LEADS_PAGE_SIZE_MAX is not a
                positive integer
        """
        for key in ('SLUG_MAX_ATTEMPTS', 'LEADS_PAGE_SIZE_MAX'):
            value = app.config.get(key)
            if not isinstance(value, int) or isinstance(value, bool) or value < 1:
                raise ValueError(f"{key} must be a positive integer, got {value!r}")
