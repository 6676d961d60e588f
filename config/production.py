"""
Production environment configuration for the content core.
"""

import logging
import os

from .base import Config
from .config_constants import ENVIRONMENT_PRODUCTION, INSECURE_SECRET_KEYS

logger = logging.getLogger(__name__)


class ProductionConfig(Config):
    """
    Configuration for production environment.

    Refuses to start without an explicit SECRET_KEY and DATABASE_URL. The
    settings encryption key is not checked here; it fails on first use so a
    deployment without encrypted settings can still boot.
    """

    DEBUG = False
    TESTING = False
    ENVIRONMENT = ENVIRONMENT_PRODUCTION

    SESSION_COOKIE_SECURE = True
    PREFERRED_URL_SCHEME = 'https'

    SQLALCHEMY_DATABASE_URI = os.environ.get('DATABASE_URL')
    SQLALCHEMY_ENGINE_OPTIONS = {
        'pool_recycle': 280,
        'pool_pre_ping': True,
    }

    LOG_LEVEL = 'WARNING'
    LOG_TO_FILE = True

    @classmethod
    def init_app(cls, app) -> None:
        """
        Initialize application with production configuration.

        Raises:
            ValueError: If SECRET_KEY or DATABASE_URL are missing or insecure
        """
        super().init_app(app)

        missing_vars = [var for var in cls.REQUIRED_VARS if not os.environ.get(var)]
        if missing_vars:
            raise ValueError(f"Missing required environment variables: {', '.join(missing_vars)}")

        if app.config.get('SECRET_KEY') in INSECURE_SECRET_KEYS:
            logger.error("Development SECRET_KEY used in production environment")
            raise ValueError("Development SECRET_KEY used in production environment")
