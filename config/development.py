"""
Development environment configuration for the content core.
"""

import os

from .base import Config
from .config_constants import ENVIRONMENT_DEVELOPMENT


class DevelopmentConfig(Config):
    """Local development: debug on, verbose logging, SQLite database."""

    DEBUG = True
    ENVIRONMENT = ENVIRONMENT_DEVELOPMENT

    SQLALCHEMY_DATABASE_URI = os.environ.get('DATABASE_URL', 'sqlite:///content-dev.db')
    SQLALCHEMY_ECHO = False

    LOG_LEVEL = 'DEBUG'
