"""
Content core application factory.

This module provides the factory function for creating Flask application
instances with the appropriate configuration, extensions, API blueprints,
error handlers and CLI commands.
"""

import logging
import platform
import sys
import time

from flask import Flask

from api import init_app as init_api
from api.errors import register_error_handlers
from cli import register_cli_commands
from config import get_config
from core.loggings import setup_app_logging
from extensions import init_extensions

logger = logging.getLogger(__name__)


def create_app(config_name=None) -> Flask:
    """
    Create and configure a Flask application instance.

    Args:
        config_name (str, optional): Name of the configuration to use ('development',
                                     'production', 'testing'). Detected from the
                                     environment when None.

    Returns:
        Flask: Configured Flask application instance ready to serve requests
    """
    startup_start_time = time.time()

    app = Flask(__name__)

    # Load configuration
    config_class = get_config(config_name)
    app.config.from_object(config_class)
    config_class.init_app(app)

    # Set up logging early to capture initialization issues
    setup_app_logging(app)

    init_extensions(app)
    init_api(app)
    register_error_handlers(app)
    register_cli_commands(app)

    log_startup_info(app, time.time() - startup_start_time)
    return app


def log_startup_info(app: Flask, startup_duration: float = 0.0) -> None:
    """
    Log application startup information.

    Args:
        app (Flask): The Flask application instance
        startup_duration (float, optional): Startup duration in seconds. Defaults to 0.0.
    """
    python_version = f"{sys.version_info.major}.{sys.version_info.minor}.{sys.version_info.micro}"

    logger.info("Starting content core v%s", app.config.get('VERSION', '1.0.0'), extra={
        'environment': app.config.get('ENVIRONMENT'),
        'debug': app.config.get('DEBUG'),
        'python_version': python_version,
        'platform': platform.platform(),
        'encryption_key_configured': bool(app.config.get('SETTINGS_ENCRYPTION_KEY')),
        'sentry_enabled': bool(app.config.get('SENTRY_DSN')),
        'startup_time_seconds': round(startup_duration, 3)
    })

    if not app.config.get('SETTINGS_ENCRYPTION_KEY'):
        logger.warning("SETTINGS_ENCRYPTION_KEY is not set; sensitive settings cannot be "
                       "saved or read until it is configured")
