"""
CLI initialization module for the content core.

Command groups are attached to the application's ``flask`` command:

    flask content-db init|drop
    flask settings generate-key|check-key
"""

import logging

from flask import Flask

# Initialize logger
logger = logging.getLogger(__name__)


def register_cli_commands(app: Flask) -> None:
    """
    Register all CLI commands with the Flask application.

    Args:
        app: Flask application instance to register commands with
    """
    from .commands import db_cli, settings_cli

    app.cli.add_command(db_cli)
    app.cli.add_command(settings_cli)

    logger.debug("Registered CLI commands")


__all__ = ['register_cli_commands']
