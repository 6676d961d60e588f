"""
Main application entry point for the content core.

This module serves as the WSGI entry point (``gunicorn app:app``) and as the
target of the ``flask`` command. The environment is picked from ENVIRONMENT
or FLASK_ENV, defaulting to development.
"""

import logging

from sqlalchemy.exc import SQLAlchemyError

from core.factory import create_app

try:
    app = create_app()
except (SQLAlchemyError, ValueError) as e:
    logging.critical("Application initialization failed: %s", e)
    raise

if __name__ == '__main__':
    app.run()
