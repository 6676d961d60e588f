"""
CLI command groups for the content core.
"""

from .db import db_cli
from .settings import settings_cli

__all__ = ['db_cli', 'settings_cli']
