"""
Settings encryption commands for the content core CLI.

generate-key prints a fresh value for SETTINGS_ENCRYPTION_KEY; check-key
verifies that the configured key can be used before the application needs
it.
"""

import logging
import secrets

import click
from flask.cli import AppGroup

from core.security import (
    DecryptionError,
    EncryptionError,
    check_encryption_key,
    decrypt_value,
    encrypt_value,
)

settings_cli = AppGroup('settings', help='Manage settings encryption.')
logger = logging.getLogger(__name__)


@settings_cli.command('generate-key')
def generate_key() -> None:
    """
    Print a random 32-character key for SETTINGS_ENCRYPTION_KEY.

    The key is printed once and never stored; keep it with the deployment's
    other secrets. Changing it makes previously saved sensitive settings
    unreadable.
    """
    click.echo(secrets.token_urlsafe(24))


@settings_cli.command('check-key')
def check_key() -> None:
    """
    Verify SETTINGS_ENCRYPTION_KEY with an encrypt/decrypt round trip.

    Exits with an error when the key is missing or not exactly 32 bytes.
    """
    try:
        check_encryption_key()
        probe = secrets.token_hex(8)
        if decrypt_value(encrypt_value(probe)) != probe:
            raise click.ClickException('Encryption round trip returned a different value')
    except (EncryptionError, DecryptionError) as e:
        raise click.ClickException(str(e))

    click.echo('Settings encryption key is valid')
