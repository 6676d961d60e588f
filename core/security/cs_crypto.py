"""
Cryptography utilities for settings stored at rest.

This module provides the authenticated encryption used to protect sensitive
setting values before they are persisted and after they are retrieved.

Key functionality includes:
- AES-256-GCM encryption with a fresh 128-bit IV per call
- Envelope encoding as three colon-separated hex segments: IV:TAG:CIPHERTEXT
- Lazy key lookup so a missing or malformed key fails on first use only
- Distinct error types for configuration, encryption and decryption failures
"""

import logging
import os
import re
from typing import List, Optional

from cryptography.exceptions import InvalidTag
from cryptography.hazmat.primitives.ciphers import Cipher, algorithms, modes
from flask import current_app, has_app_context

# Set up module-level logger
logger = logging.getLogger(__name__)

ENCRYPTION_KEY_SETTING = 'SETTINGS_ENCRYPTION_KEY'
KEY_LENGTH = 32  # AES-256
IV_LENGTH = 16
TAG_LENGTH = 16
ENVELOPE_SEPARATOR = ':'

_HEX_SEGMENT = re.compile(r'^(?:[0-9a-f]{2})*$')


class EncryptionError(Exception):
    """Raised when a value cannot be encrypted."""


class EncryptionConfigError(EncryptionError):
    """Raised when the encryption key is missing or has the wrong length."""


class DecryptionError(Exception):
    """Raised when an envelope is malformed or fails authentication."""


def _get_encryption_key() -> bytes:
    """
    Get the settings encryption key.

    The key is read from the application config when an app context is
    active, otherwise from the process environment. Its UTF-8 encoding must be
    exactly 32 bytes long.

    Returns:
        bytes: The encryption key

    Raises:
        EncryptionConfigError: If the key is missing, not a string or not
            32 bytes long
    """
    raw_key = None
    if has_app_context():
        raw_key = current_app.config.get(ENCRYPTION_KEY_SETTING)
    if not raw_key:
        raw_key = os.environ.get(ENCRYPTION_KEY_SETTING)

    if not raw_key:
        logger.critical("%s is not set", ENCRYPTION_KEY_SETTING)
        raise EncryptionConfigError("Server configuration error: Encryption key is missing.")

    if isinstance(raw_key, str):
        key = raw_key.encode('utf-8')
    elif isinstance(raw_key, bytes):
        key = raw_key
    else:
        logger.critical("%s must be a string, got %s", ENCRYPTION_KEY_SETTING,
                        type(raw_key).__name__)
        raise EncryptionConfigError("Server configuration error: Invalid encryption key type.")

    if len(key) != KEY_LENGTH:
        logger.critical("%s must be %d bytes long", ENCRYPTION_KEY_SETTING, KEY_LENGTH)
        raise EncryptionConfigError("Server configuration error: Invalid encryption key length.")

    return key


def check_encryption_key() -> None:
    """
    Validate the configured key without encrypting anything.

    Raises:
        EncryptionConfigError: If the key is missing or malformed
    """
    _get_encryption_key()


def encrypt_value(plaintext: str, key: Optional[bytes] = None) -> str:
    """
    Encrypt a string using AES-GCM (Galois/Counter Mode).

    Args:
        plaintext: The plaintext string to encrypt, may be empty
        key: Optional key, uses the configured settings key if None

    Returns:
        Envelope string "IV:TAG:CIPHERTEXT" with lowercase hex segments

    Raises:
        EncryptionConfigError: If no valid key is configured
        EncryptionError: If encryption fails
    """
    if key is None:
        key = _get_encryption_key()

    try:
        iv = os.urandom(IV_LENGTH)
        encryptor = Cipher(algorithms.AES(key), modes.GCM(iv)).encryptor()
        ciphertext = encryptor.update(plaintext.encode('utf-8')) + encryptor.finalize()
        tag = encryptor.tag
    except (ValueError, TypeError, AttributeError) as e:
        logger.error("Encryption failed: %s", e.__class__.__name__)
        raise EncryptionError(f"Encryption failed: {e}") from e

    return ENVELOPE_SEPARATOR.join((iv.hex(), tag.hex(), ciphertext.hex()))


def decrypt_value(envelope: str, key: Optional[bytes] = None) -> str:
    """
    Decrypt an envelope produced by encrypt_value.

    Args:
        envelope: Envelope string "IV:TAG:CIPHERTEXT"
        key: Optional key, uses the configured settings key if None

    Returns:
        Decrypted plaintext string

    Raises:
        EncryptionConfigError: If no valid key is configured
        DecryptionError: If the envelope is malformed or was tampered with
    """
    if key is None:
        key = _get_encryption_key()

    iv, tag, ciphertext = _split_envelope(envelope)

    try:
        decryptor = Cipher(algorithms.AES(key), modes.GCM(iv, tag)).decryptor()
        plaintext = decryptor.update(ciphertext) + decryptor.finalize()
    except InvalidTag as e:
        logger.warning("Decryption failed: authentication tag mismatch")
        raise DecryptionError("Decryption failed: data may be corrupted or tampered with") from e
    except ValueError as e:
        logger.warning("Decryption failed: %s", e)
        raise DecryptionError(f"Decryption failed: {e}") from e

    try:
        return plaintext.decode('utf-8')
    except UnicodeDecodeError as e:
        raise DecryptionError("Decryption failed: plaintext is not valid UTF-8") from e


def _split_envelope(envelope: str) -> List[bytes]:
    """
    Split and hex-decode an envelope into IV, tag and ciphertext.

    Raises:
        DecryptionError: If the envelope shape or segment lengths are invalid
    """
    if not isinstance(envelope, str):
        raise DecryptionError("Invalid encrypted text format. Expected IV:AuthTag:Data.")

    parts = envelope.split(ENVELOPE_SEPARATOR)
    if len(parts) != 3:
        raise DecryptionError("Invalid encrypted text format. Expected IV:AuthTag:Data.")

    if not all(_HEX_SEGMENT.match(part) for part in parts):
        raise DecryptionError("Invalid encrypted text format. Segments must be lowercase hex.")

    try:
        iv, tag, ciphertext = (bytes.fromhex(part) for part in parts)
    except ValueError as e:
        raise DecryptionError("Invalid encrypted text format. Segments must be hex.") from e

    if len(iv) != IV_LENGTH:
        raise DecryptionError(f"Invalid IV length. Expected {IV_LENGTH} bytes, got {len(iv)}.")
    if len(tag) != TAG_LENGTH:
        raise DecryptionError(f"Invalid auth tag length. Expected {TAG_LENGTH} bytes, got {len(tag)}.")

    return [iv, tag, ciphertext]
