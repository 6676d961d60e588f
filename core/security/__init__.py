"""
Security utilities for the content core.

This package provides encryption-at-rest for sensitive settings. See
cs_crypto for the envelope format and error types.
"""

from .cs_crypto import (
    encrypt_value,
    decrypt_value,
    check_encryption_key,
    EncryptionError,
    EncryptionConfigError,
    DecryptionError,
)

__all__ = [
    'encrypt_value',
    'decrypt_value',
    'check_encryption_key',
    'EncryptionError',
    'EncryptionConfigError',
    'DecryptionError',
]
