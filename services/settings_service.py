"""
Settings service for site configuration stored in the database.

Settings are saved per category as string key/value pairs. Keys in
SENSITIVE_KEYS are encrypted with core.security before they are written and
decrypted after they are read.

A value that fails to decrypt (tampered, or written under another key) is
reported as DECRYPTION_FAILED for that key alone. A missing or malformed
encryption key is a configuration error and fails the whole call.
"""

import logging
from typing import Any, Dict, List, Mapping, Optional

from sqlalchemy import select

from core.errors import ContentValidationError
from core.security import DecryptionError, decrypt_value, encrypt_value
from extensions import get_store
from models.setting import Setting

logger = logging.getLogger(__name__)

SENSITIVE_KEYS = frozenset({'unsplash_access_key', 'unsplash_secret_key'})
DECRYPTION_FAILED = '[DECRYPTION FAILED]'


class SettingsService:
    """Read and write site settings."""

    def __init__(self, store=None):
        self.store = store or get_store()

    @staticmethod
    def is_sensitive(key: str) -> bool:
        return key in SENSITIVE_KEYS

    def save_settings(self, category: Any, values: Mapping[str, Any]) -> List[str]:
        """
        Upsert settings under a category.

        Non-string values are skipped. All accepted values are written in one
        transaction.

        Args:
            category: Category the settings belong to
            values: Mapping of setting key to value

        Returns:
            List[str]: Keys that were saved

        Raises:
            ContentValidationError: If the category is missing or no settings
                were provided
            EncryptionConfigError: If a sensitive key is saved without a valid
                encryption key configured
        """
        if not isinstance(category, str) or not category.strip():
            raise ContentValidationError("Category is required", details={"category": "required"})
        category = category.strip()

        if not values:
            raise ContentValidationError("No settings provided to save")

        saved = []
        with self.store.transaction():
            for key, value in values.items():
                if not isinstance(value, str):
                    logger.warning("Skipping non-string value for setting %s", key)
                    continue

                stored_value = encrypt_value(value) if self.is_sensitive(key) else value

                existing = self.store.find_one(Setting, 'key', key)
                if existing is None:
                    self.store.create(Setting, key=key, value=stored_value, category=category)
                else:
                    self.store.update(Setting, existing.id, value=stored_value, category=category)
                saved.append(key)

        logger.info("Saved %d settings in category %s", len(saved), category)
        return saved

    def get_settings(self, category: Optional[str] = None) -> Dict[str, str]:
        """
        Return settings as a key/value mapping.

        Args:
            category: Only return settings of this category when given

        Returns:
            Dict[str, str]: Plaintext values, DECRYPTION_FAILED for sensitive
            values that could not be decrypted

        Raises:
            EncryptionConfigError: If sensitive settings exist but no valid
                encryption key is configured
        """
        stmt = select(Setting).order_by(Setting.key)
        if category:
            stmt = stmt.where(Setting.category == category)

        settings = {}
        for setting in self.store.scalars(stmt):
            if not self.is_sensitive(setting.key):
                settings[setting.key] = setting.value
                continue
            try:
                settings[setting.key] = decrypt_value(setting.value)
            except DecryptionError as e:
                logger.error("Failed to decrypt setting %s: %s", setting.key, e)
                settings[setting.key] = DECRYPTION_FAILED

        return settings
