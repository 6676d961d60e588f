"""
Setting model for site configuration stored in the database.

Each setting is a key/value pair tagged with a category (``general``,
``unsplash``, ``email`` ...). Values of sensitive keys are stored as
encryption envelopes; see services.settings_service.
"""

from . import db, BaseModel


class Setting(BaseModel):
    """
    Site setting.

    Attributes:
        id: Primary key
        key: Setting key, unique across all categories
        value: Stored value, plaintext or an encryption envelope
        category: Group the setting belongs to
    """
    __tablename__ = 'settings'
    __resource_name__ = 'Setting'

    id = db.Column(db.Integer, primary_key=True)
    key = db.Column(db.String(100), nullable=False, unique=True, index=True)
    value = db.Column(db.Text, nullable=False)
    category = db.Column(db.String(50), nullable=False, index=True)
