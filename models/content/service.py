"""Service model: offerings listed on the marketing site."""

from .. import db, BaseModel


class Service(BaseModel):
    __tablename__ = 'services'
    __resource_name__ = 'Service'

    id = db.Column(db.Integer, primary_key=True)
    title = db.Column(db.String(200), nullable=False, index=True)
    slug = db.Column(db.String(220), nullable=False, unique=True, index=True)
    description = db.Column(db.Text, nullable=True)
