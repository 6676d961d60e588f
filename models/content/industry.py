"""Industry model: sectors case studies are grouped by."""

from .. import db, BaseModel


class Industry(BaseModel):
    __tablename__ = 'industries'
    __resource_name__ = 'Industry'

    id = db.Column(db.Integer, primary_key=True)
    name = db.Column(db.String(120), nullable=False, index=True)
    slug = db.Column(db.String(140), nullable=False, unique=True, index=True)
    description = db.Column(db.Text, nullable=True)

    case_studies = db.relationship('CaseStudy', back_populates='industry')
