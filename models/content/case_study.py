"""Case study model with the same publication workflow as blog posts."""

from .. import db, BaseModel
from ..base import PublishableMixin


class CaseStudy(BaseModel, PublishableMixin):
    """
    Customer case study.

    Attributes:
        id: Primary key
        title: Case study title, source of the slug
        slug: URL-safe identifier, unique among case studies
        description: Short summary
        content: Full write-up
        industry_id: Optional industry reference
    """
    __tablename__ = 'case_studies'
    __resource_name__ = 'Case study'

    id = db.Column(db.Integer, primary_key=True)
    title = db.Column(db.String(200), nullable=False, index=True)
    slug = db.Column(db.String(220), nullable=False, unique=True, index=True)
    description = db.Column(db.Text, nullable=True)
    content = db.Column(db.Text, nullable=True)

    industry_id = db.Column(db.Integer, db.ForeignKey('industries.id', ondelete='SET NULL'),
                            nullable=True, index=True)
    industry = db.relationship('Industry', back_populates='case_studies')
