"""
Tag model for flexible content classification.

Tags are never created directly; they come into existence when a post
references a tag name that no existing tag slug matches.
"""

from .. import db, BaseModel


class Tag(BaseModel):
    """
    Represents a content tag.

    Attributes:
        id: Primary key
        name: Tag name (unique)
        slug: URL-friendly version of the name (unique)
    """
    __tablename__ = 'tags'
    __resource_name__ = 'Tag'

    id = db.Column(db.Integer, primary_key=True, autoincrement=True)
    name = db.Column(db.String(50), nullable=False, unique=True, index=True)
    slug = db.Column(db.String(60), nullable=False, unique=True, index=True)

    posts = db.relationship('BlogPost', secondary='post_tags', back_populates='tags')
