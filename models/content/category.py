"""
Category model for organizing blog posts.

Categories are a flat list linked to posts through the post_categories
association table.
"""

from .. import db, BaseModel


class Category(BaseModel):
    """
    Blog post category.

    Attributes:
        id: Primary key
        name: Category name, source of the slug
        slug: URL-safe identifier, unique among categories
        description: Optional description of the category
    """
    __tablename__ = 'categories'
    __resource_name__ = 'Category'

    id = db.Column(db.Integer, primary_key=True, autoincrement=True)
    name = db.Column(db.String(100), nullable=False, index=True)
    slug = db.Column(db.String(120), nullable=False, unique=True, index=True)
    description = db.Column(db.Text, nullable=True)

    posts = db.relationship('BlogPost', secondary='post_categories', back_populates='categories')
