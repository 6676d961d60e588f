"""
Blog post model for the content core.

A blog post has a unique slug derived from its title, an optional author,
many-to-many links to categories and tags, and an ordered gallery of images
it owns. Association sets are always replaced as a whole; see
services.sync_service.
"""

from .. import db, BaseModel
from ..base import PublishableMixin

post_categories = db.Table(
    'post_categories',
    db.Column('post_id', db.Integer, db.ForeignKey('blog_posts.id', ondelete='CASCADE'),
              primary_key=True),
    db.Column('category_id', db.Integer, db.ForeignKey('categories.id', ondelete='CASCADE'),
              primary_key=True),
)

post_tags = db.Table(
    'post_tags',
    db.Column('post_id', db.Integer, db.ForeignKey('blog_posts.id', ondelete='CASCADE'),
              primary_key=True),
    db.Column('tag_id', db.Integer, db.ForeignKey('tags.id', ondelete='CASCADE'),
              primary_key=True),
)


class BlogPost(BaseModel, PublishableMixin):
    """
    Blog post with publication workflow and taxonomy links.

    Attributes:
        id: Primary key
        title: Post title, source of the slug
        slug: URL-safe identifier, unique among posts
        description: Short summary shown in listings
        content: Post body
        author_id: Optional author reference
        categories: Categories the post is filed under
        tags: Free-form tags
        gallery_images: Owned images, ordered by display_order
    """
    __tablename__ = 'blog_posts'
    __resource_name__ = 'Blog post'

    id = db.Column(db.Integer, primary_key=True)
    title = db.Column(db.String(200), nullable=False, index=True)
    slug = db.Column(db.String(220), nullable=False, unique=True, index=True)
    description = db.Column(db.Text, nullable=True)
    content = db.Column(db.Text, nullable=True)

    author_id = db.Column(db.Integer, db.ForeignKey('authors.id', ondelete='SET NULL'),
                          nullable=True, index=True)
    author = db.relationship('Author', back_populates='posts')

    categories = db.relationship('Category', secondary=post_categories,
                                 back_populates='posts', order_by='Category.name')
    tags = db.relationship('Tag', secondary=post_tags,
                           back_populates='posts', order_by='Tag.name')
    gallery_images = db.relationship('GalleryImage', back_populates='post',
                                     cascade='all, delete-orphan',
                                     order_by='GalleryImage.display_order')
