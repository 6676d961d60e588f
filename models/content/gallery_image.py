"""
Gallery image model.

Gallery images belong to exactly one blog post and are replaced wholesale
whenever a post update carries a gallery payload.
"""

from .. import db, BaseModel


class GalleryImage(BaseModel):
    """
    Image shown in a blog post gallery.

    Attributes:
        id: Primary key
        post_id: Owning blog post
        url: Image URL
        alt_text: Optional alternative text
        display_order: Position within the gallery, starting at 0
    """
    __tablename__ = 'gallery_images'
    __resource_name__ = 'Gallery image'

    id = db.Column(db.Integer, primary_key=True)
    post_id = db.Column(db.Integer, db.ForeignKey('blog_posts.id', ondelete='CASCADE'),
                        nullable=False, index=True)
    url = db.Column(db.String(500), nullable=False)
    alt_text = db.Column(db.String(255), nullable=True)
    display_order = db.Column(db.Integer, default=0, nullable=False)

    post = db.relationship('BlogPost', back_populates='gallery_images')
