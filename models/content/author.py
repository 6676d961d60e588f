"""Author model: people credited on blog posts."""

from .. import db, BaseModel


class Author(BaseModel):
    """
    Author of blog posts.

    Attributes:
        id: Primary key
        name: Display name, source of the slug
        slug: URL-safe identifier, unique among authors
        bio: Optional biography
        profile_image_url: Optional avatar URL
        social_media_links: Optional mapping of network name to profile URL
    """
    __tablename__ = 'authors'
    __resource_name__ = 'Author'

    id = db.Column(db.Integer, primary_key=True)
    name = db.Column(db.String(120), nullable=False, index=True)
    slug = db.Column(db.String(140), nullable=False, unique=True, index=True)
    bio = db.Column(db.Text, nullable=True)
    profile_image_url = db.Column(db.String(500), nullable=True)
    social_media_links = db.Column(db.JSON, nullable=True)

    posts = db.relationship('BlogPost', back_populates='author')
