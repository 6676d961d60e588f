"""
Blog post service.

Blog posts follow the slugged content rules of SluggedContentService and
additionally carry an author, categories, tags and a gallery. The parent
fields and every association payload are written in the same transaction:
if tag creation or the gallery replacement fails, the field update is rolled
back with it.
"""

import logging
from typing import Any, Mapping

from models.content import Author, BlogPost
from services.content_service import SluggedContentService
from services.sync_service import sync_associations

logger = logging.getLogger(__name__)

ASSOCIATION_FIELDS = ('category_ids', 'tag_names', 'gallery_images')


class BlogPostService(SluggedContentService):
    """CRUD for blog posts including their association sets."""

    model = BlogPost
    name_field = 'title'
    editable_fields = ('description', 'content', 'author_id')
    references = {'author_id': Author}
    order_by = ('-created_at', '-id')

    def _after_write(self, instance: BlogPost, data: Mapping[str, Any]) -> None:
        payload = {field: data.get(field) for field in ASSOCIATION_FIELDS}
        if all(value is None for value in payload.values()):
            return

        sync_associations(instance.id, store=self.store, **payload)
        logger.debug("Synchronized associations of post %s: %s", instance.id,
                     ', '.join(field for field, value in payload.items() if value is not None))
