"""
Relational synchronizer for blog post associations.

A post update may carry three association payloads. Each one, when present,
replaces the whole set; there is no diffing:

- category_ids: the exact set of categories the post belongs to
- tag_names: tag names, each found by slug or created, then set as the tags
- gallery_images: the ordered list of images the post owns; existing images
  are deleted and the new ones inserted with display_order following list
  position

A payload of None leaves that association untouched, while an empty list
clears it. All changes run inside one store transaction, so they land
together with the parent field update when the caller opened the transaction.
"""

import logging
from typing import Any, Dict, Iterable, List, Optional

from core.errors import ContentNotFoundError, ContentValidationError
from core.slugs import column_length
from core.utils.string import slugify
from extensions import get_store
from models.content import BlogPost, Category, GalleryImage, Tag

logger = logging.getLogger(__name__)


def sync_associations(entity_id: int,
                      category_ids: Optional[Iterable[int]] = None,
                      tag_names: Optional[Iterable[str]] = None,
                      gallery_images: Optional[Iterable[Dict[str, Any]]] = None,
                      store=None) -> BlogPost:
    """
    Replace the association sets of a blog post.

    Args:
        entity_id: Id of the blog post
        category_ids: Complete set of category ids, or None to leave unchanged
        tag_names: Complete set of tag names, or None to leave unchanged
        gallery_images: Complete ordered gallery as ``{"url", "alt_text"}``
            mappings, or None to leave unchanged
        store: Entity store, defaults to the process-wide store

    Returns:
        BlogPost: The synchronized post

    Raises:
        ContentNotFoundError: If the post or any referenced category is missing
        ContentValidationError: If a gallery entry has no URL
    """
    store = store or get_store()

    with store.transaction():
        post = store.get_or_raise(BlogPost, entity_id, BlogPost.__resource_name__)

        if category_ids is not None:
            post.categories = _resolve_categories(store, category_ids)

        if tag_names is not None:
            post.tags = _find_or_create_tags(store, tag_names)

        if gallery_images is not None:
            _replace_gallery(store, post, gallery_images)

    return post


def _resolve_categories(store, category_ids: Iterable[int]) -> List[Category]:
    wanted = list(dict.fromkeys(category_ids))
    found = {category.id: category for category in store.get_many(Category, wanted)}

    missing = [category_id for category_id in wanted if category_id not in found]
    if missing:
        raise ContentNotFoundError(Category.__resource_name__, missing)

    return [found[category_id] for category_id in wanted]


def _find_or_create_tags(store, tag_names: Iterable[str]) -> List[Tag]:
    tags: Dict[str, Tag] = {}

    for raw_name in tag_names:
        name = raw_name.strip() if isinstance(raw_name, str) else ''
        slug = slugify(name)
        if not slug:
            if name:
                logger.warning("Skipping tag without letters or digits: %r", name)
            continue
        name_length = column_length(Tag, 'name')
        if len(name) > name_length or len(slug) > column_length(Tag, 'slug'):
            raise ContentValidationError(
                f"Tag names must be at most {name_length} characters long",
                details={"tag_names": name}
            )
        if slug in tags:
            continue

        tag = store.find_one(Tag, 'slug', slug)
        if tag is None:
            tag = store.create(Tag, name=name, slug=slug)
            logger.debug("Created tag %s", slug)
        tags[slug] = tag

    return list(tags.values())


def _replace_gallery(store, post: BlogPost, gallery_images: Iterable[Dict[str, Any]]) -> None:
    rows = []
    for position, image in enumerate(gallery_images):
        url = image.get('url') if isinstance(image, dict) else None
        if not isinstance(url, str) or not url.strip():
            raise ContentValidationError(
                "Every gallery image needs a URL",
                details={"gallery_images": {position: "url is required"}}
            )
        rows.append({
            'post_id': post.id,
            'url': url.strip(),
            'alt_text': image.get('alt_text'),
            'display_order': position,
        })

    removed = store.delete_many(GalleryImage, 'post_id', post.id)
    store.expire(post, 'gallery_images')
    store.create_many(GalleryImage, rows)
    store.expire(post, 'gallery_images')

    logger.debug("Replaced %d gallery images of post %s with %d",
                 removed, post.id, len(rows))
