"""
Unique slug resolution for content entities.

Slugs are derived from a display name with slugify and made unique within
the entity's own collection by appending a numeric suffix: the first free
candidate of ``base``, ``base-1``, ``base-2`` ... wins. Lookups against the
store are issued one at a time.

The search is capped (SLUG_MAX_ATTEMPTS, 100 by default). Running out of
attempts raises SlugGenerationError instead of looping forever.

The check-then-insert sequence is not atomic. Two writers creating the same
name at the same time can both pick the same candidate; the unique constraint
on the slug column then rejects the second insert as a ContentConflictError.
"""

import logging
from typing import Any, Optional

from flask import current_app, has_app_context

from core.errors import ContentValidationError, SlugConflictError, SlugGenerationError
from core.utils.string import is_valid_slug, slugify

logger = logging.getLogger(__name__)

DEFAULT_MAX_ATTEMPTS = 100


def _max_attempts() -> int:
    if has_app_context():
        return int(current_app.config.get('SLUG_MAX_ATTEMPTS', DEFAULT_MAX_ATTEMPTS))
    return DEFAULT_MAX_ATTEMPTS


def _resource_name(model) -> str:
    return getattr(model, '__resource_name__', model.__name__)


def column_length(model, field: str) -> Optional[int]:
    """Declared length of a string column, None when the model does not declare one."""
    table = getattr(model, '__table__', None)
    if table is None or field not in table.c:
        return None
    return getattr(table.c[field].type, 'length', None)


def _check_slug_length(model, slug: str) -> None:
    max_length = column_length(model, 'slug')
    if max_length is not None and len(slug) > max_length:
        raise ContentValidationError(
            f"Slug must be at most {max_length} characters long",
            details={"slug": slug}
        )


def resolve_unique_slug(store, model, name: str, exclude_id: Optional[Any] = None,
                        max_attempts: Optional[int] = None) -> str:
    """
    Resolve a slug for name that no other record of model is using.

    Args:
        store: Entity store providing find_one(model, field, value, exclude_id)
        model: Model class whose ``slug`` column must stay unique
        name: Display name to derive the slug from
        exclude_id: Id of the record being updated, so it never collides
            with itself
        max_attempts: Candidates to try before giving up, defaults to the
            SLUG_MAX_ATTEMPTS setting

    Returns:
        str: The first free candidate

    Raises:
        ContentValidationError: If name produces an empty slug or one longer
            than the slug column
        SlugGenerationError: If every candidate within the cap is taken
    """
    base = slugify(name)
    resource = _resource_name(model)
    if not base:
        raise ContentValidationError(
            f"{resource} name must contain at least one letter or digit",
            details={"name": name}
        )

    if max_attempts is None:
        max_attempts = _max_attempts()

    for attempt in range(max_attempts):
        candidate = base if attempt == 0 else f"{base}-{attempt}"
        _check_slug_length(model, candidate)
        if store.find_one(model, 'slug', candidate, exclude_id=exclude_id) is None:
            if attempt:
                logger.debug("Resolved slug %s for %s after %d collisions",
                             candidate, resource, attempt)
            return candidate

    logger.error("Could not generate unique slug for %s after %d attempts",
                 resource, max_attempts)
    raise SlugGenerationError(name, max_attempts, resource)


def resolve_updated_slug(store, instance, new_name: Optional[str] = None,
                         requested_slug: Optional[str] = None,
                         name_field: str = 'name') -> str:
    """
    Decide the slug of an existing record after an update.

    The slug only changes when the display name actually changed, in which
    case it is re-resolved excluding the record itself, or when a different
    slug is explicitly requested. A requested slug is never suffixed: if
    another record holds it the update fails.

    Args:
        store: Entity store
        instance: The persisted record being updated
        new_name: Incoming display name, None when not part of the update
        requested_slug: Explicitly requested slug, None when not requested
        name_field: Attribute holding the display name (``name`` or ``title``)

    Returns:
        str: The slug the record should carry after the update

    Raises:
        ContentValidationError: If the requested slug is malformed or too long
        SlugConflictError: If the requested slug belongs to another record
        SlugGenerationError: If no free slug exists within the cap
    """
    model = type(instance)
    current_slug = instance.slug

    if new_name is not None and new_name != getattr(instance, name_field):
        return resolve_unique_slug(store, model, new_name, exclude_id=instance.id)

    if requested_slug and requested_slug != current_slug:
        if not is_valid_slug(requested_slug):
            raise ContentValidationError(
                "Slug may only contain lowercase letters, digits and single hyphens",
                details={"slug": requested_slug}
            )
        _check_slug_length(model, requested_slug)
        if store.find_one(model, 'slug', requested_slug, exclude_id=instance.id) is not None:
            raise SlugConflictError(requested_slug, _resource_name(model))
        return requested_slug

    return current_slug
