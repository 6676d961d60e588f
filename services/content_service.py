"""
Content services for slugged entity types.

SluggedContentService implements create, get, list, update and delete for a
content model that carries a unique ``slug``. Subclasses declare the model,
the attribute the slug derives from and the fields an admin may edit:

- AuthorService, CategoryService, IndustryService
- CaseStudyService (publishable, linked to an industry)
- OfferingService (site services)

Slug rules:
- On create the slug is resolved from the name with a numeric suffix when
  taken.
- On update the slug is only recomputed when the name actually changes;
  an explicitly requested slug is used verbatim when free and rejected when
  another record holds it.

Every write happens inside a single store transaction.
"""

import logging
from typing import Any, Dict, List, Mapping, Tuple, Type

from core.errors import ContentNotFoundError, ContentValidationError
from core.slugs import resolve_unique_slug, resolve_updated_slug
from extensions import get_store
from models.base import BaseModel, PublishableMixin, utcnow
from models.content import Author, CaseStudy, Category, Industry, Service

logger = logging.getLogger(__name__)


class SluggedContentService:
    """
    CRUD service for one slugged content model.

    Class Attributes:
        model: Model class managed by the service
        name_field: Attribute the slug derives from (``name`` or ``title``)
        editable_fields: Optional attributes accepted on create and update
        references: Foreign key attributes mapped to the model they point at
        order_by: Column names for list(); a leading ``-`` sorts descending
    """

    model: Type[BaseModel] = None
    name_field: str = 'name'
    editable_fields: Tuple[str, ...] = ()
    references: Dict[str, Type[BaseModel]] = {}
    order_by: Tuple[str, ...] = ('name',)

    def __init__(self, store=None):
        self.store = store or get_store()

    @property
    def resource_name(self) -> str:
        return self.model.__resource_name__

    @property
    def publishable(self) -> bool:
        return issubclass(self.model, PublishableMixin)

    # Reads

    def get(self, entity_id: int) -> BaseModel:
        """
        Fetch one record.

        Raises:
            ContentNotFoundError: If no record has this id
        """
        return self.store.get_or_raise(self.model, entity_id, self.resource_name)

    def list(self) -> List[BaseModel]:
        """Return all records in the service's list order."""
        return self.store.list(self.model, *self._order_clauses())

    # Writes

    def create(self, data: Mapping[str, Any]) -> BaseModel:
        """
        Create a record with a freshly resolved unique slug.

        Args:
            data: Field values; the name field is required

        Returns:
            The created record

        Raises:
            ContentValidationError: If the name is missing or empty
            ContentNotFoundError: If a referenced record does not exist
            SlugGenerationError: If no free slug could be found
        """
        name = self._clean_name(data.get(self.name_field))

        with self.store.transaction():
            values = self._editable_values(data)
            self._check_references(values)
            values[self.name_field] = name
            values['slug'] = resolve_unique_slug(self.store, self.model, name)

            if self.publishable:
                published = bool(data.get('published', False))
                values['published'] = published
                values['published_at'] = utcnow() if published else None

            instance = self.store.create(self.model, **values)
            self._after_write(instance, data)

        logger.info("Created %s %s (%s)", self.resource_name.lower(), instance.id, instance.slug)
        return instance

    def update(self, entity_id: int, data: Mapping[str, Any]) -> BaseModel:
        """
        Apply a partial update.

        Only keys present in data are touched. The slug changes when the name
        changes or when a different, free slug is requested.

        Raises:
            ContentNotFoundError: If the record or a referenced record is missing
            ContentValidationError: If the name is empty or the slug malformed
            SlugConflictError: If the requested slug belongs to another record
        """
        with self.store.transaction():
            instance = self.get(entity_id)

            new_name = None
            if self.name_field in data:
                new_name = self._clean_name(data[self.name_field])

            slug = resolve_updated_slug(
                self.store, instance,
                new_name=new_name,
                requested_slug=data.get('slug'),
                name_field=self.name_field,
            )

            values = self._editable_values(data)
            self._check_references(values)
            if new_name is not None:
                values[self.name_field] = new_name
            values['slug'] = slug

            changes = {
                key: value for key, value in values.items()
                if getattr(instance, key) != value
            }
            if changes:
                self.store.update(self.model, instance.id, **changes)

            if self.publishable and 'published' in data:
                instance.apply_publication(bool(data['published']))

            self._after_write(instance, data)

        if changes:
            logger.info("Updated %s %s: %s", self.resource_name.lower(), instance.id,
                        ', '.join(sorted(changes)))
        return instance

    def delete(self, entity_id: int) -> None:
        """
        Delete a record.

        Raises:
            ContentNotFoundError: If no record has this id
        """
        with self.store.transaction():
            self.store.delete(self.model, entity_id)
        logger.info("Deleted %s %s", self.resource_name.lower(), entity_id)

    # Hooks and helpers

    def _after_write(self, instance: BaseModel, data: Mapping[str, Any]) -> None:
        """Run extra writes inside the create/update transaction."""

    def _clean_name(self, value: Any) -> str:
        name = value.strip() if isinstance(value, str) else ''
        if not name:
            raise ContentValidationError(
                f"{self.resource_name} {self.name_field} is required and cannot be empty",
                details={self.name_field: "required"}
            )
        return name

    def _editable_values(self, data: Mapping[str, Any]) -> Dict[str, Any]:
        return {field: data[field] for field in self.editable_fields if field in data}

    def _check_references(self, values: Mapping[str, Any]) -> None:
        for field, target in self.references.items():
            target_id = values.get(field)
            if target_id is not None and self.store.get(target, target_id) is None:
                raise ContentNotFoundError(target.__resource_name__, target_id)

    def _order_clauses(self) -> List[Any]:
        clauses = []
        for name in self.order_by:
            column = getattr(self.model, name.lstrip('-'))
            clauses.append(column.desc() if name.startswith('-') else column.asc())
        return clauses


class AuthorService(SluggedContentService):
    model = Author
    editable_fields = ('bio', 'profile_image_url', 'social_media_links')


class CategoryService(SluggedContentService):
    model = Category
    editable_fields = ('description',)


class IndustryService(SluggedContentService):
    model = Industry
    editable_fields = ('description',)


class CaseStudyService(SluggedContentService):
    model = CaseStudy
    name_field = 'title'
    editable_fields = ('description', 'content', 'industry_id')
    references = {'industry_id': Industry}
    order_by = ('-created_at', '-id')


class OfferingService(SluggedContentService):
    """Services offered on the site (the Service model)."""

    model = Service
    name_field = 'title'
    editable_fields = ('description',)
    order_by = ('-created_at', '-id')
