"""
Schema definitions for the content API.

This module defines Marshmallow schemas that validate request payloads and
serialize responses. Wire names are camelCase (``authorId``, ``galleryImages``)
while loaded data uses the snake_case attribute names the services expect.

The same schema is used for both directions: request-only fields are
``load_only`` and server-generated fields (ids, timestamps) are ``dump_only``.
PUT routes load with ``partial=True`` so omitted fields stay omitted.
"""

import logging
from typing import Any, Dict

from marshmallow import (
    Schema, fields, validate, validates, post_load, pre_load,
    ValidationError, EXCLUDE, INCLUDE
)

from models.lead import Lead
from services.lead_service import ALLOWED_SORT_FIELDS

# Initialize module logger
logger = logging.getLogger(__name__)

# camelCase sort names accepted by the leads listing
_LEAD_SORT_ALIASES = {
    'fullName': 'full_name',
    'sourceFormName': 'source_form_name',
    'submissionTimestamp': 'submission_timestamp',
}


class BaseSchema(Schema):
    """
    Base schema with common configuration for all content schemas.

    - Excludes unknown fields
    - Strips surrounding whitespace from top-level string values
    """
    class Meta:
        """Schema metadata."""
        unknown = EXCLUDE

    @pre_load
    def sanitize_input(self, data: Any, **kwargs) -> Any:
        """
        Strip whitespace from string fields before validation.

        Args:
            data: The input data dictionary

        Returns:
            Sanitized input data
        """
        if not isinstance(data, dict):
            return data
        return {key: value.strip() if isinstance(value, str) else value
                for key, value in data.items()}


class TimestampedSchema(BaseSchema):
    """Adds the read-only fields every stored record has."""

    id = fields.Integer(dump_only=True)
    created_at = fields.DateTime(data_key='createdAt', dump_only=True)
    updated_at = fields.DateTime(data_key='updatedAt', dump_only=True)


class TagSchema(TimestampedSchema):
    """Tag as returned by the tags listing."""

    name = fields.String(dump_only=True)
    slug = fields.String(dump_only=True)


class GalleryImageSchema(BaseSchema):
    """Gallery entry: URL plus optional alt text."""

    id = fields.Integer(dump_only=True)
    url = fields.String(required=True, validate=validate.Length(min=1, max=500))
    alt_text = fields.String(data_key='altText', allow_none=True,
                             validate=validate.Length(max=255))
    display_order = fields.Integer(data_key='displayOrder', dump_only=True)


class AuthorSchema(TimestampedSchema):
    """Author payload and representation."""

    name = fields.String(required=True, validate=validate.Length(max=120))
    slug = fields.String()
    bio = fields.String(allow_none=True)
    profile_image_url = fields.String(data_key='profileImageUrl', allow_none=True,
                                      validate=validate.Length(max=500))
    social_media_links = fields.Dict(data_key='socialMediaLinks', keys=fields.String(),
                                     values=fields.String(), allow_none=True)


class CategorySchema(TimestampedSchema):
    """Category payload and representation."""

    name = fields.String(required=True, validate=validate.Length(max=100))
    slug = fields.String()
    description = fields.String(allow_none=True)


class IndustrySchema(TimestampedSchema):
    """Industry payload and representation."""

    name = fields.String(required=True, validate=validate.Length(max=120))
    slug = fields.String()
    description = fields.String(allow_none=True)


class OfferingSchema(TimestampedSchema):
    """Site service payload and representation."""

    title = fields.String(required=True, validate=validate.Length(max=200))
    slug = fields.String()
    description = fields.String(allow_none=True)


class PublishableSchema(TimestampedSchema):
    """Fields shared by blog posts and case studies."""

    title = fields.String(required=True, validate=validate.Length(max=200))
    slug = fields.String()
    description = fields.String(allow_none=True)
    content = fields.String(allow_none=True)
    published = fields.Boolean()
    published_at = fields.DateTime(data_key='publishedAt', dump_only=True)


class CaseStudySchema(PublishableSchema):
    """Case study payload and representation."""

    industry_id = fields.Integer(data_key='industryId', allow_none=True)
    industry = fields.Nested(IndustrySchema(only=('id', 'name', 'slug')), dump_only=True)


class BlogPostSchema(PublishableSchema):
    """
    Blog post payload and representation.

    categoryIds, tagNames and galleryImages each replace the whole
    association set when present; leave them out to keep the current set.
    """

    author_id = fields.Integer(data_key='authorId', allow_none=True)
    category_ids = fields.List(fields.Integer(), data_key='categoryIds', load_only=True)
    tag_names = fields.List(fields.String(validate=validate.Length(max=50)), data_key='tagNames',
                            load_only=True)
    gallery_images = fields.List(fields.Nested(GalleryImageSchema), data_key='galleryImages')

    author = fields.Nested(AuthorSchema(only=('id', 'name', 'slug')), dump_only=True)
    categories = fields.List(fields.Nested(CategorySchema(only=('id', 'name', 'slug'))),
                             dump_only=True)
    tags = fields.List(fields.Nested(TagSchema(only=('id', 'name', 'slug'))), dump_only=True)


class SettingsSchema(Schema):
    """
    Settings save payload: a category plus any number of key/value pairs.

    Setting values pass through untouched; the service skips non-string ones.
    """
    class Meta:
        """Schema metadata."""
        unknown = INCLUDE

    category = fields.String(required=True, validate=validate.Length(min=1, max=50))

    @pre_load
    def strip_category(self, data: Any, **kwargs) -> Any:
        if isinstance(data, dict) and isinstance(data.get('category'), str):
            data = dict(data, category=data['category'].strip())
        return data


class LeadSchema(TimestampedSchema):
    """Lead submission payload and representation."""

    full_name = fields.String(data_key='fullName', allow_none=True)
    email = fields.String(allow_none=True)
    phone = fields.String(allow_none=True)
    company = fields.String(allow_none=True)
    message = fields.String(allow_none=True)
    source_form_name = fields.String(data_key='sourceFormName', allow_none=True)
    submission_url = fields.String(data_key='submissionUrl', allow_none=True)
    status = fields.String(dump_only=True)
    submission_timestamp = fields.DateTime(data_key='submissionTimestamp', dump_only=True)


class LeadStatusSchema(BaseSchema):
    """Lead status update payload."""

    status = fields.String(required=True, validate=validate.OneOf(Lead.STATUSES))


class LeadListQuerySchema(BaseSchema):
    """Query string of the leads listing."""

    page = fields.Integer(load_default=1, validate=validate.Range(min=1))
    limit = fields.Integer(load_default=10, validate=validate.Range(min=1))
    sort_by = fields.String(data_key='sortBy', load_default='submission_timestamp')
    sort_order = fields.String(data_key='sortOrder', load_default='desc',
                               validate=validate.OneOf(['asc', 'desc']))
    form_name = fields.String(data_key='filterFormName')
    status = fields.String(data_key='filterStatus')
    start_date = fields.Date(data_key='filterStartDate')
    end_date = fields.Date(data_key='filterEndDate')
    search = fields.String(data_key='searchQuery')

    @pre_load
    def drop_empty(self, data: Any, **kwargs) -> Any:
        """Treat empty query parameters as absent."""
        if not isinstance(data, dict):
            return data
        return {key: value for key, value in data.items()
                if value is not None and not (isinstance(value, str) and not value.strip())}

    @validates('sort_by')
    def validate_sort_field(self, value: str, **kwargs) -> None:
        """
        Validate sort field against allowed columns.

        Raises:
            ValidationError: If field is not allowed for sorting
        """
        if _LEAD_SORT_ALIASES.get(value, value) not in ALLOWED_SORT_FIELDS:
            raise ValidationError(
                f"Cannot sort by '{value}'. Allowed fields: {', '.join(ALLOWED_SORT_FIELDS)}"
            )

    @post_load
    def normalize(self, data: Dict[str, Any], **kwargs) -> Dict[str, Any]:
        """Map camelCase sort names to attribute names."""
        data['sort_by'] = _LEAD_SORT_ALIASES.get(data['sort_by'], data['sort_by'])
        return data
