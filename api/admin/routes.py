"""
Admin content API routes.

Every slugged content type gets the same five endpoints under /api/admin:

    GET    /<resource>          list
    POST   /<resource>          create (201)
    GET    /<resource>/<id>     fetch one
    PUT    /<resource>/<id>     partial update
    DELETE /<resource>/<id>     delete (204 for authors and categories,
                                200 with a message otherwise)

for resource in blog, authors, categories, industries, case-studies and
services. Tags, settings and leads have their own endpoints below.

Handlers only parse input and shape output; failures are raised as content
errors and rendered by api.errors.
"""

import logging
from typing import Any, Dict, Type

from flask import Blueprint, jsonify, request

from api.admin.decorators import admin_required, login_required
from api.admin.schemas import (
    AuthorSchema,
    BlogPostSchema,
    CaseStudySchema,
    CategorySchema,
    IndustrySchema,
    LeadListQuerySchema,
    LeadSchema,
    LeadStatusSchema,
    OfferingSchema,
    SettingsSchema,
    TagSchema,
)
from core.errors import ContentValidationError
from extensions import get_store
from marshmallow import Schema
from models.content import Tag
from services import (
    AuthorService,
    BlogPostService,
    CaseStudyService,
    CategoryService,
    IndustryService,
    LeadService,
    OfferingService,
    SettingsService,
    SluggedContentService,
)

# Initialize logger
logger = logging.getLogger(__name__)

admin_api = Blueprint('admin_api', __name__, url_prefix='/admin')


def get_json_body() -> Dict[str, Any]:
    """
    Return the request's JSON object.

    Raises:
        ContentValidationError: If the body is not a JSON object
    """
    data = request.get_json(silent=True)
    if not isinstance(data, dict):
        raise ContentValidationError("Invalid request format, JSON object required")
    return data


def register_content_resource(blueprint: Blueprint, resource: str,
                              service_class: Type[SluggedContentService],
                              schema_class: Type[Schema],
                              delete_status: int = 200) -> None:
    """
    Register list/create/get/update/delete endpoints for a content resource.

    Args:
        blueprint: Blueprint to register on
        resource: URL segment, also used as endpoint prefix
        service_class: Service implementing the operations
        schema_class: Schema validating payloads and serializing records
        delete_status: 204 for an empty response, 200 for a JSON message
    """
    endpoint = resource.replace('-', '_')
    schema = schema_class()
    many_schema = schema_class(many=True)
    label = service_class.model.__resource_name__

    @admin_required
    def list_items():
        return jsonify(many_schema.dump(service_class().list())), 200

    @admin_required
    def create_item():
        data = schema.load(get_json_body())
        instance = service_class().create(data)
        return jsonify(schema.dump(instance)), 201

    @admin_required
    def get_item(item_id: int):
        return jsonify(schema.dump(service_class().get(item_id))), 200

    @admin_required
    def update_item(item_id: int):
        data = schema.load(get_json_body(), partial=True)
        instance = service_class().update(item_id, data)
        return jsonify(schema.dump(instance)), 200

    @admin_required
    def delete_item(item_id: int):
        service_class().delete(item_id)
        if delete_status == 204:
            return '', 204
        return jsonify({'message': f'{label} deleted successfully'}), 200

    blueprint.add_url_rule(f'/{resource}', f'list_{endpoint}', list_items, methods=['GET'])
    blueprint.add_url_rule(f'/{resource}', f'create_{endpoint}', create_item, methods=['POST'])
    blueprint.add_url_rule(f'/{resource}/<int:item_id>', f'get_{endpoint}', get_item,
                           methods=['GET'])
    blueprint.add_url_rule(f'/{resource}/<int:item_id>', f'update_{endpoint}', update_item,
                           methods=['PUT'])
    blueprint.add_url_rule(f'/{resource}/<int:item_id>', f'delete_{endpoint}', delete_item,
                           methods=['DELETE'])


register_content_resource(admin_api, 'blog', BlogPostService, BlogPostSchema)
register_content_resource(admin_api, 'authors', AuthorService, AuthorSchema, delete_status=204)
register_content_resource(admin_api, 'categories', CategoryService, CategorySchema,
                          delete_status=204)
register_content_resource(admin_api, 'industries', IndustryService, IndustrySchema)
register_content_resource(admin_api, 'case-studies', CaseStudyService, CaseStudySchema)
register_content_resource(admin_api, 'services', OfferingService, OfferingSchema)


@admin_api.route('/tags', methods=['GET'])
@login_required
def list_tags():
    """
    List all tags for tag pickers.

    Returns:
        JSON array of ``{id, name, slug}`` sorted by name
    """
    tags = get_store().list(Tag, Tag.name.asc())
    return jsonify(TagSchema(many=True, only=('id', 'name', 'slug')).dump(tags)), 200


@admin_api.route('/settings', methods=['GET'])
@admin_required
def get_settings():
    """
    Return settings as a flat key/value object.

    Query Parameters:
        category: Only return settings of this category
    """
    category = request.args.get('category') or None
    return jsonify(SettingsService().get_settings(category)), 200


@admin_api.route('/settings', methods=['POST'])
@admin_required
def save_settings():
    """
    Save settings of one category.

    Body: ``{"category": "...", "<key>": "<value>", ...}``
    """
    data = SettingsSchema().load(get_json_body())
    category = data.pop('category')
    saved = SettingsService().save_settings(category, data)
    return jsonify({'message': 'Settings saved successfully', 'saved': saved}), 200


@admin_api.route('/leads', methods=['GET'])
@login_required
def list_leads():
    """
    List leads with filtering, search, sorting and pagination.

    Query Parameters:
        page, limit, sortBy, sortOrder, filterFormName, filterStatus,
        filterStartDate, filterEndDate, searchQuery
    """
    query = LeadListQuerySchema().load(request.args)
    result = LeadService().list_leads(**query)
    return jsonify({
        'leads': LeadSchema(many=True).dump(result['leads']),
        'totalCount': result['total_count'],
        'currentPage': result['current_page'],
        'totalPages': result['total_pages'],
    }), 200


@admin_api.route('/leads/<int:lead_id>', methods=['PUT'])
@admin_required
def update_lead_status(lead_id: int):
    """Move a lead to another status."""
    data = LeadStatusSchema().load(get_json_body())
    lead = LeadService().update_status(lead_id, data['status'])
    return jsonify(LeadSchema().dump(lead)), 200
