"""
Public lead capture route.

Contact forms on the marketing site post here. The client address is taken
from the first X-Forwarded-For hop when the site runs behind a proxy.
"""

import logging
from typing import Optional

from flask import Blueprint, jsonify, request

from api.admin.schemas import LeadSchema
from core.errors import ContentValidationError
from services import LeadService

# Initialize logger
logger = logging.getLogger(__name__)

public_api = Blueprint('public_api', __name__)


def get_client_ip() -> Optional[str]:
    """Return the submitting client's address."""
    forwarded = request.headers.get('X-Forwarded-For', '')
    if forwarded:
        first_hop = forwarded.split(',')[0].strip()
        if first_hop:
            return first_hop
    return request.remote_addr


@public_api.route('/leads', methods=['POST'])
def submit_lead():
    """
    Capture a lead from a public form.

    Request body:
        {
            "fullName": "Ada Lovelace",
            "email": "ada@example.com",
            "sourceFormName": "contact",
            "phone": "+1 555 0100 200",     (optional)
            "company": "Analytical Engines", (optional)
            "message": "...",                (optional)
            "submissionUrl": "https://..."   (optional)
        }

    Returns:
        201 with the stored lead
    """
    data = request.get_json(silent=True)
    if not isinstance(data, dict):
        raise ContentValidationError("Invalid request format, JSON object required")

    schema = LeadSchema()
    lead = LeadService().create_lead(schema.load(data), ip_address=get_client_ip())

    return jsonify({
        'message': 'Lead submitted successfully.',
        'lead': schema.dump(lead),
    }), 201
