"""
Error handling for the content API.

This module translates the content core's exceptions into standardized JSON
responses so every route reports failures the same way:

    {"error": "Conflict", "error_code": "slug_conflict", "status_code": 409,
     "message": "Requested slug is already in use", "details": {...}}

Mapping:
- ContentError subclasses carry their own status code and error code
- marshmallow ValidationError -> 400 validation_error
- EncryptionConfigError -> 500 configuration_error (never retried)
- EncryptionError -> 500 encryption_error
- werkzeug HTTPException -> its own status code
- anything else -> 500 server_error with a trace id in the log
"""

import logging
import uuid
from typing import Any, Dict, Optional, Tuple

from flask import Flask, Response, jsonify, request
from marshmallow import ValidationError
from werkzeug.exceptions import HTTPException
from werkzeug.http import HTTP_STATUS_CODES

from core.errors import ContentError, ContentValidationError
from core.security import EncryptionConfigError, EncryptionError

# Initialize logger
logger = logging.getLogger(__name__)


class ConfigurationError(ContentError):
    """Server-side configuration problem surfaced to the client as a 500."""

    def __init__(self, message: str = "Server configuration error",
                 details: Optional[Dict[str, Any]] = None):
        super().__init__(
            message=message,
            status_code=500,
            error_code="configuration_error",
            details=details
        )


class AuthenticationError(ContentError):
    """Exception raised when no user is signed in."""

    def __init__(self, message: str = "Authentication required"):
        super().__init__(
            message=message,
            status_code=401,
            error_code="authentication_error"
        )


class PermissionDeniedError(ContentError):
    """Exception raised when the signed-in user lacks the required role."""

    def __init__(self, message: str = "Insufficient permissions",
                 required_role: Optional[str] = None):
        super().__init__(
            message=message,
            status_code=403,
            error_code="permission_denied",
            details={"required_role": required_role} if required_role else None
        )


def format_error_response(error: Exception, status_code: int = 500) -> Dict[str, Any]:
    """
    Format an error into a standardized response dictionary.

    Args:
        error: The exception to format
        status_code: HTTP status code used when error is not a ContentError

    Returns:
        Dictionary with formatted error details
    """
    if isinstance(error, ContentError):
        status_code = error.status_code
        error_code = error.error_code
        details = error.details
        message = error.message
    else:
        error_code = "server_error"
        message = str(error) if status_code < 500 else "An unexpected error occurred"
        details = {}

    response = {
        "error": HTTP_STATUS_CODES.get(status_code, "Unknown Error"),
        "error_code": error_code,
        "status_code": status_code,
        "message": message
    }

    # Include error details if available and not an internal server error
    if details and status_code < 500:
        response["details"] = details

    # For 500-level errors, include a reference ID for support
    if status_code >= 500:
        trace_id = str(uuid.uuid4())
        response["trace_id"] = trace_id
        logger.error(
            "API error [%s]: %s", trace_id, error,
            extra={
                'trace_id': trace_id,
                'error_type': error.__class__.__name__,
                'endpoint': request.endpoint,
                'path': request.path
            },
            exc_info=error
        )

    return response


def error_response(error: Exception, status_code: int = 500) -> Tuple[Response, int]:
    """Build the JSON response and status code for an error."""
    body = format_error_response(error, status_code)
    return jsonify(body), body["status_code"]


def register_error_handlers(app: Flask) -> None:
    """
    Register error handlers for the content API.

    Args:
        app: The Flask application to register handlers on
    """
    @app.errorhandler(ContentError)
    def handle_content_error(error):
        """Handle content core errors with a structured response."""
        if error.status_code < 500:
            logger.info("%s %s -> %s: %s", request.method, request.path,
                        error.status_code, error.message)
        return error_response(error)

    @app.errorhandler(ValidationError)
    def handle_validation_error(error):
        """Handle schema validation errors."""
        return error_response(
            ContentValidationError(message="Invalid input parameters", details=error.messages)
        )

    @app.errorhandler(EncryptionConfigError)
    def handle_encryption_config_error(error):
        """Missing or malformed encryption key."""
        logger.critical("Encryption is not configured: %s", error)
        return error_response(ConfigurationError(str(error)))

    @app.errorhandler(EncryptionError)
    def handle_encryption_error(error):
        """Encryption failures other than configuration."""
        return error_response(ContentError(str(error), error_code="encryption_error"))

    @app.errorhandler(HTTPException)
    def handle_http_exception(error):
        """Render werkzeug HTTP errors (404, 405, malformed JSON ...) as JSON."""
        status_code = error.code or 500
        response = {
            "error": HTTP_STATUS_CODES.get(status_code, "Unknown Error"),
            "error_code": error.name.lower().replace(' ', '_'),
            "status_code": status_code,
            "message": error.description,
        }
        return jsonify(response), status_code

    @app.errorhandler(Exception)
    def handle_unexpected_error(error):
        """Handle unexpected errors."""
        return error_response(error, 500)
