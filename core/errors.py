"""
Error taxonomy for the content core.

Every failure the content services raise is one of the exception classes in
this module. Each carries the HTTP status code, a stable machine-readable
error code and optional details so the route layer can translate it into a
response without inspecting messages.

Store-level exceptions (SQLAlchemy) never escape the core; core.store maps
them to ContentConflictError or StoreError.
"""

from typing import Any, Dict, Optional


class ContentError(Exception):
    """Base exception class for content core errors."""

    def __init__(
        self,
        message: str,
        status_code: int = 500,
        error_code: str = "content_error",
        details: Optional[Dict[str, Any]] = None
    ):
        self.message = message
        self.status_code = status_code
        self.error_code = error_code
        self.details = details or {}
        super().__init__(self.message)


class ContentValidationError(ContentError):
    """Exception raised for malformed or missing input fields."""

    def __init__(
        self,
        message: str = "Invalid input parameters",
        details: Optional[Dict[str, Any]] = None,
        error_code: str = "validation_error"
    ):
        super().__init__(
            message=message,
            status_code=400,
            error_code=error_code,
            details=details
        )


class ContentNotFoundError(ContentError):
    """Exception raised when a referenced entity does not exist."""

    def __init__(
        self,
        resource_type: str = "Resource",
        resource_id: Optional[Any] = None,
        error_code: str = "resource_not_found"
    ):
        message = f"{resource_type} not found"
        if resource_id is not None:
            message += f": {resource_id}"

        super().__init__(
            message=message,
            status_code=404,
            error_code=error_code,
            details={"resource_type": resource_type, "resource_id": resource_id}
        )


class ContentConflictError(ContentError):
    """Exception raised when a unique field constraint is violated."""

    def __init__(
        self,
        message: str = "A unique field constraint was violated",
        details: Optional[Dict[str, Any]] = None,
        error_code: str = "conflict"
    ):
        super().__init__(
            message=message,
            status_code=409,
            error_code=error_code,
            details=details
        )


class SlugConflictError(ContentConflictError):
    """Exception raised when an explicitly requested slug is already in use."""

    def __init__(self, slug: str, resource_type: str = "Resource"):
        super().__init__(
            message="Requested slug is already in use",
            details={"slug": slug, "resource_type": resource_type},
            error_code="slug_conflict"
        )


class SlugGenerationError(ContentConflictError):
    """
    Exception raised when no free slug was found within the attempt ceiling.

    This is a deliberate abort: a name whose slug keeps colliding is treated
    as pathological input rather than looped on.
    """

    def __init__(self, name: str, attempts: int, resource_type: str = "Resource"):
        super().__init__(
            message=f"Could not generate unique slug for {resource_type.lower()} \"{name}\"",
            details={"attempts": attempts, "resource_type": resource_type},
            error_code="slug_generation_failed"
        )


class StoreError(ContentError):
    """Exception raised when the entity store fails for a non-constraint reason."""

    def __init__(
        self,
        message: str = "Entity store operation failed",
        details: Optional[Dict[str, Any]] = None,
        error_code: str = "store_error"
    ):
        super().__init__(
            message=message,
            status_code=500,
            error_code=error_code,
            details=details
        )


__all__ = [
    'ContentError',
    'ContentValidationError',
    'ContentNotFoundError',
    'ContentConflictError',
    'SlugConflictError',
    'SlugGenerationError',
    'StoreError',
]
