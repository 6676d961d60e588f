"""
Access decorators for the admin content API.

Authentication is handled by an external provider that stores the signed-in
user's id and role in the Flask session under ``user_id`` and ``user_role``.
These decorators only read those values; they never log anyone in.
"""

import functools
import logging
from typing import Callable, TypeVar, cast

from flask import g, request, session

from api.errors import AuthenticationError, PermissionDeniedError

# Initialize logger
logger = logging.getLogger(__name__)

# Type variable for decorator functions
F = TypeVar('F', bound=Callable)

ADMIN_ROLE = 'ADMIN'


def login_required(f: F) -> F:
    """
    Decorator to restrict access to signed-in users.

    Stores the user id in ``g.user_id`` for the duration of the request.

    Args:
        f: The route handler function to decorate

    Returns:
        Decorated function that enforces authentication
    """
    @functools.wraps(f)
    def decorated_function(*args, **kwargs):
        user_id = session.get('user_id')
        if not user_id:
            logger.info("Unauthenticated request to %s", request.path)
            raise AuthenticationError()

        g.user_id = user_id
        g.user_role = session.get('user_role')
        return f(*args, **kwargs)

    return cast(F, decorated_function)


def admin_required(f: F) -> F:
    """
    Decorator to restrict access to admin users only.

    Args:
        f: The route handler function to decorate

    Returns:
        Decorated function that enforces admin access
    """
    @functools.wraps(f)
    @login_required
    def decorated_function(*args, **kwargs):
        if g.user_role != ADMIN_ROLE:
            logger.warning("Non-admin user %s attempted to access %s %s",
                           g.user_id, request.method, request.path)
            raise PermissionDeniedError("Admin role required", required_role=ADMIN_ROLE)

        return f(*args, **kwargs)

    return cast(F, decorated_function)
