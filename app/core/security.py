# app/core/security.py
from functools import wraps
from typing import Iterable, Optional

from flask_jwt_extended import verify_jwt_in_request, get_current_user
from werkzeug.security import generate_password_hash, check_password_hash

from app.core.exceptions import Unauthorized, Forbidden
from app.models.user import User, UserRole

STAFF_ROLES = (UserRole.SHELTER_STAFF, UserRole.ADMIN)


def hash_password(password: str) -> str:
    return generate_password_hash(password)


def verify_password(password_hash: str, password: str) -> bool:
    return check_password_hash(password_hash, password)


def check_access(user: Optional[User], roles: Optional[Iterable[UserRole]] = None) -> None:
    """
    Access gate: no user -> Unauthorized, user outside `roles` -> Forbidden.
    roles=None only requires an authenticated user. Has no side effects.
    """
    if user is None:
        raise Unauthorized("Authentication required")
    if roles is not None and not user.has_role(*roles):
        raise Forbidden("Insufficient permissions")


def role_required(*roles: UserRole):
    """
    Route decorator declaring the capability a route needs.

    @role_required()                          -> any authenticated user
    @role_required(UserRole.ADMIN, ...)       -> authenticated and one of the roles
    """
    required_roles = roles or None

    def decorator(f):
        @wraps(f)
        def decorated_function(*args, **kwargs):
            verify_jwt_in_request(optional=True)
            check_access(get_current_user(), required_roles)
            return f(*args, **kwargs)
        return decorated_function
    return decorator


login_required = role_required()
