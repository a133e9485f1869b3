# app/core/exceptions.py
from typing import Any, Dict, List, Optional


class AppError(Exception):
    """Base class for errors that map directly onto an HTTP error response."""
    status_code = 500
    error_code = "INTERNAL_SERVER_ERROR"

    def __init__(self, message: str, errors: Optional[List[Dict[str, Any]]] = None):
        super().__init__(message)
        self.message = message
        self.errors = errors

    def to_dict(self) -> Dict[str, Any]:
        body = {"error_code": self.error_code, "message": self.message}
        if self.errors:
            body["errors"] = self.errors
        return body


class InvalidArgument(AppError):
    status_code = 400
    error_code = "INVALID_ARGUMENT"


class InvalidState(AppError):
    """The operation is not legal for the entity's current state."""
    status_code = 400
    error_code = "INVALID_STATE"


class Conflict(InvalidState):
    status_code = 409
    error_code = "CONFLICT"


class NotFound(AppError):
    status_code = 404
    error_code = "NOT_FOUND"


class Unauthorized(AppError):
    status_code = 401
    error_code = "UNAUTHORIZED"


class Forbidden(AppError):
    status_code = 403
    error_code = "FORBIDDEN"


def flatten_validation_messages(messages: Any, prefix: str = "") -> List[Dict[str, Any]]:
    """Flattens marshmallow's nested error dict into a [{"field", "message"}] list."""
    violations = []
    if isinstance(messages, dict):
        for key, value in messages.items():
            field_name = f"{prefix}.{key}" if prefix else str(key)
            violations.extend(flatten_validation_messages(value, field_name))
    elif isinstance(messages, list):
        for item in messages:
            if isinstance(item, (dict, list)):
                violations.extend(flatten_validation_messages(item, prefix))
            else:
                violations.append({"field": prefix or "_schema", "message": str(item)})
    else:
        violations.append({"field": prefix or "_schema", "message": str(messages)})
    return violations
