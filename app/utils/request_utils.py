# app/utils/request_utils.py
from typing import Any

from flask import jsonify, request
from marshmallow import ValidationError

from app.core.exceptions import AppError, InvalidArgument, flatten_validation_messages


def parse_id(raw_id: str, label: str = "ID") -> int:
    """Path ids arrive as strings; anything but a positive integer is a 400."""
    try:
        entity_id = int(raw_id)
    except (TypeError, ValueError):
        raise InvalidArgument(f"Invalid {label}")
    if entity_id < 1:
        raise InvalidArgument(f"Invalid {label}")
    return entity_id


def json_body() -> Any:
    """Request JSON, or {} when the body is missing or malformed; schemas reject non-objects."""
    data = request.get_json(silent=True)
    return data if data is not None else {}


def validation_error_response(err: ValidationError, message: str = "Invalid request data"):
    body = {
        "error_code": "VALIDATION_ERROR",
        "message": message,
        "errors": flatten_validation_messages(err.messages),
    }
    return jsonify(body), 400


def app_error_response(err: AppError):
    return jsonify(err.to_dict()), err.status_code
