# app/api/auth/routes.py

import logging
from flask import Blueprint, jsonify, current_app
from flask_jwt_extended import (
    create_access_token,
    create_refresh_token,
    jwt_required,
    get_jwt_identity,
    get_jwt,
    get_current_user
)
from marshmallow import ValidationError

from app.api.auth.schemas import RegisterSchema, LoginSchema
from app.api.users.schemas import UserResponseSchema
from app.core.exceptions import AppError
from app.core.security import login_required
from app.utils.request_utils import json_body, validation_error_response, app_error_response

auth_bp = Blueprint('auth_bp', __name__)


def _token_response(user, status_code):
    identity = str(user.id)
    return jsonify({
        "access_token": create_access_token(identity=identity),
        "refresh_token": create_refresh_token(identity=identity),
        "user": UserResponseSchema().dump(user.to_dict())
    }), status_code


@auth_bp.route('/register', methods=['POST'])
def register():
    """Creates an account and logs it in immediately."""
    auth_service = current_app.services['auth']
    try:
        validated_data = RegisterSchema().load(json_body())
        user = auth_service.register_user(validated_data)
        return _token_response(user, 201)
    except ValidationError as err:
        return validation_error_response(err, "Invalid user data")
    except AppError as e:
        return app_error_response(e)
    except Exception as e:
        logging.error(f"Registration failed: {e}", exc_info=True)
        return jsonify({"error_code": "INTERNAL_SERVER_ERROR", "message": "Server error"}), 500


@auth_bp.route('/login', methods=['POST'])
def login():
    auth_service = current_app.services['auth']
    try:
        credentials = LoginSchema().load(json_body())
        user = auth_service.authenticate(credentials['username'], credentials['password'])
        logging.info(f"User logged in: {user.username}")
        return _token_response(user, 200)
    except ValidationError as err:
        return validation_error_response(err, "Username and password are required")
    except AppError as e:
        return app_error_response(e)


# --- Token refresh ---
@auth_bp.route('/token/refresh', methods=['POST'])
@jwt_required(refresh=True)  # refresh tokens only
def refresh_token():
    """Issues a new access token for a valid refresh token."""
    new_access_token = create_access_token(identity=get_jwt_identity())
    return jsonify(access_token=new_access_token), 200


# --- Logout ---
@auth_bp.route('/logout', methods=['POST'])
@jwt_required(verify_type=False)
def logout():
    """Revokes the presented token (access or refresh)."""
    token = get_jwt()
    current_app.services['auth'].revoke_token(token['jti'], token['exp'])
    return jsonify({"message": "Logged out successfully"}), 200


@auth_bp.route('/me', methods=['GET'])
@login_required
def me():
    return jsonify(UserResponseSchema().dump(get_current_user().to_dict())), 200
