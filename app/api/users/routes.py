# app/api/users/routes.py
import logging
from flask import Blueprint, jsonify, current_app
from flask_jwt_extended import get_current_user
from marshmallow import ValidationError

from app.api.users.schemas import UserPublicResponseSchema, UserResponseSchema, UserUpdateSchema, RoleUpdateSchema
from app.core.exceptions import AppError
from app.core.security import login_required, role_required
from app.models.user import UserRole
from app.utils.request_utils import parse_id, json_body, validation_error_response, app_error_response

users_bp = Blueprint('users_bp', __name__)

@users_bp.route('/<string:user_id>', methods=['GET'])
def get_user_profile(user_id: str):
    """Public profile of any user."""
    user_service = current_app.services['users']
    try:
        user = user_service.get_user(parse_id(user_id, "user ID"))
        return jsonify(UserPublicResponseSchema().dump(user.to_dict())), 200
    except AppError as e:
        return app_error_response(e)


@users_bp.route('/me', methods=['PATCH'])
@login_required
def update_my_profile():
    user_service = current_app.services['users']
    user_id = get_current_user().id
    try:
        update_data = UserUpdateSchema().load(json_body())
        updated_user = user_service.update_profile(user_id, update_data)
        return jsonify(UserResponseSchema().dump(updated_user.to_dict())), 200
    except ValidationError as err:
        return validation_error_response(err, "Invalid profile data")
    except AppError as e:
        return app_error_response(e)
    except Exception as e:
        logging.error(f"Profile update failed (user_id: {user_id}): {e}", exc_info=True)
        return jsonify({"error_code": "INTERNAL_SERVER_ERROR", "message": "Server error"}), 500


@users_bp.route('/<string:user_id>/role', methods=['PUT'])
@role_required(UserRole.ADMIN)
def change_user_role(user_id: str):
    """[admin] Assigns a role to a user."""
    user_service = current_app.services['users']
    try:
        target_id = parse_id(user_id, "user ID")
        data = RoleUpdateSchema().load(json_body())
        updated_user = user_service.change_role(target_id, UserRole(data['role']))
        return jsonify(UserResponseSchema().dump(updated_user.to_dict())), 200
    except ValidationError as err:
        return validation_error_response(err, "Invalid role")
    except AppError as e:
        return app_error_response(e)
