# app/api/donations/routes.py
from flask import Blueprint, jsonify, current_app
from flask_jwt_extended import verify_jwt_in_request, get_current_user
from marshmallow import ValidationError

from app.core.exceptions import AppError
from app.core.security import login_required, role_required, STAFF_ROLES
from app.utils.request_utils import parse_id, json_body, validation_error_response, app_error_response
from .schemas import DonationCreateSchema, DonationResponseSchema

donations_bp = Blueprint('donations_bp', __name__)

@donations_bp.route('', methods=['POST'])
def create_donation():
    """Guests may donate; a logged-in donor is linked to the donation."""
    verify_jwt_in_request(optional=True)
    try:
        data = DonationCreateSchema().load(json_body())
        donation = current_app.services['donations'].create_donation(data, get_current_user())
        return jsonify(DonationResponseSchema().dump(donation.to_dict())), 201
    except ValidationError as err:
        return validation_error_response(err, "Invalid donation data")
    except AppError as e:
        return app_error_response(e)

@donations_bp.route('/user', methods=['GET'])
@login_required
def list_my_donations():
    donations = current_app.services['donations'].list_for_user(get_current_user().id)
    return jsonify(DonationResponseSchema(many=True).dump([d.to_dict() for d in donations])), 200

@donations_bp.route('/shelter/<string:shelter_id>', methods=['GET'])
@role_required(*STAFF_ROLES)
def list_shelter_donations(shelter_id: str):
    try:
        donations = current_app.services['donations'].list_for_shelter(parse_id(shelter_id, "shelter ID"))
        return jsonify(DonationResponseSchema(many=True).dump([d.to_dict() for d in donations])), 200
    except AppError as e:
        return app_error_response(e)
