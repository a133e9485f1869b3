# app/api/adoption_requests/routes.py
from flask import Blueprint, jsonify, current_app
from flask_jwt_extended import get_current_user
from marshmallow import ValidationError

from app.core.exceptions import AppError
from app.core.security import login_required, role_required, STAFF_ROLES
from app.utils.request_utils import parse_id, json_body, validation_error_response, app_error_response
from .schemas import (
    AdoptionRequestCreateSchema,
    AdoptionDecisionSchema,
    AdoptionRequestResponseSchema,
    AdoptionRequestWithPetSchema,
    AdoptionRequestWithUserSchema
)

adoption_requests_bp = Blueprint('adoption_requests_bp', __name__)

@adoption_requests_bp.route('', methods=['POST'])
@login_required
def submit_adoption_request():
    """Applies to adopt an available pet; the pet becomes pending."""
    adoption_service = current_app.services['adoption_requests']
    try:
        data = AdoptionRequestCreateSchema().load(json_body())
        adoption_request = adoption_service.submit_request(
            data['pet_id'], get_current_user().id, data.get('message')
        )
        return jsonify(AdoptionRequestResponseSchema().dump(adoption_request.to_dict())), 201
    except ValidationError as err:
        return validation_error_response(err, "Invalid adoption request data")
    except AppError as e:
        return app_error_response(e)

@adoption_requests_bp.route('/<string:request_id>', methods=['PUT'])
@role_required(*STAFF_ROLES)
def decide_adoption_request(request_id: str):
    """[staff] {"status": "approved" | "rejected"}"""
    adoption_service = current_app.services['adoption_requests']
    try:
        target_id = parse_id(request_id, "adoption request ID")
        data = AdoptionDecisionSchema().load(json_body())
        decided = adoption_service.decide_request(target_id, data['status'])
        return jsonify(AdoptionRequestResponseSchema().dump(decided.to_dict())), 200
    except ValidationError as err:
        return validation_error_response(err, "Invalid status")
    except AppError as e:
        return app_error_response(e)

@adoption_requests_bp.route('/user', methods=['GET'])
@login_required
def list_my_adoption_requests():
    results = current_app.services['adoption_requests'].list_for_user(get_current_user().id)
    items = [
        {**adoption_request.to_dict(), 'pet': pet.to_dict() if pet else None}
        for adoption_request, pet in results
    ]
    return jsonify(AdoptionRequestWithPetSchema(many=True).dump(items)), 200

@adoption_requests_bp.route('/pet/<string:pet_id>', methods=['GET'])
@role_required(*STAFF_ROLES)
def list_pet_adoption_requests(pet_id: str):
    """[staff] Every request for one pet, with the applicant's public profile."""
    try:
        target_id = parse_id(pet_id, "pet ID")
        results = current_app.services['adoption_requests'].list_for_pet(target_id)
        items = [
            {**adoption_request.to_dict(), 'user': user.to_dict() if user else None}
            for adoption_request, user in results
        ]
        return jsonify(AdoptionRequestWithUserSchema(many=True).dump(items)), 200
    except AppError as e:
        return app_error_response(e)
