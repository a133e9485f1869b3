# app/api/shelters/routes.py
from flask import Blueprint, jsonify, current_app
from marshmallow import ValidationError

from app.api.pets.schemas import PetResponseSchema
from app.core.exceptions import AppError
from app.core.security import role_required
from app.models.user import UserRole
from app.utils.request_utils import parse_id, json_body, validation_error_response, app_error_response
from .schemas import ShelterSchema, ShelterResponseSchema

shelters_bp = Blueprint('shelters_bp', __name__)

@shelters_bp.route('', methods=['GET'])
def list_shelters():
    shelters = current_app.services['shelters'].list_shelters()
    return jsonify(ShelterResponseSchema(many=True).dump([s.to_dict() for s in shelters])), 200

@shelters_bp.route('/<string:shelter_id>', methods=['GET'])
def get_shelter(shelter_id: str):
    try:
        shelter = current_app.services['shelters'].get_shelter(parse_id(shelter_id, "shelter ID"))
        return jsonify(ShelterResponseSchema().dump(shelter.to_dict())), 200
    except AppError as e:
        return app_error_response(e)

@shelters_bp.route('/<string:shelter_id>/pets', methods=['GET'])
def list_shelter_pets(shelter_id: str):
    """Pets housed by one shelter, newest first."""
    try:
        shelter = current_app.services['shelters'].get_shelter(parse_id(shelter_id, "shelter ID"))
        pets = current_app.services['pets'].list_pets({'shelter_id': shelter.id})
        return jsonify(PetResponseSchema(many=True).dump([p.to_dict() for p in pets])), 200
    except AppError as e:
        return app_error_response(e)

@shelters_bp.route('', methods=['POST'])
@role_required(UserRole.ADMIN)
def create_shelter():
    """[admin] Registers a shelter."""
    try:
        data = ShelterSchema().load(json_body())
        shelter = current_app.services['shelters'].create_shelter(data)
        return jsonify(ShelterResponseSchema().dump(shelter.to_dict())), 201
    except ValidationError as err:
        return validation_error_response(err, "Invalid shelter data")

@shelters_bp.route('/<string:shelter_id>', methods=['PUT'])
@role_required(UserRole.ADMIN)
def update_shelter(shelter_id: str):
    try:
        target_id = parse_id(shelter_id, "shelter ID")
        data = ShelterSchema().load(json_body(), partial=True)
        shelter = current_app.services['shelters'].update_shelter(target_id, data)
        return jsonify(ShelterResponseSchema().dump(shelter.to_dict())), 200
    except ValidationError as err:
        return validation_error_response(err, "Invalid shelter data")
    except AppError as e:
        return app_error_response(e)
