# app/api/pets/routes.py
import logging
from flask import Blueprint, request, jsonify, current_app, Response
from marshmallow import ValidationError

from app.core.exceptions import AppError
from app.core.security import role_required, STAFF_ROLES
from app.models.pet import PetStatus
from app.models.user import UserRole
from app.utils.request_utils import parse_id, json_body, validation_error_response, app_error_response
from .schemas import (
    PetCreateSchema,
    PetUpdateSchema,
    PetStatusUpdateSchema,
    PetQuerySchema,
    PetResponseSchema
)

pets_bp = Blueprint('pets_bp', __name__)

@pets_bp.route('', methods=['GET'])
def list_pets():
    """Catalog listing, optionally filtered by ?type=, ?status=, ?shelter_id=."""
    pet_service = current_app.services['pets']
    try:
        filters = PetQuerySchema().load(request.args.to_dict())
        pets = pet_service.list_pets(filters)
        return jsonify(PetResponseSchema(many=True).dump([p.to_dict() for p in pets])), 200
    except ValidationError as err:
        return validation_error_response(err, "Invalid filters")

@pets_bp.route('/<string:pet_id>', methods=['GET'])
def get_pet(pet_id: str):
    pet_service = current_app.services['pets']
    try:
        pet = pet_service.get_pet(parse_id(pet_id, "pet ID"))
        return jsonify(PetResponseSchema().dump(pet.to_dict())), 200
    except AppError as e:
        return app_error_response(e)

@pets_bp.route('', methods=['POST'])
@role_required(*STAFF_ROLES)
def create_pet():
    """[staff] Adds a pet to the catalog."""
    pet_service = current_app.services['pets']
    try:
        validated_data = PetCreateSchema().load(json_body())
        new_pet = pet_service.create_pet(validated_data)
        return jsonify(PetResponseSchema().dump(new_pet.to_dict())), 201
    except ValidationError as err:
        return validation_error_response(err, "Invalid pet data")
    except AppError as e:
        return app_error_response(e)
    except Exception as e:
        logging.error(f"Pet creation API error: {e}", exc_info=True)
        return jsonify({"error_code": "INTERNAL_SERVER_ERROR", "message": "Server error"}), 500

@pets_bp.route('/<string:pet_id>', methods=['PUT'])
@role_required(*STAFF_ROLES)
def update_pet(pet_id: str):
    """[staff] Partial profile update. A 'status' key in the body is ignored."""
    pet_service = current_app.services['pets']
    try:
        target_id = parse_id(pet_id, "pet ID")
        update_data = PetUpdateSchema().load(json_body(), partial=True)
        updated_pet = pet_service.update_pet(target_id, update_data)
        return jsonify(PetResponseSchema().dump(updated_pet.to_dict())), 200
    except ValidationError as err:
        return validation_error_response(err, "Invalid pet data")
    except AppError as e:
        return app_error_response(e)
    except Exception as e:
        logging.error(f"Update pet API error (pet_id: {pet_id}): {e}", exc_info=True)
        return jsonify({"error_code": "INTERNAL_SERVER_ERROR", "message": "Server error"}), 500

@pets_bp.route('/<string:pet_id>/status', methods=['PUT'])
@role_required(UserRole.ADMIN)
def set_pet_status(pet_id: str):
    """[admin] Direct status edit outside the adoption workflow."""
    pet_service = current_app.services['pets']
    try:
        target_id = parse_id(pet_id, "pet ID")
        data = PetStatusUpdateSchema().load(json_body())
        pet = pet_service.set_status(target_id, PetStatus(data['status']))
        return jsonify(PetResponseSchema().dump(pet.to_dict())), 200
    except ValidationError as err:
        return validation_error_response(err, "Invalid status")
    except AppError as e:
        return app_error_response(e)

@pets_bp.route('/<string:pet_id>', methods=['DELETE'])
@role_required(*STAFF_ROLES)
def delete_pet(pet_id: str):
    pet_service = current_app.services['pets']
    try:
        pet_service.delete_pet(parse_id(pet_id, "pet ID"))
        return Response(status=204)
    except AppError as e:
        return app_error_response(e)
