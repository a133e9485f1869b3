# app/api/adoption_requests/schemas.py
from marshmallow import Schema, fields, validate, EXCLUDE

from app.api.pets.schemas import PetResponseSchema
from app.api.users.schemas import UserResponseSchema

class AdoptionRequestCreateSchema(Schema):
    """
    POST /api/adoption-requests
    The requesting user always comes from the token, never from the body.
    """
    class Meta:
        unknown = EXCLUDE

    pet_id = fields.Int(required=True, strict=True, validate=validate.Range(min=1))
    message = fields.Str(allow_none=True, validate=validate.Length(max=2000))

class AdoptionDecisionSchema(Schema):
    """
    PUT /api/adoption-requests/<id>
    Only the shape is checked here; the workflow decides which values are legal.
    """
    class Meta:
        unknown = EXCLUDE

    status = fields.Str(required=True, error_messages={"required": "Invalid status"})

class AdoptionRequestResponseSchema(Schema):
    id = fields.Int(required=True)
    pet_id = fields.Int(required=True)
    user_id = fields.Int(required=True)
    status = fields.Str(required=True)
    message = fields.Str(allow_none=True)
    created_at = fields.DateTime()
    decided_at = fields.DateTime(allow_none=True)

class AdoptionRequestWithPetSchema(AdoptionRequestResponseSchema):
    """GET /api/adoption-requests/user item."""
    pet = fields.Nested(PetResponseSchema, allow_none=True)

class AdoptionRequestWithUserSchema(AdoptionRequestResponseSchema):
    """GET /api/adoption-requests/pet/<petId> item; the user carries no credentials."""
    user = fields.Nested(UserResponseSchema, allow_none=True)
