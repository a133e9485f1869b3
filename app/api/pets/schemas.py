# app/api/pets/schemas.py
from marshmallow import Schema, fields, validate, EXCLUDE
from app.models.pet import PetStatus, PetGender, PetSize

class PetCreateSchema(Schema):
    """
    POST /api/pets request body.
    status is not accepted: new pets always start as 'available'.
    """
    class Meta:
        unknown = EXCLUDE

    name = fields.Str(required=True, validate=validate.Length(min=1, max=100))
    type = fields.Str(required=True, validate=validate.Length(min=1, max=50))
    breed = fields.Str(allow_none=True, validate=validate.Length(max=100))
    age = fields.Int(allow_none=True, strict=True, validate=validate.Range(min=0, max=50))
    gender = fields.Str(allow_none=True, validate=validate.OneOf([e.value for e in PetGender]))
    size = fields.Str(allow_none=True, validate=validate.OneOf([e.value for e in PetSize]))
    color = fields.Str(allow_none=True)
    weight = fields.Str(allow_none=True)
    description = fields.Str(allow_none=True, validate=validate.Length(max=5000))
    good_with_children = fields.Bool(allow_none=True)
    good_with_dogs = fields.Bool(allow_none=True)
    good_with_cats = fields.Bool(allow_none=True)
    shelter_id = fields.Int(allow_none=True, strict=True)
    images = fields.List(fields.Str(), load_default=list)

class PetUpdateSchema(PetCreateSchema):
    """
    PUT /api/pets/<id> partial update.
    Loaded with partial=True; status is silently dropped with other unknown fields.
    """

class PetStatusUpdateSchema(Schema):
    """PUT /api/pets/<id>/status (admin)."""
    class Meta:
        unknown = EXCLUDE

    status = fields.Str(required=True, validate=validate.OneOf([e.value for e in PetStatus]))

class PetQuerySchema(Schema):
    """GET /api/pets query string filters."""
    class Meta:
        unknown = EXCLUDE

    type = fields.Str()
    status = fields.Str(validate=validate.OneOf([e.value for e in PetStatus]))
    shelter_id = fields.Int()

class PetResponseSchema(Schema):
    id = fields.Int(required=True)
    name = fields.Str()
    type = fields.Str()
    breed = fields.Str(allow_none=True)
    age = fields.Int(allow_none=True)
    gender = fields.Str(allow_none=True)
    size = fields.Str(allow_none=True)
    color = fields.Str(allow_none=True)
    weight = fields.Str(allow_none=True)
    description = fields.Str(allow_none=True)
    status = fields.Str()
    good_with_children = fields.Bool(allow_none=True)
    good_with_dogs = fields.Bool(allow_none=True)
    good_with_cats = fields.Bool(allow_none=True)
    shelter_id = fields.Int(allow_none=True)
    created_at = fields.DateTime()
    images = fields.List(fields.Str())
