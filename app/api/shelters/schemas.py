# app/api/shelters/schemas.py
from marshmallow import Schema, fields, validate, EXCLUDE

class ShelterSchema(Schema):
    """POST /api/shelters and PUT /api/shelters/<id> (partial) request body."""
    class Meta:
        unknown = EXCLUDE

    name = fields.Str(required=True, validate=validate.Length(min=1, max=200))
    address = fields.Str(required=True, validate=validate.Length(min=1))
    city = fields.Str(required=True, validate=validate.Length(min=1))
    state = fields.Str(required=True, validate=validate.Length(min=1))
    zip = fields.Str(required=True, validate=validate.Length(min=1, max=20))
    phone = fields.Str(required=True, validate=validate.Length(min=1))
    email = fields.Email(required=True)
    website = fields.URL(allow_none=True)
    description = fields.Str(allow_none=True)

class ShelterResponseSchema(Schema):
    id = fields.Int(required=True)
    name = fields.Str()
    address = fields.Str()
    city = fields.Str()
    state = fields.Str()
    zip = fields.Str()
    phone = fields.Str()
    email = fields.Str()
    website = fields.Str(allow_none=True)
    description = fields.Str(allow_none=True)
