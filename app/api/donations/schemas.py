# app/api/donations/schemas.py
from marshmallow import Schema, fields, validate, EXCLUDE

class DonationCreateSchema(Schema):
    """amount is in cents. The donor comes from the token when one is sent."""
    class Meta:
        unknown = EXCLUDE

    amount = fields.Int(required=True, strict=True, validate=validate.Range(min=1))
    shelter_id = fields.Int(allow_none=True, strict=True, validate=validate.Range(min=1))
    message = fields.Str(allow_none=True, validate=validate.Length(max=1000))

class DonationResponseSchema(Schema):
    id = fields.Int(required=True)
    amount = fields.Int()
    shelter_id = fields.Int(allow_none=True)
    user_id = fields.Int(allow_none=True)
    message = fields.Str(allow_none=True)
    created_at = fields.DateTime()
