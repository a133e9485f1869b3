# app/api/users/schemas.py
from marshmallow import Schema, fields, validate, EXCLUDE

from app.models.user import UserRole

class UserResponseSchema(Schema):
    """
    Account as seen by its owner (and by staff reviewing adoption requests).
    password_hash is deliberately not declared, so it is never dumped.
    """
    id = fields.Int(required=True)
    username = fields.Str(required=True)
    email = fields.Str(required=True)
    name = fields.Str(required=True)
    role = fields.Str(required=True)
    phone = fields.Str(allow_none=True)
    bio = fields.Str(allow_none=True)
    profile_picture = fields.Str(allow_none=True)
    created_at = fields.DateTime()

class UserPublicResponseSchema(Schema):
    """
    GET /api/users/<id>
    Public profile: contact details (email, phone) are left out.
    """
    id = fields.Int(required=True)
    username = fields.Str(required=True)
    name = fields.Str(required=True)
    role = fields.Str(required=True)
    bio = fields.Str(allow_none=True)
    profile_picture = fields.Str(allow_none=True)

class UserUpdateSchema(Schema):
    """PATCH /api/users/me (partial update; role and credentials excluded)."""
    class Meta:
        unknown = EXCLUDE

    name = fields.Str(validate=validate.Length(min=1, max=100))
    phone = fields.Str(allow_none=True)
    bio = fields.Str(allow_none=True, validate=validate.Length(max=1000))
    profile_picture = fields.Str(allow_none=True)

class RoleUpdateSchema(Schema):
    """PUT /api/users/<id>/role (admin only)."""
    role = fields.Str(required=True, validate=validate.OneOf([role.value for role in UserRole]))
