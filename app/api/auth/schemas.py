#app/api/auth/schemas.py
from marshmallow import Schema, fields, validate, pre_load, EXCLUDE

from app.models.user import UserRole

# admin accounts are never self-registered
SELF_ASSIGNABLE_ROLES = [role.value for role in UserRole if role is not UserRole.ADMIN]

class RegisterSchema(Schema):
    """POST /api/auth/register request body."""
    class Meta:
        unknown = EXCLUDE

    username = fields.Str(required=True, validate=validate.Length(min=3, max=50))
    email = fields.Email(required=True)
    password = fields.Str(required=True, load_only=True, validate=validate.Length(min=6, max=128))
    name = fields.Str(required=True, validate=validate.Length(min=1, max=100))
    role = fields.Str(load_default=UserRole.ADOPTER.value, validate=validate.OneOf(SELF_ASSIGNABLE_ROLES))
    phone = fields.Str(allow_none=True)
    bio = fields.Str(allow_none=True, validate=validate.Length(max=1000))
    profile_picture = fields.Str(allow_none=True)

    @pre_load
    def normalize_email(self, data, **kwargs):
        # emails are unique case-insensitively
        if isinstance(data, dict) and isinstance(data.get("email"), str):
            data = {**data, "email": data["email"].strip().lower()}
        return data

class LoginSchema(Schema):
    """POST /api/auth/login request body."""
    class Meta:
        unknown = EXCLUDE

    username = fields.Str(required=True, error_messages={"required": "Username and password are required"})
    password = fields.Str(required=True, load_only=True, error_messages={"required": "Username and password are required"})
