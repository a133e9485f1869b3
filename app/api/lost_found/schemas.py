# app/api/lost_found/schemas.py
from marshmallow import Schema, fields, validate, ValidationError, EXCLUDE

from app.models.lost_found_pet import ReportType, ReportStatus
from app.utils.datetime_utils import DateTimeUtils

REPORT_TYPES = [t.value for t in ReportType]
REPORT_STATUSES = [s.value for s in ReportStatus]

class SightingDateField(fields.Field):
    """Accepts free-form date text ("2024-01-15", "01/15/2024", ISO timestamps) and loads a date."""
    def _serialize(self, value, attr, obj, **kwargs):
        if value is None:
            return None
        return value.isoformat()

    def _deserialize(self, value, attr, data, **kwargs):
        try:
            return DateTimeUtils.validate_date_field(value, attr or "date")
        except ValueError as e:
            raise ValidationError(str(e)) from e

class LostFoundReportSchema(Schema):
    """
    POST /api/lost-found-pets and PUT /api/lost-found-pets/<id> (partial).
    reporter_id is never read from the body.
    """
    class Meta:
        unknown = EXCLUDE

    type = fields.Str(required=True, validate=validate.OneOf(REPORT_TYPES))
    pet_type = fields.Str(required=True, validate=validate.Length(min=1, max=50))
    name = fields.Str(allow_none=True, validate=validate.Length(max=100))
    breed = fields.Str(allow_none=True, validate=validate.Length(max=100))
    gender = fields.Str(allow_none=True)
    description = fields.Str(required=True, validate=validate.Length(min=1))
    location = fields.Str(required=True, validate=validate.Length(min=1))
    date = SightingDateField(required=True)
    status = fields.Str(validate=validate.OneOf(REPORT_STATUSES))
    contact_name = fields.Str(required=True, validate=validate.Length(min=1))
    contact_email = fields.Email(required=True)
    contact_phone = fields.Str(required=True, validate=validate.Length(min=1))
    images = fields.List(fields.Str(), load_default=list)

class LostFoundQuerySchema(Schema):
    class Meta:
        unknown = EXCLUDE

    type = fields.Str(validate=validate.OneOf(REPORT_TYPES))

class LostFoundResponseSchema(Schema):
    id = fields.Int(required=True)
    type = fields.Str()
    pet_type = fields.Str()
    name = fields.Str(allow_none=True)
    breed = fields.Str(allow_none=True)
    gender = fields.Str(allow_none=True)
    description = fields.Str()
    location = fields.Str()
    date = SightingDateField()
    status = fields.Str()
    reporter_id = fields.Int(allow_none=True)
    contact_name = fields.Str()
    contact_email = fields.Str()
    contact_phone = fields.Str()
    images = fields.List(fields.Str())
    created_at = fields.DateTime()
