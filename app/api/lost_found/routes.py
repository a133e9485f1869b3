# app/api/lost_found/routes.py
from flask import Blueprint, request, jsonify, current_app
from flask_jwt_extended import verify_jwt_in_request, get_current_user
from marshmallow import ValidationError

from app.core.exceptions import AppError
from app.core.security import login_required
from app.utils.request_utils import parse_id, json_body, validation_error_response, app_error_response
from .schemas import LostFoundReportSchema, LostFoundQuerySchema, LostFoundResponseSchema

lost_found_bp = Blueprint('lost_found_bp', __name__)

@lost_found_bp.route('', methods=['GET'])
def list_reports():
    """?type=lost|found"""
    try:
        query = LostFoundQuerySchema().load(request.args.to_dict())
        reports = current_app.services['lost_found'].list_reports(query.get('type'))
        return jsonify(LostFoundResponseSchema(many=True).dump([r.to_dict() for r in reports])), 200
    except ValidationError as err:
        return validation_error_response(err, "Invalid filters")

@lost_found_bp.route('/<string:report_id>', methods=['GET'])
def get_report(report_id: str):
    try:
        report = current_app.services['lost_found'].get_report(parse_id(report_id, "report ID"))
        return jsonify(LostFoundResponseSchema().dump(report.to_dict())), 200
    except AppError as e:
        return app_error_response(e)

@lost_found_bp.route('', methods=['POST'])
def create_report():
    """Open to everyone; a logged-in reporter is recorded, anonymous reports keep reporter_id null."""
    verify_jwt_in_request(optional=True)
    try:
        data = LostFoundReportSchema().load(json_body())
        report = current_app.services['lost_found'].create_report(data, get_current_user())
        return jsonify(LostFoundResponseSchema().dump(report.to_dict())), 201
    except ValidationError as err:
        return validation_error_response(err, "Invalid report data")

@lost_found_bp.route('/<string:report_id>', methods=['PUT'])
@login_required
def update_report(report_id: str):
    try:
        target_id = parse_id(report_id, "report ID")
        data = LostFoundReportSchema().load(json_body(), partial=True)
        report = current_app.services['lost_found'].update_report(target_id, data, get_current_user())
        return jsonify(LostFoundResponseSchema().dump(report.to_dict())), 200
    except ValidationError as err:
        return validation_error_response(err, "Invalid report data")
    except AppError as e:
        return app_error_response(e)
