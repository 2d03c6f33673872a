from flask import Blueprint, request, jsonify
from pydantic import ValidationError

from routes.schemas import CoordinateQuery, validation_details
from services.recommendation_service import RecommendationService
from tn_agri_ai.soil.regional_defaults import regional_defaults

soil_bp = Blueprint('soil_bp', __name__)


def _coordinates():
    return CoordinateQuery(**request.args.to_dict())


@soil_bp.route('/soil-data', methods=['GET'])
def get_soil_data():
    try:
        query = _coordinates()
    except ValidationError as e:
        return jsonify({"error": "Invalid coordinates", "details": validation_details(e)}), 400
    return jsonify(RecommendationService.get_soil_data(query.lat, query.lon)), 200


@soil_bp.route('/regional-defaults', methods=['GET'])
def get_regional_defaults():
    try:
        query = _coordinates()
    except ValidationError as e:
        return jsonify({"error": "Invalid coordinates", "details": validation_details(e)}), 400
    return jsonify(regional_defaults(query.lat, query.lon)), 200
