from flask import Blueprint, request, jsonify
from pydantic import ValidationError

from routes.schemas import CropRecommendationRequest, validation_details
from services.recommendation_service import RecommendationService

recommendation_bp = Blueprint('recommendation_bp', __name__)


@recommendation_bp.route('/crop-recommendation', methods=['POST', 'GET'])
def get_crop_recommendation():
    if request.method == 'POST':
        data = request.get_json(silent=True)
        if not isinstance(data, dict):
            data = {}
    else:
        data = request.args.to_dict()

    try:
        params = CropRecommendationRequest(**data)
    except ValidationError as e:
        return jsonify({"error": "Invalid request", "details": validation_details(e)}), 400

    result = RecommendationService.get_recommendation(params)
    return jsonify(result), 200
