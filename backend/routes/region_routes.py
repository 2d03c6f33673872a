from flask import Blueprint, request, jsonify
from pydantic import ValidationError

from routes.schemas import CoordinateQuery, validation_details
from tn_agri_ai.geo.resolver import resolve
from tn_agri_ai.registry.profiles import all_regions, get_region

region_bp = Blueprint('region_bp', __name__)


@region_bp.route('/regions', methods=['GET'])
def list_regions():
    regions = [
        {
            "district": p.name,
            "region": p.category.value,
            "soilType": p.soil_type,
            "averageRainfall": p.average_rainfall,
            "crops": [c.crop for c in p.crops],
        }
        for p in all_regions()
    ]
    return jsonify({"count": len(regions), "regions": regions}), 200


@region_bp.route('/regions/<name>', methods=['GET'])
def get_region_profile(name):
    profile = get_region(name)
    if profile is None:
        return jsonify({"error": f"Unknown district: {name}"}), 404
    return jsonify(profile.to_dict()), 200


@region_bp.route('/resolve', methods=['GET'])
def resolve_coordinate():
    try:
        query = CoordinateQuery(**request.args.to_dict())
    except ValidationError as e:
        return jsonify({"error": "Invalid coordinates", "details": validation_details(e)}), 400
    return jsonify(resolve(query.lat, query.lon).to_dict()), 200
