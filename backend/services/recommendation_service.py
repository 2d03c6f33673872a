import logging

from flask import current_app, g

from services.observability import metrics
from services.soil_service import SoilDataUnavailable, SoilService
from tn_agri_ai.geo.resolver import resolve
from tn_agri_ai.pipeline import RecommendationRequest, recommend
from tn_agri_ai.registry.soil_types import identify_soil_type
from tn_agri_ai.soil.payload import encode_payload, soil_table
from tn_agri_ai.soil.provider import provide_reading


logger = logging.getLogger(__name__)


def _record_soil(source, district):
    metrics.record_soil_source(source)
    metrics.record_district(district)
    g.soil_source = source
    g.district = district


def _soil_service():
    service = current_app.extensions.get('soil_service')
    if service is None:
        service = SoilService.from_config(current_app.config)
        current_app.extensions['soil_service'] = service
    return service


class RecommendationService:

    @staticmethod
    def fetch_soil(lat, lon):
        """
        Live soil layers for a coordinate, or (None, 'synthetic') when fetching
        is disabled or every source is down.
        """
        if not current_app.config.get('SOIL_FETCH_ENABLED', True):
            return None, 'synthetic'
        try:
            result = _soil_service().get_soil_data(lat, lon)
        except SoilDataUnavailable as e:
            logger.warning(f"Soil APIs unavailable for ({lat}, {lon}), using estimate: {e}")
            return None, 'synthetic'
        return result['data'], result['source']

    @staticmethod
    def get_recommendation(params):
        payload = params.soil_data
        source = 'payload' if payload is not None else 'synthetic'
        if payload is None and params.fetch_soil:
            payload, source = RecommendationService.fetch_soil(params.latitude, params.longitude)

        result = recommend(
            RecommendationRequest(
                latitude=params.latitude,
                longitude=params.longitude,
                primary_goal=params.primary_goal,
                risk_tolerance=params.risk_tolerance,
                soil_payload=payload,
            ),
            top_n=current_app.config.get('RECOMMENDATION_TOP_N', 5),
        )
        _record_soil(source, result.district)
        response = result.to_dict()
        response['dataSource'] = source
        return response

    @staticmethod
    def get_soil_data(lat, lon):
        """
        Soil layers plus the display table. Without live data the offline
        estimate is encoded into the same layer shape.
        """
        payload, source = RecommendationService.fetch_soil(lat, lon)
        region = resolve(lat, lon).region
        reading = provide_reading(region, lat, lon, payload)
        if payload is None:
            payload = encode_payload(reading)
        _record_soil(source, region.name)
        soil_type = identify_soil_type(reading.ph, reading.clay, reading.sand)
        return {
            'district': region.name,
            'source': source,
            'data': payload,
            'table': soil_table(payload),
            'summary': reading.summary(),
            'soilType': soil_type.to_dict(),
        }
