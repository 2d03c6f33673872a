import os
from dotenv import load_dotenv

# Load .env file
load_dotenv()


def _env_bool(name, default=False):
    value = os.environ.get(name)
    if value is None:
        return default
    return value.strip().lower() in ('1', 'true', 'yes', 'on')


class Config:
    # Soil data sources (ISRIC SoilGrids, OpenLandMap as backup)
    SOILGRIDS_URL = os.environ.get(
        'SOILGRIDS_URL', 'https://rest.isric.org/soilgrids/v2.0/properties/query'
    )
    OPENLANDMAP_URL = os.environ.get(
        'OPENLANDMAP_URL', 'https://landgisapi.opengeohub.org/query/point'
    )
    SOIL_API_TIMEOUT = float(os.environ.get('SOIL_API_TIMEOUT', 10))
    SOIL_API_MAX_RETRIES = int(os.environ.get('SOIL_API_MAX_RETRIES', 3))
    SOIL_API_BACKOFF = float(os.environ.get('SOIL_API_BACKOFF', 1.0))
    # Set to false to always use the offline soil estimate
    SOIL_FETCH_ENABLED = _env_bool('SOIL_FETCH_ENABLED', True)

    RECOMMENDATION_TOP_N = int(os.environ.get('RECOMMENDATION_TOP_N', 5))

    # Structured JSON logs (set to false for plain text during development)
    JSON_LOGS = _env_bool('JSON_LOGS', True)


class TestingConfig(Config):
    TESTING = True
    SOIL_FETCH_ENABLED = False
    SOIL_API_MAX_RETRIES = 0
    JSON_LOGS = False
