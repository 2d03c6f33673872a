"""
External soil data collaborator.

Queries ISRIC SoilGrids for the top two depth bands and falls back to
OpenLandMap (converted to the SoilGrids layer shape) when SoilGrids is down.
Raises SoilDataUnavailable when neither source answers, so callers can switch
to the offline estimate.
"""

import logging

import requests
from requests.adapters import HTTPAdapter
from urllib3.util.retry import Retry

from config import Config


logger = logging.getLogger(__name__)

SOIL_PROPERTIES = ['bdod', 'cec', 'clay', 'nitrogen', 'phh2o', 'sand', 'silt', 'soc']
SOIL_DEPTHS = ['0-5cm', '5-15cm']
SOIL_VALUES = ['mean']

# SoilGrids property -> (OpenLandMap layer prefix, scale, default per depth)
OPENLANDMAP_LAYERS = {
    'phh2o': ('sol_ph.h2o', None, (70, 70)),
    'clay': ('sol_clay.wfraction', 1000, (0.25, 0.25)),
    'sand': ('sol_sand.wfraction', 1000, (0.40, 0.40)),
    'silt': ('sol_silt.wfraction', 1000, (0.35, 0.35)),
    'soc': ('sol_organic.carbon', 10, (12, 10)),
    'nitrogen': ('sol_nitrogen.total', None, (110, 100)),
    'cec': ('sol_cec.clay', 10, (18, 19)),
    'bdod': ('sol_bulkdens.fineearth', 0.1, (1350, 1400)),
}

_OLM_DEPTHS = (('0-5cm', '0..5cm'), ('5-15cm', '5..15cm'))


class SoilDataUnavailable(Exception):
    """Neither SoilGrids nor OpenLandMap returned usable data."""


def build_session(max_retries, backoff):
    session = requests.Session()
    retries = Retry(
        total=max_retries,
        backoff_factor=backoff,
        status_forcelist=[429, 500, 502, 503, 504],
        allowed_methods=['GET'],
    )
    adapter = HTTPAdapter(max_retries=retries)
    session.mount('https://', adapter)
    session.mount('http://', adapter)
    session.headers.update({'Accept': 'application/json'})
    return session


def convert_openlandmap(data):
    """Map an OpenLandMap point query onto SoilGrids-style layers."""
    layers = []
    for name, (prefix, scale, defaults) in OPENLANDMAP_LAYERS.items():
        depths = []
        for (label, olm_label), default in zip(_OLM_DEPTHS, defaults):
            value = data.get(f'{prefix}_{olm_label}_mean')
            if isinstance(value, bool) or not isinstance(value, (int, float)) or not value:
                value = default
            if scale is not None:
                value = round(value * scale)
            depths.append({'label': label, 'values': {'mean': value}})
        layers.append({'name': name, 'depths': depths})
    return layers


class SoilService:

    def __init__(self, soilgrids_url=None, openlandmap_url=None, timeout=None,
                 session=None, max_retries=None, backoff=None):
        # Unset arguments are read from Config when the service is built
        self.soilgrids_url = soilgrids_url or Config.SOILGRIDS_URL
        self.openlandmap_url = openlandmap_url or Config.OPENLANDMAP_URL
        self.timeout = timeout if timeout is not None else Config.SOIL_API_TIMEOUT
        if session is None:
            session = build_session(
                max_retries if max_retries is not None else Config.SOIL_API_MAX_RETRIES,
                backoff if backoff is not None else Config.SOIL_API_BACKOFF,
            )
        self.session = session

    @classmethod
    def from_config(cls, config, session=None):
        """Build from a Flask config mapping."""
        return cls(
            soilgrids_url=config.get('SOILGRIDS_URL'),
            openlandmap_url=config.get('OPENLANDMAP_URL'),
            timeout=config.get('SOIL_API_TIMEOUT'),
            session=session,
            max_retries=config.get('SOIL_API_MAX_RETRIES'),
            backoff=config.get('SOIL_API_BACKOFF'),
        )

    def _get_json(self, url, params):
        # 5xx/429 are retried by the adapter; a 4xx surfaces here immediately
        response = self.session.get(url, params=params, timeout=self.timeout)
        response.raise_for_status()
        return response.json()

    def fetch_soilgrids(self, lat, lon):
        params = [('lat', lat), ('lon', lon)]
        params += [('property', p) for p in SOIL_PROPERTIES]
        params += [('depth', d) for d in SOIL_DEPTHS]
        params += [('value', v) for v in SOIL_VALUES]
        data = self._get_json(self.soilgrids_url, params)
        if not isinstance(data, dict):
            raise ValueError('SoilGrids response is not an object')
        layers = (data.get('properties') or {}).get('layers') or data.get('layers')
        if not layers:
            raise ValueError('SoilGrids response carried no layers')
        return layers

    def fetch_openlandmap(self, lat, lon):
        data = self._get_json(
            self.openlandmap_url, {'lon': lon, 'lat': lat, 'coll': 'sol'}
        )
        if not isinstance(data, dict):
            raise ValueError('OpenLandMap response is not an object')
        return convert_openlandmap(data)

    def get_soil_data(self, lat, lon):
        """
        Returns {'data': <layers>, 'source': 'soilgrids' | 'openlandmap'}.
        """
        try:
            layers = self.fetch_soilgrids(lat, lon)
            logger.info(f"SoilGrids data fetched for ({lat}, {lon})")
            return {'data': layers, 'source': 'soilgrids'}
        except (requests.RequestException, ValueError) as e:
            logger.warning(f"SoilGrids failed, trying OpenLandMap: {e}")

        try:
            layers = self.fetch_openlandmap(lat, lon)
            logger.info(f"OpenLandMap data fetched for ({lat}, {lon})")
            return {'data': layers, 'source': 'openlandmap'}
        except (requests.RequestException, ValueError) as e:
            logger.error(f"OpenLandMap also failed: {e}")
            raise SoilDataUnavailable('All soil APIs unavailable') from e
