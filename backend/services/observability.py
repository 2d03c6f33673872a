"""
Observability for the recommendation API.

- Structured JSON logs (plain text when JSON_LOGS is off)
- Per-endpoint request/latency stats
- Counts of where soil readings came from (soilgrids, openlandmap, payload,
  synthetic) and which districts recommendations resolved to
- /metrics serves all of the above
"""

import json
import logging
import threading
import time
import traceback
from collections import Counter

from flask import g, jsonify, request
from werkzeug.exceptions import HTTPException


SOIL_SOURCES = ('soilgrids', 'openlandmap', 'payload', 'synthetic')


class JsonFormatter(logging.Formatter):
    """One JSON object per log line; ``extra_data`` is merged in."""

    def format(self, record):
        entry = {
            'timestamp': self.formatTime(record),
            'level': record.levelname,
            'logger': record.name,
            'message': record.getMessage(),
        }
        entry.update(getattr(record, 'extra_data', {}))
        if record.exc_info and record.exc_info[0]:
            entry['exception'] = traceback.format_exception(*record.exc_info)
        return json.dumps(entry, default=str)


class ServiceMetrics:
    """In-memory counters, safe to update from concurrent requests."""

    def __init__(self):
        self._lock = threading.Lock()
        self.reset()

    def reset(self):
        with self._lock:
            self._endpoints = {}
            self._soil_sources = Counter({source: 0 for source in SOIL_SOURCES})
            self._districts = Counter()

    def record_request(self, endpoint, latency_ms, is_error=False):
        with self._lock:
            stats = self._endpoints.setdefault(
                endpoint, {'requests': 0, 'errors': 0, 'latency_sum': 0.0, 'latency_max': 0.0}
            )
            stats['requests'] += 1
            stats['latency_sum'] += latency_ms
            stats['latency_max'] = max(stats['latency_max'], latency_ms)
            if is_error:
                stats['errors'] += 1

    def record_soil_source(self, source):
        with self._lock:
            self._soil_sources[source] += 1

    def record_district(self, district):
        with self._lock:
            self._districts[district] += 1

    def soil_sources(self):
        with self._lock:
            return dict(self._soil_sources)

    def districts(self):
        with self._lock:
            return dict(self._districts.most_common())

    def endpoints(self):
        with self._lock:
            return {
                endpoint: {
                    'requests': s['requests'],
                    'errors': s['errors'],
                    'avg_latency_ms': round(s['latency_sum'] / s['requests'], 2),
                    'max_latency_ms': round(s['latency_max'], 2),
                }
                for endpoint, s in self._endpoints.items()
            }

    def totals(self):
        with self._lock:
            requests_ = sum(s['requests'] for s in self._endpoints.values())
            errors = sum(s['errors'] for s in self._endpoints.values())
        return {
            'total_requests': requests_,
            'total_errors': errors,
            'error_rate_pct': round(errors / requests_ * 100, 1) if requests_ else 0,
        }

    def snapshot(self):
        return {
            'totals': self.totals(),
            'per_endpoint': self.endpoints(),
            'soil_sources': self.soil_sources(),
            'districts': self.districts(),
        }


metrics = ServiceMetrics()


def setup_logging(json_logs=True, level=logging.INFO):
    handler = logging.StreamHandler()
    if json_logs:
        handler.setFormatter(JsonFormatter())
    else:
        handler.setFormatter(logging.Formatter('%(asctime)s %(levelname)s %(name)s: %(message)s'))
    root_logger = logging.getLogger()
    root_logger.handlers = [handler]
    root_logger.setLevel(level)
    return handler


def setup_observability(app):
    """Wire logging, request timing, JSON errors and /metrics into the app."""
    setup_logging(app.config.get('JSON_LOGS', True))
    # app.logger propagates to the root handler
    app.logger.handlers = []
    app.logger.setLevel(logging.INFO)

    @app.before_request
    def start_timer():
        g.start_time = time.perf_counter()

    @app.after_request
    def log_request(response):
        latency_ms = (time.perf_counter() - g.get('start_time', time.perf_counter())) * 1000
        endpoint = request.endpoint or request.path
        metrics.record_request(endpoint, latency_ms, response.status_code >= 400)

        extra = {
            'type': 'request',
            'method': request.method,
            'path': request.path,
            'status': response.status_code,
            'latency_ms': round(latency_ms, 2),
        }
        # Set by the recommendation service for soil-backed responses
        if 'soil_source' in g:
            extra['soil_source'] = g.soil_source
        if 'district' in g:
            extra['district'] = g.district
        app.logger.info(
            f"{request.method} {request.path} -> {response.status_code} ({latency_ms:.0f}ms)",
            extra={'extra_data': extra},
        )
        return response

    @app.errorhandler(Exception)
    def handle_exception(e):
        if isinstance(e, HTTPException):
            return jsonify({'error': e.name, 'message': e.description}), e.code
        app.logger.error(
            f"Unhandled exception: {e}",
            exc_info=True,
            extra={'extra_data': {
                'type': 'error',
                'error_class': e.__class__.__name__,
                'path': request.path,
                'method': request.method,
            }},
        )
        return jsonify({'error': 'Internal server error', 'message': str(e)}), 500

    @app.route('/metrics')
    def metrics_endpoint():
        return jsonify(metrics.snapshot())

    return app
