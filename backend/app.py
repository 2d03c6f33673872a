from flask import Flask
from flask_cors import CORS
from config import Config
from routes.recommendation_routes import recommendation_bp
from routes.soil_routes import soil_bp
from routes.region_routes import region_bp
from services.observability import setup_observability
from services.soil_service import SoilService
from tn_agri_ai.registry.profiles import region_names


def create_app(config_class=Config, soil_service=None):
    app = Flask(__name__)
    app.config.from_object(config_class)

    CORS(app)  # Allow the web frontend to call the API

    # ── Observability ──
    setup_observability(app)

    # ── Soil data collaborator ──
    app.extensions['soil_service'] = soil_service or SoilService.from_config(app.config)

    app.register_blueprint(recommendation_bp)
    app.register_blueprint(soil_bp)
    app.register_blueprint(region_bp)

    app.logger.info(f"Soil registry loaded: {len(region_names())} districts")

    @app.route('/')
    def index():
        return {"message": "Tamil Nadu crop advisory API is running", "version": "1.0"}

    return app


if __name__ == '__main__':
    app = create_app()
    app.run(host='0.0.0.0', port=5000)
