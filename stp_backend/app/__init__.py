"""Application factory and app-wide configuration."""

from typing import Optional

from flask import Flask
from flask_cors import CORS

from stp_backend.app.api.routes import api_bp
from stp_backend.config import Settings, get_settings


def create_app(app_settings: Optional[Settings] = None) -> Flask:
    """Build the Flask app instance."""
    app_settings = app_settings or get_settings()

    app = Flask(__name__)
    app.config["STP_SETTINGS"] = app_settings

    CORS(
        app,
        resources={r"/api/*": {"origins": app_settings.cors_origins}},
        supports_credentials=True,
    )

    app.register_blueprint(api_bp, url_prefix="/api")
    return app
