"""Application factory and app-wide configuration."""

import logging
import sys
from typing import Optional

from flask import Flask
from flask_cors import CORS

from backend.app.api.routes import STORE_EXTENSION, api_bp
from backend.config import Settings, get_settings
from backend.domain.profile_store import ProfileStore


def configure_logging(level: str) -> None:
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        handlers=[logging.StreamHandler(sys.stdout)],
    )
    logging.getLogger("backend").setLevel(level.upper())


def create_app(settings: Optional[Settings] = None, store: Optional[ProfileStore] = None) -> Flask:
    """Build the Flask app instance."""
    settings = settings or get_settings()
    configure_logging(settings.log_level)

    app = Flask(__name__)
    app.extensions[STORE_EXTENSION] = store or ProfileStore(plan_annual_limit=settings.plan_annual_limit)

    CORS(
        app,
        resources={r"/api/*": {"origins": settings.cors_origins}},
        supports_credentials=True,
    )

    app.register_blueprint(api_bp, url_prefix="/api")
    return app
