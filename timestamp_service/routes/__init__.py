# timestamp_service/routes/__init__.py
"""
Blueprint registration for the timestamp service.
"""
import logging
from flask import Flask

from .timestamp_routes import timestamp_bp

logger = logging.getLogger(__name__)


def register_routes(app: Flask):
    """Register all blueprints with the Flask app."""
    app.register_blueprint(timestamp_bp)

    logger.info("✅ All application blueprints registered.")
