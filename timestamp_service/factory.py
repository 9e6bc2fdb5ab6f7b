# timestamp_service/factory.py
import logging
from typing import Any, Mapping, Optional

from flask import Flask, Response

from timestamp_service.config import Config
from timestamp_service.errors import register_error_handlers
from timestamp_service.routes import register_routes
from timestamp_service.store import InMemoryTimestampStore, TimestampStore

logger = logging.getLogger(__name__)


class TextResponse(Response):
    """Every response of this service is plain text."""
    default_mimetype = Config.CONTENT_TYPE


def create_app(store: Optional[TimestampStore] = None,
               config_overrides: Optional[Mapping[str, Any]] = None) -> Flask:
    """
    Create and configure the timestamp Flask application.

    Args:
        store: Timestamp store shared with the rest of the process. A fresh
            in-memory store is created when omitted.
        config_overrides: Extra config values applied after `Config`.

    Returns:
        Flask application instance
    """
    app = Flask(__name__, static_folder=None)
    app.response_class = TextResponse

    app.config.from_object(Config)
    if config_overrides:
        app.config.from_mapping(config_overrides)

    app.extensions["timestamp_store"] = store if store is not None else InMemoryTimestampStore()

    register_routes(app)
    register_error_handlers(app)

    logger.info("🚀 Flask app created successfully!")
    return app
