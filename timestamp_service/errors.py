# timestamp_service/errors.py
import http
import logging

from flask import Flask, current_app, request

logger = logging.getLogger(__name__)


def page_not_found(error):
    """Fallback for anything that is not a known route and method."""
    logger.info(f"No route for {request.method} {request.path}")
    return current_app.config["NOT_FOUND_MESSAGE"], http.HTTPStatus.NOT_FOUND


def register_error_handlers(app: Flask):
    """
    Route Flask's 404 and 405 to the same not-found response, so a wrong
    method on a known path looks exactly like an unknown path.
    """
    app.register_error_handler(404, page_not_found)
    app.register_error_handler(405, page_not_found)
