# timestamp_service/routes/timestamp_routes.py
import http
import re
import logging

from flask import Blueprint, current_app, request
from werkzeug.exceptions import HTTPException

from timestamp_service.store import INT64_MIN, INT64_MAX, TimestampStore

logger = logging.getLogger(__name__)

timestamp_bp = Blueprint('timestamp_bp', __name__)

# Strict base-10 grammar: optional sign, digits only.
_DECIMAL_RE = re.compile(rb"[+-]?[0-9]+")


class InvalidTimestamp(ValueError):
    """Raised when a request body is not a base-10 int64."""


def parse_timestamp(raw: bytes) -> int:
    """
    Parse a request body as a signed 64-bit base-10 integer.

    Args:
        raw: The request body bytes.

    Returns:
        int: The parsed timestamp.

    Raises:
        InvalidTimestamp: If the body is not a decimal integer or overflows int64.
    """
    if not _DECIMAL_RE.fullmatch(raw):
        raise InvalidTimestamp(f"not a decimal integer: {raw[:32]!r}")
    value = int(raw)
    if not INT64_MIN <= value <= INT64_MAX:
        raise InvalidTimestamp(f"out of int64 range: {raw[:32]!r}")
    return value


def _get_store() -> TimestampStore:
    return current_app.extensions["timestamp_store"]


def _has_body() -> bool:
    """True when the client sent a body, even an empty one."""
    if request.content_length is not None:
        return True
    if request.environ.get("wsgi.input_terminated"):
        return True
    return "chunked" in request.headers.get("Transfer-Encoding", "").lower()


def _invalid_body():
    message = current_app.config["INVALID_BODY_MESSAGE"]
    return message, http.HTTPStatus.BAD_REQUEST, {"X-Content-Type-Options": "nosniff"}


@timestamp_bp.route('/timestamp', methods=['GET'], provide_automatic_options=False)
def get_timestamp():
    """Returns the stored timestamp. An unset store answers 404 but still writes 0."""
    timestamp = _get_store().get()
    status_code = http.HTTPStatus.NOT_FOUND if timestamp == 0 else http.HTTPStatus.OK
    return str(timestamp), status_code


@timestamp_bp.route('/timestamp', methods=['POST'], provide_automatic_options=False)
def store_timestamp():
    """Stores the decimal timestamp sent as the request body."""
    # A request without any body is left alone and gets the default 200.
    if not _has_body():
        return "", http.HTTPStatus.OK

    try:
        raw = request.get_data(cache=False)
    except (HTTPException, OSError) as e:
        logger.warning(f"Could not read request body: {e}")
        return _invalid_body()

    try:
        timestamp = parse_timestamp(raw)
    except InvalidTimestamp as e:
        logger.info(f"Rejected timestamp body: {e}")
        return _invalid_body()

    _get_store().set(timestamp)
    return "", http.HTTPStatus.ACCEPTED
