# timestamp_service/config.py


class Config:
    """
    Fixed configuration for the timestamp service.
    Nothing here is read from the environment; the listening port is a constant.
    """

    # --- Server ---
    HOST = "0.0.0.0"
    PORT = 8888

    # --- Logging ---
    LOG_LEVEL = "INFO"
    LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"

    # --- Responses ---
    CONTENT_TYPE = "text/plain"
    NOT_FOUND_MESSAGE = "404 - Page not found"
    INVALID_BODY_MESSAGE = "Invalid request body"
