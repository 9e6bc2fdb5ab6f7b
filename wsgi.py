import logging
import threading

from timestamp_service.client import BootstrapClient
from timestamp_service.config import Config
from timestamp_service.factory import create_app
from timestamp_service.store import InMemoryTimestampStore

logging.basicConfig(level=Config.LOG_LEVEL, format=Config.LOG_FORMAT)
logger = logging.getLogger(__name__)

try:
    # One store per worker process, shared by the app and the bootstrap client.
    store = InMemoryTimestampStore()
    app = create_app(store=store)
    # Runs once per worker process, so a pre-fork server prints one line per worker.
    threading.Thread(target=BootstrapClient(store).run, name="BootstrapClient").start()
    logger.info("✅ WSGI application instance created.")

except Exception as e:
    logger.exception("🚨 CRITICAL FAILURE in wsgi.py: %s", str(e))
    raise
