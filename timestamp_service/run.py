#!/usr/bin/env python3
"""
Process entry point for the timestamp service.

Starts the HTTP listener and the bootstrap client side by side, both sharing
one in-memory store, and waits for them.

Usage:
    python -m timestamp_service.run
"""
import sys
import logging
import threading

from werkzeug.serving import make_server

from timestamp_service.client import BootstrapClient
from timestamp_service.config import Config
from timestamp_service.factory import create_app
from timestamp_service.store import InMemoryTimestampStore

logger = logging.getLogger(__name__)


def main():
    """Main entry point for the timestamp service."""
    logging.basicConfig(level=Config.LOG_LEVEL, format=Config.LOG_FORMAT)

    store = InMemoryTimestampStore()
    app = create_app(store=store)
    client = BootstrapClient(store, out=sys.stdout)

    try:
        server = make_server(Config.HOST, Config.PORT, app, threaded=True)
    except (OSError, SystemExit) as e:
        # Werkzeug reports a failed bind by exiting on its own.
        logger.critical(f"🚨 Could not listen on port {Config.PORT}: {e!r}")
        sys.exit(1)

    listener = threading.Thread(target=server.serve_forever, name="HttpListener")
    bootstrap = threading.Thread(target=client.run, name="BootstrapClient")

    logger.info(f"http server listening on {Config.HOST}:{Config.PORT}")
    listener.start()
    bootstrap.start()

    try:
        bootstrap.join()
        listener.join()
    except KeyboardInterrupt:
        logger.info("🛑 Shutting down http server...")
        server.shutdown()
        listener.join()
    finally:
        server.server_close()


if __name__ == '__main__':
    main()
