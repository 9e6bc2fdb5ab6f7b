# timestamp_service/client.py
import sys
import time
import logging
from typing import Optional, TextIO

from timestamp_service.store import TimestampStore

logger = logging.getLogger(__name__)


class BootstrapClient:
    """
    One-shot startup actor: writes the current time into the store, reads it
    back and prints it.
    """

    def __init__(self, store: TimestampStore, out: Optional[TextIO] = None):
        self.store = store
        self.out = out if out is not None else sys.stdout
        self._has_run = False

    @property
    def has_run(self) -> bool:
        return self._has_run

    def run(self, timestamp: Optional[int] = None) -> int:
        """
        Store a timestamp and print what the store returns.

        Args:
            timestamp: Unix seconds to store. Defaults to the current time.

        Returns:
            int: The value read back from the store.
        """
        if self._has_run:
            raise RuntimeError("BootstrapClient has already run")
        self._has_run = True

        if timestamp is None:
            timestamp = int(time.time())

        self.store.set(timestamp)
        stored_timestamp = self.store.get()

        print(stored_timestamp, file=self.out)
        logger.info(f"✅ Bootstrap client stored timestamp {stored_timestamp}")
        return stored_timestamp
