# timestamp_service/store.py
import threading
import logging
from abc import ABC, abstractmethod
from typing import Optional

logger = logging.getLogger(__name__)

INT64_MIN = -(2 ** 63)
INT64_MAX = 2 ** 63 - 1


class TimestampStore(ABC):
    """Holds exactly one Unix timestamp."""

    @abstractmethod
    def get(self) -> int:
        """Returns the stored timestamp, or 0 when nothing has been stored."""

    @abstractmethod
    def set(self, timestamp: int) -> None:
        """Replaces the stored timestamp unconditionally."""


class InMemoryTimestampStore(TimestampStore):
    """
    Single-slot, thread-safe timestamp store.

    Every get and set is one critical section, so readers never see a
    partial write. Concurrent writers race; the last one wins.
    """

    def __init__(self):
        self._lock = threading.Lock()
        self._timestamp: Optional[int] = None

    def get(self) -> int:
        with self._lock:
            timestamp = self._timestamp
        return 0 if timestamp is None else timestamp

    def set(self, timestamp: int) -> None:
        with self._lock:
            self._timestamp = timestamp
        logger.debug(f"Stored timestamp {timestamp}")
