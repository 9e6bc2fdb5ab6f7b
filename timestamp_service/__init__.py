"""
Timestamp Service

A small HTTP service holding a single Unix timestamp in memory, plus a
bootstrap client that records the process start time into it.
"""
__version__ = "1.0.0"

from timestamp_service.factory import create_app  # noqa: E402

__all__ = ["create_app", "__version__"]
