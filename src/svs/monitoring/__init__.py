"""Monitoring helpers (Prometheus metrics)."""

from .metrics import (
    BYTES_READ,
    FILE_DURATION,
    FILES_IN_FLIGHT,
    FILES_PROCESSED,
    SAMPLE_ROWS,
)

__all__ = [
    "FILES_PROCESSED",
    "BYTES_READ",
    "SAMPLE_ROWS",
    "FILE_DURATION",
    "FILES_IN_FLIGHT",
]
