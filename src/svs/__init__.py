"""SVS capture extractor - decode hadock relay captures into CSV and XML."""

__version__ = "0.1.0"

from .config import ExtractConfig  # noqa: E402
from .core import (  # noqa: E402
    UPI,
    Envelope,
    PacketMetadata,
    Timestamp,
    read_envelope,
    read_metadata,
)
from .pipeline import BoundedRunner, process_file  # noqa: E402

__all__ = [
    "ExtractConfig",
    "BoundedRunner",
    "process_file",
    "read_envelope",
    "read_metadata",
    "UPI",
    "Timestamp",
    "Envelope",
    "PacketMetadata",
]
