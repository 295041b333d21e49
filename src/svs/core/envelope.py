"""Container envelope decoding."""

from __future__ import annotations

from typing import BinaryIO, Optional

from svs.core.constants import ENVELOPE_SIZE, ENVELOPE_STRUCT, MAGIC
from svs.core.errors import TruncatedError
from svs.core.models import Envelope, Timestamp
from svs.utils.logging import get_logger

logger = get_logger(__name__)


def read_exact(stream: BinaryIO, size: int, what: str) -> bytes:
    """Read exactly ``size`` bytes or raise TruncatedError."""
    data = stream.read(size)
    if len(data) != size:
        raise TruncatedError(what, size, len(data))
    return data


def read_envelope(stream: BinaryIO) -> Optional[Envelope]:
    """
    Decode the 16-byte envelope at the start of a capture file.

    Returns:
        The envelope, or None when the tag is not ``b"SVS "`` (the file is
        not an SVS capture and should be skipped without error).

    Raises:
        TruncatedError: If fewer than 16 bytes are available
    """
    raw = read_exact(stream, ENVELOPE_SIZE, "envelope")
    magic, sequence, ticks = ENVELOPE_STRUCT.unpack(raw)
    if magic != MAGIC:
        logger.debug("envelope_not_recognized", magic=magic)
        return None
    return Envelope(sequence=sequence, timestamp=Timestamp(ticks))


__all__ = ["read_envelope", "read_exact"]
