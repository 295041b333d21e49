"""
SVS data models and structures.
"""
from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timedelta

from svs.core.constants import GPS_EPOCH, INTRO_SEQUENCE, NANOS_PER_SECOND, UPI_SIZE


@dataclass(frozen=True)
class UPI:
    """
    User packet info: a fixed 32-byte identifier buffer.

    Trailing zero bytes are padding and never part of the text.
    """

    raw: bytes

    def __post_init__(self) -> None:
        if len(self.raw) != UPI_SIZE:
            raise ValueError(f"UPI must be {UPI_SIZE} bytes, got {len(self.raw)}")

    def text(self) -> str:
        """Decode the buffer up to its trailing run of zero bytes."""
        return self.raw.rstrip(b"\x00").decode("utf-8", errors="replace")

    def __str__(self) -> str:
        return self.text()


@dataclass(frozen=True)
class Timestamp:
    """
    Nanosecond tick count since the GPS epoch (1980-01-06T00:00:00Z).

    Attributes:
        ticks: Unsigned 64-bit tick count
    """

    ticks: int

    def _split(self) -> tuple[int, int]:
        return divmod(self.ticks, NANOS_PER_SECOND)

    def to_datetime(self) -> datetime:
        """Absolute UTC time (microsecond resolution)."""
        seconds, nanos = self._split()
        return GPS_EPOCH + timedelta(seconds=seconds, microseconds=nanos // 1000)

    def isoformat(self) -> str:
        """
        Precise rendering: 2006-01-02T15:04:05.123456789Z.

        The fraction keeps nanosecond precision, trailing zeros are trimmed and
        the fraction is omitted entirely when zero.
        """
        seconds, nanos = self._split()
        base = (GPS_EPOCH + timedelta(seconds=seconds)).strftime("%Y-%m-%dT%H:%M:%S")
        if nanos:
            base += "." + f"{nanos:09d}".rstrip("0")
        return base + "Z"

    def compact(self) -> str:
        """Filename-safe rendering: 20060102_150405."""
        seconds, _ = self._split()
        return (GPS_EPOCH + timedelta(seconds=seconds)).strftime("%Y%m%d_%H%M%S")

    def __str__(self) -> str:
        return self.isoformat()


@dataclass(frozen=True)
class Envelope:
    """
    The 16-byte prefix of every recognized capture file.

    Attributes:
        sequence: Relay sequence counter (1 marks the intro record)
        timestamp: Relay timestamp
    """

    sequence: int
    timestamp: Timestamp

    @property
    def is_intro(self) -> bool:
        return self.sequence == INTRO_SEQUENCE


@dataclass(frozen=True)
class PacketMetadata:
    """
    Packet metadata record following the envelope of a data record.
    """

    acquisition: Timestamp
    originator_seq: int
    auxiliary_time: int
    originator_id: int
    source_x_size: int
    source_y_size: int
    format: int
    fdrp: int
    roi_x_offset: int
    roi_x_size: int
    roi_y_offset: int
    roi_y_size: int
    scale_x_size: int
    scale_y_size: int
    scale_far: int
    upi: UPI

    def __repr__(self) -> str:
        return (
            f"PacketMetadata(originator_id={self.originator_id:#04x}, "
            f"seq={self.originator_seq}, "
            f"acquisition={self.acquisition.isoformat()}, "
            f"upi={self.upi.text()!r})"
        )


__all__ = ["UPI", "Timestamp", "Envelope", "PacketMetadata"]
