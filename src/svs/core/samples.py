"""
Sample block decoding and CSV encoding.

A sample block is a column count N (u8), N little-endian u16 scale words and
then rows of N little-endian float32 values until the end of the stream.
"""
from __future__ import annotations

import csv
from dataclasses import dataclass
from pathlib import Path
from typing import BinaryIO

import numpy as np

from svs.core.constants import (
    COLUMN_COUNT_STRUCT,
    SAMPLE_DTYPE,
    SAMPLE_SIZE,
    SCALE_DTYPE,
    SCALE_SIZE,
)
from svs.core.errors import TruncatedError

TIME_COLUMN = "t"
COLUMN_LABEL = "g2(t, {scale})"


@dataclass
class SampleBlock:
    """
    Decoded sample block.

    Attributes:
        scales: One scale word per column
        rows: float32 array of shape (row_count, len(scales))
    """

    scales: list[int]
    rows: np.ndarray

    @property
    def columns(self) -> int:
        return len(self.scales)

    @property
    def row_count(self) -> int:
        return int(self.rows.shape[0])

    def header(self) -> list[str]:
        return [TIME_COLUMN] + [COLUMN_LABEL.format(scale=s) for s in self.scales]


def format_sample(value: np.float32) -> str:
    """
    Shortest positional decimal that round-trips as float32.

    Non-finite values are spelled ``NaN``, ``+Inf`` and ``-Inf``.
    """
    value = np.float32(value)
    if np.isnan(value):
        return "NaN"
    if np.isinf(value):
        return "+Inf" if value > 0 else "-Inf"
    return np.format_float_positional(value, unique=True, trim="-")


def decode_sample_block(data: bytes) -> SampleBlock:
    """
    Decode a complete sample block.

    Raises:
        TruncatedError: If the column count, a scale word or part of a row is missing
    """
    if len(data) < COLUMN_COUNT_STRUCT.size:
        raise TruncatedError("sample column count", COLUMN_COUNT_STRUCT.size, len(data))
    (columns,) = COLUMN_COUNT_STRUCT.unpack_from(data)

    offset = COLUMN_COUNT_STRUCT.size
    scale_bytes = columns * SCALE_SIZE
    if len(data) - offset < scale_bytes:
        raise TruncatedError("sample scales", scale_bytes, len(data) - offset)
    scales = np.frombuffer(data, dtype=SCALE_DTYPE, count=columns, offset=offset)
    offset += scale_bytes

    remaining = len(data) - offset
    row_size = columns * SAMPLE_SIZE
    if columns == 0:
        if remaining:
            raise TruncatedError("sample row", 0, remaining)
        return SampleBlock(scales=[], rows=np.empty((0, 0), dtype=SAMPLE_DTYPE))
    if remaining % row_size:
        raise TruncatedError("sample row", row_size, remaining % row_size)

    rows = np.frombuffer(
        data, dtype=SAMPLE_DTYPE, count=remaining // SAMPLE_SIZE, offset=offset
    )
    return SampleBlock(
        scales=[int(s) for s in scales],
        rows=rows.reshape(-1, columns),
    )


def write_samples_csv(block: SampleBlock, path: str | Path) -> int:
    """
    Write header and rows to ``path`` (overwrites).

    Returns:
        Number of data rows written
    """
    with open(path, "w", newline="", encoding="utf-8") as f:
        writer = csv.writer(f, lineterminator="\n")
        writer.writerow(block.header())
        for index, row in enumerate(block.rows):
            writer.writerow([str(index), *(format_sample(v) for v in row)])
    return block.row_count


def encode_samples(stream: BinaryIO, path: str | Path) -> int:
    """
    Decode the rest of ``stream`` as a sample block and write it as CSV.

    The block is decoded before ``path`` is created, so a truncated block
    leaves no CSV behind.
    """
    block = decode_sample_block(stream.read())
    return write_samples_csv(block, path)


__all__ = [
    "SampleBlock",
    "decode_sample_block",
    "encode_samples",
    "format_sample",
    "write_samples_csv",
]
