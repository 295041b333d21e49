"""
SVS capture format constants, magic tag, and struct layouts.
"""
from __future__ import annotations

import struct
from datetime import datetime, timezone

# Magic tag (trailing space is part of the tag)
MAGIC = b"SVS "

# Sequence value reserved for the introductory record
INTRO_SEQUENCE = 1

# Suffix of files rejected upstream by the relay
BAD_SUFFIX = ".bad"

# Struct formats
# Envelope: tag(4) + sequence(4) + timestamp(8) = 16 bytes, big-endian
ENVELOPE_STRUCT = struct.Struct(">4sIQ")

# Packet metadata, little-endian, no padding:
# acquisition(8) + originator_seq(4) + auxiliary(8) + originator_id(1)
# + source_x(2) + source_y(2) + format(1) + fdrp(2)
# + roi_x_offset, roi_x_size, roi_y_offset, roi_y_size, scale_x, scale_y (6 x 2)
# + scale_far(1) + upi(32) = 73 bytes
METADATA_STRUCT = struct.Struct("<QIQBHHBHHHHHHHB32s")

# Sample block
COLUMN_COUNT_STRUCT = struct.Struct("<B")
SCALE_DTYPE = "<u2"
SAMPLE_DTYPE = "<f4"

# Sizes
ENVELOPE_SIZE = ENVELOPE_STRUCT.size  # 16 bytes
METADATA_SIZE = METADATA_STRUCT.size  # 73 bytes
UPI_SIZE = 32
SCALE_SIZE = 2
SAMPLE_SIZE = 4

# Tick-timestamp epoch (GPS epoch)
GPS_EPOCH = datetime(1980, 1, 6, tzinfo=timezone.utc)
NANOS_PER_SECOND = 1_000_000_000

# Output layout
INTRO_EXTENSION = ".ini"
CSV_EXTENSION = ".csv"
XML_EXTENSION = ".xml"
SHARD_DIR_FORMAT = "{:06d}"

# Run defaults
DEFAULT_WORKERS = 4
DEFAULT_FILES_PER_DIR = 512
