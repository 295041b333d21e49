"""SVS core decoding."""

from .envelope import read_envelope
from .errors import FatalPoolError, MalformedFieldError, SvsError, TruncatedError
from .metadata import read_metadata, write_metadata_xml
from .models import UPI, Envelope, PacketMetadata, Timestamp
from .samples import SampleBlock, decode_sample_block, encode_samples

__all__ = [
    "read_envelope",
    "read_metadata",
    "write_metadata_xml",
    "decode_sample_block",
    "encode_samples",
    "SampleBlock",
    "UPI",
    "Timestamp",
    "Envelope",
    "PacketMetadata",
    "SvsError",
    "TruncatedError",
    "MalformedFieldError",
    "FatalPoolError",
]
