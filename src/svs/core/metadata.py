"""Packet metadata decoding and XML serialization."""

from __future__ import annotations

import re
import struct
import xml.etree.ElementTree as ET
from pathlib import Path
from typing import BinaryIO

from svs.core.constants import METADATA_SIZE, METADATA_STRUCT
from svs.core.envelope import read_exact
from svs.core.errors import MalformedFieldError
from svs.core.models import UPI, Envelope, PacketMetadata, Timestamp

ROOT_TAG = "metadata"

# characters outside the XML 1.0 Char production
_XML_INVALID = re.compile(
    "[^\x09\x0a\x0d\x20-\ud7ff\ue000-\ufffd\U00010000-\U0010ffff]"
)

# (xml tag, PacketMetadata attribute) in wire order
FIELD_TAGS: tuple[tuple[str, str], ...] = (
    ("acquisition-time", "acquisition"),
    ("originator-seq-no", "originator_seq"),
    ("auxiliary-time", "auxiliary_time"),
    ("originator-id", "originator_id"),
    ("source-x-size", "source_x_size"),
    ("source-y-size", "source_y_size"),
    ("format", "format"),
    ("fdrp", "fdrp"),
    ("roi-x-offset", "roi_x_offset"),
    ("roi-x-size", "roi_x_size"),
    ("roi-y-offset", "roi_y_offset"),
    ("roi-y-size", "roi_y_size"),
    ("scale-x-size", "scale_x_size"),
    ("scale-y-size", "scale_y_size"),
    ("scale-far", "scale_far"),
    ("user-packet-info", "upi"),
)


def parse_metadata(raw: bytes) -> PacketMetadata:
    """Decode a 73-byte little-endian metadata record."""
    try:
        fields = METADATA_STRUCT.unpack(raw)
    except struct.error as exc:
        raise MalformedFieldError(f"invalid metadata record: {exc}") from exc

    (acquisition, *numbers, upi) = fields
    return PacketMetadata(Timestamp(acquisition), *numbers, upi=UPI(upi))


def read_metadata(stream: BinaryIO) -> PacketMetadata:
    """
    Read the packet metadata record that follows the envelope.

    Raises:
        TruncatedError: If the record is incomplete
        MalformedFieldError: If the record cannot be unpacked
    """
    return parse_metadata(read_exact(stream, METADATA_SIZE, "packet metadata"))


def xml_text(text: str) -> str:
    """Replace characters XML 1.0 cannot carry with U+FFFD."""
    return _XML_INVALID.sub("\ufffd", text)


def _encode_value(value: object) -> str:
    if isinstance(value, Timestamp):
        return value.isoformat()
    if isinstance(value, UPI):
        return xml_text(value.text())
    return str(value)


def metadata_to_element(
    meta: PacketMetadata, envelope: Envelope, source_name: str
) -> ET.Element:
    """Build the ``<metadata>`` element with provenance attributes."""
    root = ET.Element(
        ROOT_TAG,
        {
            "svs-timestamp": envelope.timestamp.isoformat(),
            "svs-sequence": str(envelope.sequence),
            "svs-file": xml_text(source_name),
        },
    )
    for tag, attr in FIELD_TAGS:
        ET.SubElement(root, tag).text = _encode_value(getattr(meta, attr))
    return root


def write_metadata_xml(
    meta: PacketMetadata,
    envelope: Envelope,
    source_name: str,
    path: str | Path,
) -> Path:
    """Serialize metadata and provenance to ``path`` (overwrites)."""
    root = metadata_to_element(meta, envelope, source_name)
    tree = ET.ElementTree(root)
    ET.indent(tree, space="\t")
    path = Path(path)
    with open(path, "wb") as f:
        tree.write(f, encoding="utf-8", xml_declaration=True)
    return path


__all__ = [
    "FIELD_TAGS",
    "parse_metadata",
    "xml_text",
    "read_metadata",
    "metadata_to_element",
    "write_metadata_xml",
]
