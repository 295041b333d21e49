"""Output naming: UPI from input filenames, shard directories, derived names."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from svs.core.constants import CSV_EXTENSION, SHARD_DIR_FORMAT, XML_EXTENSION
from svs.core.models import PacketMetadata


def upi_from_filename(name: str) -> str:
    """
    Extract the UPI from a relay filename.

    Relay files are named ``<discriminator>_<upi parts...>_<5 trailing fields>``;
    the UPI is whatever lies between the first field and the last five. Names
    that do not follow the convention yield a shorter (possibly empty) UPI.
    """
    parts = Path(name).name.split("_")
    return "_".join(parts[1:-5])


def shard_index(sequence: int, files_per_dir: int) -> int:
    if files_per_dir <= 0:
        raise ValueError(f"files_per_dir must be positive, got {files_per_dir}")
    return sequence // files_per_dir


def shard_dirname(index: int) -> str:
    return SHARD_DIR_FORMAT.format(index)


def derived_name(meta: PacketMetadata, upi: str) -> str:
    """``<originator-id hex4>_<upi>_<YYYYMMDD_HHMMSS>_<seq 6 digits>``."""
    return (
        f"{meta.originator_id:04x}_{upi}_"
        f"{meta.acquisition.compact()}_{meta.originator_seq:06d}"
    )


def ensure_dir(path: str | Path) -> Path:
    """Create ``path`` (and parents); an existing directory is not an error."""
    path = Path(path)
    path.mkdir(parents=True, exist_ok=True)
    return path


@dataclass(frozen=True)
class Destination:
    """
    Where a data record's artifacts go.

    Attributes:
        base_name: Derived filename without extension
        shard: Shard index
        directory: Shard directory (exists once built)
    """

    base_name: str
    shard: int
    directory: Path

    @property
    def csv_path(self) -> Path:
        return self.directory / (self.base_name + CSV_EXTENSION)

    @property
    def xml_path(self) -> Path:
        return self.directory / (self.base_name + CSV_EXTENSION + XML_EXTENSION)


def build_destination(
    meta: PacketMetadata, upi_dir: str | Path, upi: str, files_per_dir: int
) -> Destination:
    """Compute the shard directory and derived name, creating the directory."""
    shard = shard_index(meta.originator_seq, files_per_dir)
    directory = ensure_dir(Path(upi_dir) / shard_dirname(shard))
    return Destination(
        base_name=derived_name(meta, upi), shard=shard, directory=directory
    )


__all__ = [
    "Destination",
    "build_destination",
    "derived_name",
    "ensure_dir",
    "shard_dirname",
    "shard_index",
    "upi_from_filename",
]
