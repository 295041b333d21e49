"""Single-file pipeline: envelope -> intro | metadata + samples."""

from __future__ import annotations

import os
import time
from pathlib import Path

from svs.config.config import ExtractConfig
from svs.core.envelope import read_envelope
from svs.core.errors import SvsError
from svs.core.metadata import read_metadata, write_metadata_xml
from svs.core.samples import encode_samples
from svs.monitoring.metrics import (
    BYTES_READ,
    FILE_DURATION,
    FILES_PROCESSED,
    SAMPLE_ROWS,
)
from svs.pipeline.intro import write_intro
from svs.pipeline.models import FileResult, FileStatus, RecordKind
from svs.pipeline.naming import build_destination, ensure_dir, upi_from_filename
from svs.utils.logging import get_logger, log_context

logger = get_logger(__name__)


def _process(path: Path, config: ExtractConfig) -> FileResult:
    with open(path, "rb") as stream:
        envelope = read_envelope(stream)
        if envelope is None:
            return FileResult(source=path, status=FileStatus.SKIPPED)

        upi = upi_from_filename(path.name)
        upi_dir = ensure_dir(config.datadir / upi)

        if envelope.is_intro:
            output = write_intro(stream, upi_dir, upi)
            kind = RecordKind.INTRO
        else:
            meta = read_metadata(stream)
            dest = build_destination(meta, upi_dir, upi, config.files_per_dir)
            write_metadata_xml(meta, envelope, path.name, dest.xml_path)
            rows = encode_samples(stream, dest.csv_path)
            SAMPLE_ROWS.inc(rows)
            output = dest.csv_path
            kind = RecordKind.DATA

        BYTES_READ.inc(os.fstat(stream.fileno()).st_size)

    return FileResult(source=path, status=FileStatus.DONE, output=output, kind=kind)


def process_file(path: str | Path, config: ExtractConfig) -> FileResult:
    """
    Run the full pipeline for one input file.

    Decoding and filesystem errors are logged and returned as a FAILED result;
    they never propagate. Outputs written before a failure are left in place.
    """
    path = Path(path)
    start = time.perf_counter()
    with log_context(source=str(path)):
        try:
            result = _process(path, config)
        except (SvsError, OSError) as exc:
            logger.error("file_failed", error=str(exc), error_type=type(exc).__name__)
            result = FileResult(source=path, status=FileStatus.FAILED, error=exc)

        if result.status is FileStatus.SKIPPED:
            logger.debug("file_skipped")

    FILE_DURATION.observe(time.perf_counter() - start)
    FILES_PROCESSED.labels(
        status=result.status.value,
        kind=result.kind.value if result.kind else "none",
    ).inc()
    return result


__all__ = ["process_file"]
