"""Prometheus metrics for SVS extraction."""

from prometheus_client import (
    Counter,
    Gauge,
    Histogram,
    generate_latest,
)

# Counters
FILES_PROCESSED = Counter(
    "svs_files_total", "Input files by pipeline outcome", ["status", "kind"]
)
BYTES_READ = Counter("svs_bytes_read_total", "Bytes of input files processed")
SAMPLE_ROWS = Counter("svs_sample_rows_total", "Sample rows written to CSV")

# Gauges
FILES_IN_FLIGHT = Gauge(
    "svs_files_in_flight", "File pipelines currently admitted by the runner"
)

# Histograms
FILE_DURATION = Histogram(
    "svs_file_duration_seconds", "Duration of a single file pipeline"
)

__all__ = [
    "FILES_PROCESSED",
    "BYTES_READ",
    "SAMPLE_ROWS",
    "FILES_IN_FLIGHT",
    "FILE_DURATION",
    "generate_latest",
]
