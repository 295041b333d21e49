"""File pipeline and bounded runner."""

from .models import FileResult, FileStatus, RecordKind, RunSummary
from .processor import process_file
from .runner import BoundedRunner
from .sources import iter_input_paths

__all__ = [
    "BoundedRunner",
    "FileResult",
    "FileStatus",
    "RecordKind",
    "RunSummary",
    "iter_input_paths",
    "process_file",
]
