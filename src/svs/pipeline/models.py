"""Data models for the extraction pipeline."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Optional


class FileStatus(str, Enum):
    """Final outcome of one input file."""

    DONE = "done"
    FAILED = "failed"
    SKIPPED = "skipped"


class RecordKind(str, Enum):
    INTRO = "intro"
    DATA = "data"


@dataclass
class FileResult:
    """Outcome of one file pipeline."""

    source: Path
    status: FileStatus
    output: Optional[Path] = None
    kind: Optional[RecordKind] = None
    error: Optional[BaseException] = None

    def __repr__(self) -> str:
        detail = ""
        if self.output is not None:
            detail = f", output={str(self.output)!r}"
        elif self.error is not None:
            detail = f", error={self.error!r}"
        return f"FileResult(source={str(self.source)!r}, status={self.status.value}{detail})"


@dataclass
class RunSummary:
    """Counters for a completed run."""

    done: int = 0
    failed: int = 0
    skipped: int = 0
    max_in_flight: int = 0

    @property
    def total(self) -> int:
        return self.done + self.failed + self.skipped

    def record(self, result: FileResult) -> None:
        if result.status is FileStatus.DONE:
            self.done += 1
        elif result.status is FileStatus.SKIPPED:
            self.skipped += 1
        else:
            self.failed += 1


__all__ = ["FileStatus", "RecordKind", "FileResult", "RunSummary"]
