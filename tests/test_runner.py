"""Tests for the bounded concurrent runner."""
import threading
import time
from collections import Counter
from pathlib import Path

import pytest

from capture_helpers import capture_name, data_capture, write_capture
from svs.config.config import ExtractConfig
from svs.pipeline.models import FileResult, FileStatus
from svs.pipeline.runner import BoundedRunner


class ConcurrencyTracker:
    """Process stand-in recording how many calls overlap."""

    def __init__(self, delay: float = 0.02) -> None:
        self.delay = delay
        self.active = 0
        self.finished = 0
        self.peak = 0
        self.seen: Counter[Path] = Counter()
        self._lock = threading.Lock()

    def __call__(self, path: Path, config: ExtractConfig) -> FileResult:
        with self._lock:
            self.active += 1
            self.peak = max(self.peak, self.active)
            self.seen[path] += 1
        time.sleep(self.delay)
        with self._lock:
            self.active -= 1
            self.finished += 1
        return FileResult(source=path, status=FileStatus.DONE, output=path)


@pytest.mark.asyncio
@pytest.mark.unit
async def test_runner_respects_worker_limit(tmp_path: Path):
    tracker = ConcurrencyTracker()
    paths = [tmp_path / f"f{i}" for i in range(12)]
    runner = BoundedRunner(ExtractConfig(datadir=tmp_path, workers=3), process=tracker)

    summary = await runner.run(paths)

    assert summary.done == 12
    assert summary.total == 12
    assert tracker.peak <= 3
    assert summary.max_in_flight <= 3
    assert set(tracker.seen) == set(paths)
    assert all(count == 1 for count in tracker.seen.values())


@pytest.mark.asyncio
@pytest.mark.unit
async def test_runner_pulls_inputs_lazily(tmp_path: Path):
    tracker = ConcurrencyTracker(delay=0.05)
    finished_at_pull: list[int] = []

    def inputs():
        for i in range(6):
            finished_at_pull.append(tracker.finished)
            yield tmp_path / f"f{i}"

    runner = BoundedRunner(ExtractConfig(datadir=tmp_path, workers=1), process=tracker)
    summary = await runner.run(inputs())

    assert summary.done == 6
    assert tracker.peak == 1
    # a path is only pulled once the previous file has released its slot
    assert all(done >= i for i, done in enumerate(finished_at_pull))


@pytest.mark.asyncio
@pytest.mark.unit
async def test_runner_empty_input(tmp_path: Path):
    tracker = ConcurrencyTracker()
    summary = await BoundedRunner(ExtractConfig(datadir=tmp_path), process=tracker).run([])

    assert summary.total == 0
    assert tracker.peak == 0


@pytest.mark.asyncio
@pytest.mark.unit
async def test_runner_counts_outcomes_and_survives_crashes(tmp_path: Path):
    def process(path: Path, config: ExtractConfig) -> FileResult:
        if path.name == "boom":
            raise RuntimeError("unexpected")
        if path.name == "skip":
            return FileResult(source=path, status=FileStatus.SKIPPED)
        if path.name == "bad":
            return FileResult(source=path, status=FileStatus.FAILED, error=OSError("x"))
        return FileResult(source=path, status=FileStatus.DONE, output=path)

    paths = [tmp_path / n for n in ("ok", "boom", "skip", "bad", "ok2")]
    summary = await BoundedRunner(
        ExtractConfig(datadir=tmp_path, workers=2), process=process
    ).run(paths)

    assert summary.done == 2
    assert summary.skipped == 1
    assert summary.failed == 2


@pytest.mark.integration
def test_runner_processes_real_files_into_shared_dirs(tmp_path: Path):
    indir = tmp_path / "in"
    sources = [
        write_capture(
            indir,
            capture_name("FOO", discriminator=f"d{i}"),
            data_capture(originator_seq=i, rows=[(float(i + 1), -float(i + 1))]),
        )
        for i in range(10)
    ]
    config = ExtractConfig(datadir=tmp_path / "out", files_per_dir=4, workers=3)

    summary = BoundedRunner(config).run_sync(sources)

    assert summary.done == 10
    assert summary.failed == 0
    shards = sorted(p.name for p in (tmp_path / "out" / "FOO").iterdir())
    assert shards == ["000000", "000001", "000002"]
    csvs = list((tmp_path / "out" / "FOO").rglob("*.csv"))
    assert len(csvs) == 10
    for path in csvs:
        seq = int(path.stem.rsplit("_", 1)[1])
        lines = path.read_text().splitlines()
        assert lines[1] == f"0,{seq + 1},-{seq + 1}"
