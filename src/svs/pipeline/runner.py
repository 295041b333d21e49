"""Bounded concurrent runner for file pipelines."""

from __future__ import annotations

import asyncio
from pathlib import Path
from typing import Callable, Iterable, Iterator, Optional

from svs.config.config import ExtractConfig
from svs.core.errors import FatalPoolError
from svs.monitoring.metrics import FILES_IN_FLIGHT
from svs.pipeline.models import FileResult, FileStatus, RunSummary
from svs.pipeline.processor import process_file
from svs.utils.logging import get_logger

logger = get_logger(__name__)

ProcessFn = Callable[[Path, ExtractConfig], FileResult]

_EXHAUSTED = object()


class BoundedRunner:
    """
    Runs the file pipeline over a stream of paths, at most ``workers`` at once.

    Each admitted file runs in a worker thread. Admission blocks the input
    iterator, so paths are only pulled when a slot is free. ``run`` returns
    once the input is exhausted and every admitted file has finished.
    """

    def __init__(
        self,
        config: ExtractConfig,
        process: Optional[ProcessFn] = None,
    ) -> None:
        self.config = config
        self.workers = config.workers
        self._process = process or process_file
        self._in_flight = 0

    async def run(self, paths: Iterable[str | Path]) -> RunSummary:
        summary = RunSummary()
        semaphore = asyncio.Semaphore(self.workers)
        pending: set[asyncio.Task[None]] = set()
        iterator: Iterator[str | Path] = iter(paths)

        index = 0
        while True:
            try:
                await semaphore.acquire()
            except Exception as exc:
                raise FatalPoolError(f"admission failed: {exc}") from exc

            path = await asyncio.to_thread(next, iterator, _EXHAUSTED)
            if path is _EXHAUSTED:
                semaphore.release()
                break

            task = asyncio.create_task(
                self._run_one(semaphore, index, Path(path), summary)
            )
            pending.add(task)
            task.add_done_callback(pending.discard)
            index += 1

        try:
            await asyncio.gather(*pending)
        except Exception as exc:
            raise FatalPoolError(f"drain failed: {exc}") from exc

        logger.info(
            "run_completed",
            done=summary.done,
            failed=summary.failed,
            skipped=summary.skipped,
        )
        return summary

    async def _run_one(
        self,
        semaphore: asyncio.Semaphore,
        index: int,
        path: Path,
        summary: RunSummary,
    ) -> None:
        self._in_flight += 1
        summary.max_in_flight = max(summary.max_in_flight, self._in_flight)
        FILES_IN_FLIGHT.inc()
        try:
            result = await asyncio.to_thread(self._process, path, self.config)
        except Exception as exc:
            logger.exception("file_pipeline_crashed", source=str(path))
            result = FileResult(source=path, status=FileStatus.FAILED, error=exc)
        finally:
            self._in_flight -= 1
            FILES_IN_FLIGHT.dec()
            semaphore.release()

        summary.record(result)
        if result.status is FileStatus.DONE:
            logger.info(
                "file_processed",
                index=index + 1,
                source=str(path),
                output=str(result.output),
            )

    def run_sync(self, paths: Iterable[str | Path]) -> RunSummary:
        return asyncio.run(self.run(paths))


__all__ = ["BoundedRunner"]
