"""Input discovery: positional paths or a line stream, walked recursively."""

from __future__ import annotations

import os
from pathlib import Path
from typing import Iterable, Iterator, Optional, Sequence, TextIO

from svs.core.constants import BAD_SUFFIX
from svs.utils.logging import get_logger

logger = get_logger(__name__)


def walk_files(root: str | Path, keep_bad: bool = False) -> Iterator[Path]:
    """
    Yield regular files under ``root`` in lexical order.

    ``root`` may itself be a file. Files ending in ``.bad`` are dropped unless
    ``keep_bad`` is set.
    """
    root = Path(root)
    if root.is_file():
        candidates: Iterable[Path] = [root]
    elif root.is_dir():
        candidates = _walk_dir(root)
    else:
        logger.warning("input_path_missing", path=str(root))
        return

    for path in candidates:
        if path.suffix == BAD_SUFFIX and not keep_bad:
            continue
        yield path


def _walk_dir(root: Path) -> Iterator[Path]:
    for dirpath, dirnames, filenames in os.walk(root):
        dirnames.sort()
        for name in sorted(filenames):
            yield Path(dirpath) / name


def read_lines(stream: TextIO) -> Iterator[str]:
    """Non-empty lines of ``stream`` without their line endings."""
    for line in stream:
        line = line.rstrip("\r\n")
        if line:
            yield line


def iter_input_paths(
    paths: Sequence[str | Path],
    keep_bad: bool = False,
    stream: Optional[TextIO] = None,
) -> Iterator[Path]:
    """
    Expand inputs into candidate files.

    With no ``paths`` the roots are read line by line from ``stream``.
    """
    roots: Iterable[str | Path] = paths
    if not paths:
        if stream is None:
            return
        roots = read_lines(stream)
    for root in roots:
        yield from walk_files(root, keep_bad=keep_bad)


__all__ = ["iter_input_paths", "read_lines", "walk_files"]
