"""Intro record output."""

from __future__ import annotations

import shutil
from pathlib import Path
from typing import BinaryIO

from svs.core.constants import INTRO_EXTENSION


def write_intro(stream: BinaryIO, dest_dir: str | Path, upi: str) -> Path:
    """
    Copy the rest of ``stream`` verbatim to ``<dest_dir>/<upi>.ini``.

    An existing file is overwritten. On failure the partial file is left as is.
    """
    path = Path(dest_dir) / (upi + INTRO_EXTENSION)
    with open(path, "wb") as out:
        shutil.copyfileobj(stream, out)
    return path


__all__ = ["write_intro"]
