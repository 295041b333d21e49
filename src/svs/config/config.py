"""Configuration management."""

from __future__ import annotations

import os
import tempfile
from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, Field, field_validator

from svs.core.constants import DEFAULT_FILES_PER_DIR, DEFAULT_WORKERS


def _env_bool(raw: str) -> bool:
    return raw.strip().lower() in ("1", "true", "yes", "on")


class ExtractConfig(BaseModel):
    """Extraction run configuration."""

    datadir: Path = Field(
        default_factory=lambda: Path(tempfile.gettempdir()),
        description="Output root; one subdirectory per UPI",
    )
    files_per_dir: int = Field(
        DEFAULT_FILES_PER_DIR,
        description="Files per shard directory (non-positive -> default)",
    )
    workers: int = Field(
        DEFAULT_WORKERS,
        description="Files processed concurrently (non-positive -> default)",
    )
    keep_bad: bool = Field(
        False,
        description="Process files carrying the .bad suffix",
    )

    @field_validator("files_per_dir")
    @classmethod
    def _default_files_per_dir(cls, value: int) -> int:
        return value if value > 0 else DEFAULT_FILES_PER_DIR

    @field_validator("workers")
    @classmethod
    def _default_workers(cls, value: int) -> int:
        return value if value > 0 else DEFAULT_WORKERS

    @classmethod
    def from_env(cls) -> "ExtractConfig":
        values: dict[str, Any] = {}
        datadir = os.getenv("SVS_DATADIR")
        if datadir:
            values["datadir"] = datadir
        files_per_dir = os.getenv("SVS_FILES_PER_DIR")
        if files_per_dir:
            values["files_per_dir"] = int(files_per_dir)
        workers = os.getenv("SVS_WORKERS")
        if workers:
            values["workers"] = int(workers)
        keep_bad = os.getenv("SVS_KEEP_BAD")
        if keep_bad:
            values["keep_bad"] = _env_bool(keep_bad)
        return cls(**values)

    @classmethod
    def from_yaml(cls, path: str | Path) -> "ExtractConfig":
        """Load settings from a YAML mapping (missing keys keep defaults)."""
        with open(path, "r", encoding="utf-8") as f:
            data = yaml.safe_load(f) or {}
        if not isinstance(data, dict):
            raise ValueError(f"Config file {path} must contain a mapping")
        return cls(**data)

    def with_overrides(self, **overrides: Any) -> "ExtractConfig":
        """Return a validated copy; ``None`` values are ignored."""
        values = self.model_dump()
        values.update({k: v for k, v in overrides.items() if v is not None})
        return type(self).model_validate(values)


__all__ = ["ExtractConfig"]
