"""Errors raised while decoding SVS captures."""

from __future__ import annotations


class SvsError(Exception):
    """Base class for all SVS decoding and pipeline errors."""


class TruncatedError(SvsError):
    """Fewer bytes are available than a fixed-width structure requires."""

    def __init__(self, what: str, expected: int, actual: int) -> None:
        super().__init__(f"truncated {what}: expected {expected} bytes, got {actual}")
        self.what = what
        self.expected = expected
        self.actual = actual


class MalformedFieldError(SvsError):
    """A fixed-size field could not be decoded."""


class FatalPoolError(SvsError):
    """The bounded runner could not admit or drain work; the run is aborted."""


__all__ = ["SvsError", "TruncatedError", "MalformedFieldError", "FatalPoolError"]
