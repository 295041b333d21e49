"""Configuration for SVS extraction."""

from .config import ExtractConfig

__all__ = ["ExtractConfig"]
