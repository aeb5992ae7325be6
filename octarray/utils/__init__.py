"""Utility functions and helpers."""

from octarray.utils.config import Config

__all__ = [
    "Config",
]
