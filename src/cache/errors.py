# src/cache/errors.py - v1
"""Exception types raised by the build cache."""

from __future__ import annotations


class BuildCacheError(Exception):
    """Base class for build cache errors."""


class UnsupportedPlatformError(BuildCacheError, ValueError):
    """Raised when a platform value is not one of the known platforms."""

    def __init__(self, value: object) -> None:
        self.value = value
        super().__init__(
            f"Unsupported platform: {value!r} (expected one of: ios, android)"
        )
