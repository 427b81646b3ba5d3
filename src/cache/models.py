# src/cache/models.py - v2
"""Cache domain models: Platform, CacheKey, CacheEntryInfo, lookup/upload results."""

from __future__ import annotations

from datetime import datetime
from enum import Enum
from pathlib import Path
from typing import Literal

from pydantic import BaseModel, ConfigDict, field_validator

from buildcache.cache.errors import UnsupportedPlatformError


class Platform(str, Enum):
    """Target platform of a build artifact.

    The platform fixes both the artifact shape (directory bundle or single
    file) and the cache filename extension.
    """

    IOS = "ios"
    ANDROID = "android"

    @property
    def extension(self) -> str:
        return ".app" if self is Platform.IOS else ".apk"

    @property
    def is_bundle(self) -> bool:
        """True when cached artifacts must be directory bundles."""
        return self is Platform.IOS

    @classmethod
    def parse(cls, value: Platform | str) -> Platform:
        """Return the Platform for ``value``.

        Raises:
            UnsupportedPlatformError: If value is not a known platform.
        """
        if isinstance(value, Platform):
            return value
        try:
            return cls(value)
        except ValueError:
            raise UnsupportedPlatformError(value) from None


class CacheKey(BaseModel):
    """Exact-match cache key: (platform, fingerprint hash)."""

    model_config = ConfigDict(frozen=True)

    fingerprint_hash: str
    platform: Platform

    @field_validator("fingerprint_hash")
    @classmethod
    def validate_fingerprint_hash(cls, v: str) -> str:
        if not v:
            raise ValueError("fingerprint_hash must be non-empty")
        return v

    @field_validator("platform", mode="before")
    @classmethod
    def validate_platform(cls, v: object) -> Platform:
        return Platform.parse(v)  # type: ignore[arg-type]

    @property
    def filename(self) -> str:
        return f"{self.platform.value}_{self.fingerprint_hash}{self.platform.extension}"


class CacheEntryInfo(BaseModel):
    """A stored cache entry, as seen from a listing of the cache root."""

    key: CacheKey
    path: Path
    is_directory: bool
    size_bytes: int
    modified_at: datetime


class ResolveResult(BaseModel):
    """Outcome of a cache lookup."""

    key: CacheKey
    path: Path | None = None
    status: Literal["hit", "missing", "shape_mismatch"] = "missing"

    @property
    def hit(self) -> bool:
        return self.status == "hit"


class UploadResult(BaseModel):
    """Outcome of storing an artifact in the cache."""

    key: CacheKey
    path: Path | None = None
    status: Literal["stored", "source_missing", "copy_failed", "invalid"]
    strategy: str | None = None
    error: str | None = None

    @property
    def ok(self) -> bool:
        return self.status == "stored"
