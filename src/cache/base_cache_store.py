# src/cache/base_cache_store.py - v2
"""Abstract build cache store interface."""

from __future__ import annotations

from abc import ABC, abstractmethod
from pathlib import Path

from buildcache.cache.models import CacheEntryInfo, Platform


class BaseBuildCacheStore(ABC):
    """Unified interface for build artifact cache backends.

    ``resolve`` and ``upload`` signal misses and failures by returning None;
    only environment failures such as an uncreatable cache root raise.
    """

    @abstractmethod
    def resolve(self, fingerprint_hash: str, platform: Platform | str) -> Path | None:
        """Return the cached artifact path, or None on a miss."""

    @abstractmethod
    def upload(
        self, fingerprint_hash: str, platform: Platform | str, source_path: Path
    ) -> Path | None:
        """Store an artifact; return its cache path, or None on failure."""

    @abstractmethod
    def list_entries(self, platform: Platform | str | None = None) -> list[CacheEntryInfo]:
        """List stored entries, optionally for one platform."""
