# src/cache/local_store.py - v1
"""Local directory build cache store (default backend).

Entries are stored flat under the cache root, one file or bundle directory
per (platform, fingerprint) key. A later upload for the same key replaces the
previous entry. There is no locking: concurrent writers for one key race and
the last to finish wins.
"""

from __future__ import annotations

import logging
import os
import uuid
from datetime import datetime, timezone
from pathlib import Path
from stat import S_ISLNK

from buildcache.cache.base_cache_store import BaseBuildCacheStore
from buildcache.cache.cache_directory import CacheDirectory
from buildcache.cache.models import (
    CacheEntryInfo,
    CacheKey,
    Platform,
    ResolveResult,
    UploadResult,
)
from buildcache.cache.paths import STAGING_PREFIX, make_cache_key, parse_cache_filename
from buildcache.cache.validator import check_cache_entry
from buildcache.logging.context import operation_context
from buildcache.storage.artifact_copier import ArtifactCopier, clear_destination

logger = logging.getLogger(__name__)


class LocalBuildCacheStore(BaseBuildCacheStore):
    """Filesystem-backed build artifact cache."""

    def __init__(
        self,
        cache_dir: CacheDirectory,
        copier: ArtifactCopier,
        staged_uploads: bool = False,
    ) -> None:
        self._cache_dir = cache_dir
        self._copier = copier
        self._staged_uploads = staged_uploads

    @property
    def root(self) -> Path:
        return self._cache_dir.root

    def path_for(self, fingerprint_hash: str, platform: Platform | str) -> Path:
        """Return the entry path for a key without touching the filesystem."""
        return self.root / make_cache_key(fingerprint_hash, platform).filename

    # --- Resolve ---

    def resolve(self, fingerprint_hash: str, platform: Platform | str) -> Path | None:
        return self.lookup(fingerprint_hash, platform).path

    def lookup(self, fingerprint_hash: str, platform: Platform | str) -> ResolveResult:
        """Look up a key and report why it missed, if it did. Read-only."""
        key = make_cache_key(fingerprint_hash, platform)
        with operation_context("resolve", key.platform.value, key.fingerprint_hash):
            path = self.root / key.filename
            logger.info("Searching for cached build: %s", key.filename)
            status = check_cache_entry(path, key.platform)
            if status == "hit":
                logger.info("Cache hit: %s", path)
                return ResolveResult(key=key, path=path, status="hit")
            if status == "shape_mismatch":
                logger.warning(
                    "Ignoring cache entry %s: %s artifacts must be directories",
                    path, key.platform.value,
                )
            else:
                logger.info("Cache miss: no build at %s", path)
            return ResolveResult(key=key, status=status)

    # --- Upload ---

    def upload(
        self, fingerprint_hash: str, platform: Platform | str, source_path: Path
    ) -> Path | None:
        return self.store(fingerprint_hash, platform, source_path).path

    def store(
        self, fingerprint_hash: str, platform: Platform | str, source_path: Path
    ) -> UploadResult:
        """Copy ``source_path`` into the cache and verify the stored entry.

        Raises:
            OSError: If the cache root cannot be created.
        """
        key = make_cache_key(fingerprint_hash, platform)
        # Symlinked build paths are copied by content, never as links
        source = Path(source_path).resolve()
        with operation_context("upload", key.platform.value, key.fingerprint_hash):
            if not source.exists():
                logger.error("Build artifact not found at: %s", source)
                return UploadResult(
                    key=key, status="source_missing",
                    error=f"build artifact not found: {source}",
                )

            root = self._cache_dir.ensure_root()
            destination = root / key.filename
            logger.info(
                "Uploading %s %s -> %s",
                "directory" if source.is_dir() else "file", source, destination,
            )
            if self._staged_uploads:
                return self._store_staged(key, source, destination)
            return self._store_in_place(key, source, destination)

    def _store_in_place(
        self, key: CacheKey, source: Path, destination: Path
    ) -> UploadResult:
        outcome = self._copier.copy(source, destination)
        if not outcome:
            # Destination may be absent or partially written; no rollback.
            return UploadResult(
                key=key, status="copy_failed", strategy=outcome.strategy,
                error=outcome.error,
            )
        return self._verify(key, destination, outcome.strategy)

    def _store_staged(
        self, key: CacheKey, source: Path, destination: Path
    ) -> UploadResult:
        staging = destination.with_name(
            f"{STAGING_PREFIX}{key.filename}.staging-{uuid.uuid4().hex[:12]}"
        )
        try:
            outcome = self._copier.copy(source, staging)
            if not outcome:
                return UploadResult(
                    key=key, status="copy_failed", strategy=outcome.strategy,
                    error=outcome.error,
                )
            if check_cache_entry(staging, key.platform) != "hit":
                logger.error("Staged copy failed validation: %s", staging)
                return UploadResult(
                    key=key, status="invalid", strategy=outcome.strategy,
                    error=f"staged copy failed validation: {staging}",
                )
            try:
                if destination.exists() or destination.is_symlink():
                    clear_destination(destination)
                os.replace(staging, destination)
            except OSError as e:
                logger.error("Failed to move %s into place: %s", staging, e)
                return UploadResult(
                    key=key, status="copy_failed", strategy=outcome.strategy,
                    error=str(e),
                )
            return self._verify(key, destination, outcome.strategy)
        finally:
            if staging.exists() or staging.is_symlink():
                try:
                    clear_destination(staging)
                except OSError as e:
                    logger.warning("Could not remove staging path %s: %s", staging, e)

    def _verify(self, key: CacheKey, destination: Path, strategy: str | None) -> UploadResult:
        if check_cache_entry(destination, key.platform) != "hit":
            logger.error("Failed to verify cache entry: %s", destination)
            return UploadResult(
                key=key, status="invalid", strategy=strategy,
                error=f"cache entry failed validation: {destination}",
            )
        logger.info("Successfully cached build at: %s (via %s)", destination, strategy)
        return UploadResult(key=key, path=destination, status="stored", strategy=strategy)

    # --- Listing ---

    def list_entries(self, platform: Platform | str | None = None) -> list[CacheEntryInfo]:
        wanted = Platform.parse(platform) if platform is not None else None
        entries: list[CacheEntryInfo] = []
        if not self._cache_dir.exists():
            return entries

        for path in sorted(self.root.iterdir()):
            key = parse_cache_filename(path.name)
            if key is None or (wanted is not None and key.platform is not wanted):
                continue
            try:
                stat = path.stat()
            except OSError:
                # Removed between listing and stat, or a dangling link
                continue
            is_directory = path.is_dir()
            entries.append(
                CacheEntryInfo(
                    key=key,
                    path=path,
                    is_directory=is_directory,
                    size_bytes=_tree_size(path) if is_directory else stat.st_size,
                    modified_at=datetime.fromtimestamp(stat.st_mtime, tz=timezone.utc),
                )
            )
        return entries


def _tree_size(path: Path) -> int:
    total = 0
    # os.walk skips unreadable directories
    for dirpath, _dirnames, filenames in os.walk(path):
        for name in filenames:
            try:
                stat = os.lstat(os.path.join(dirpath, name))
            except OSError:
                continue
            if not S_ISLNK(stat.st_mode):
                total += stat.st_size
    return total
