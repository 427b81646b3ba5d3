# src/api/facade.py - v2
"""Public API facade: the two operations a build orchestrator calls.

Usage:
    from buildcache.api.facade import resolve_build_cache, upload_build_cache

    path = resolve_build_cache(fingerprint, "ios", project_root)
    if path is None:
        build_path = run_build()
        upload_build_cache(fingerprint, "ios", build_path, project_root)

Hosts that make many calls should create one store with
``create_cache_store`` and pass it in.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import TYPE_CHECKING

from buildcache.cache.cache_factory import create_cache_store

if TYPE_CHECKING:
    from buildcache.cache.base_cache_store import BaseBuildCacheStore
    from buildcache.cache.models import Platform
    from buildcache.config.settings import Settings

logger = logging.getLogger(__name__)


def resolve_build_cache(
    fingerprint_hash: str,
    platform: Platform | str,
    project_root: str | Path | None = None,
    *,
    store: BaseBuildCacheStore | None = None,
    settings: Settings | None = None,
) -> Path | None:
    """Look up a cached build for a fingerprint.

    Args:
        fingerprint_hash: Fingerprint of the build inputs.
        platform: "ios" or "android".
        project_root: Anchor for a relative cache root. Defaults to cwd.
            Ignored when ``store`` is given; the store already has its root.
        store: Store to use. Built from settings and project_root if None.
        settings: Settings used when building a store.

    Returns:
        Path of the cached artifact, or None on a miss.

    Raises:
        UnsupportedPlatformError: If platform is not a known platform.
    """
    store = store or create_cache_store(settings, base_dir=project_root)
    return store.resolve(fingerprint_hash, platform)


def upload_build_cache(
    fingerprint_hash: str,
    platform: Platform | str,
    build_path: str | Path,
    project_root: str | Path | None = None,
    *,
    store: BaseBuildCacheStore | None = None,
    settings: Settings | None = None,
) -> Path | None:
    """Store a freshly built artifact for a fingerprint.

    Args:
        fingerprint_hash: Fingerprint of the build inputs.
        platform: "ios" or "android".
        build_path: Build output, an .app directory or an .apk file.
        project_root: Anchor for a relative cache root. Defaults to cwd.
            Ignored when ``store`` is given; the store already has its root.
        store: Store to use. Built from settings and project_root if None.
        settings: Settings used when building a store.

    Returns:
        Path of the stored artifact, or None if the build output is missing,
        could not be copied or failed validation.

    Raises:
        UnsupportedPlatformError: If platform is not a known platform.
        OSError: If the cache root cannot be created.
    """
    store = store or create_cache_store(settings, base_dir=project_root)
    path = store.upload(fingerprint_hash, platform, Path(build_path))
    if path is None:
        logger.warning("Build %s was not cached", fingerprint_hash)
    return path
