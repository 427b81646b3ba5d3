# src/cache/cache_factory.py - v3
"""Factory for build cache store instantiation."""

from __future__ import annotations

from pathlib import Path

from buildcache.cache.base_cache_store import BaseBuildCacheStore
from buildcache.cache.cache_directory import CacheDirectory
from buildcache.config.settings import Settings
from buildcache.storage.artifact_copier import ArtifactCopier
from buildcache.storage.provider_factory import create_copy_providers


def create_cache_store(
    settings: Settings | None = None,
    base_dir: str | Path | None = None,
) -> BaseBuildCacheStore:
    """Instantiate the local build cache store.

    The cache root is not created here; the first upload creates it.

    Args:
        settings: Application settings. Loaded from .env if None.
        base_dir: Directory that a relative CACHE_ROOT is anchored to.
            Defaults to the current working directory.

    Returns:
        Configured BaseBuildCacheStore implementation.
    """
    from buildcache.cache.local_store import LocalBuildCacheStore

    settings = settings or Settings()
    return LocalBuildCacheStore(
        cache_dir=CacheDirectory.from_settings(settings, base_dir=base_dir),
        copier=ArtifactCopier(create_copy_providers(settings)),
        staged_uploads=settings.staged_uploads,
    )
