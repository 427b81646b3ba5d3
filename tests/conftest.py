# tests/conftest.py - v2
"""Shared test fixtures for unit and integration tests.

Provides a temporary cache root, sample build artifacts and a store wired
with the in-process copy provider. No external executables are required.
"""

from __future__ import annotations

from pathlib import Path

import pytest

from buildcache.cache.cache_directory import CacheDirectory
from buildcache.cache.local_store import LocalBuildCacheStore
from buildcache.logging.context import clear_context
from buildcache.storage.artifact_copier import ArtifactCopier
from buildcache.storage.copy_providers import ShutilCopyProvider


@pytest.fixture(autouse=True)
def _reset_log_context():
    clear_context()
    yield
    clear_context()


# === FIXTURES: Cache locations ===


@pytest.fixture
def cache_root(tmp_path: Path) -> Path:
    """Cache root path. Not created: the store creates it lazily."""
    return tmp_path / ".expo" / "cache"


@pytest.fixture
def cache_dir(cache_root: Path) -> CacheDirectory:
    return CacheDirectory(cache_root)


@pytest.fixture
def store(cache_dir: CacheDirectory) -> LocalBuildCacheStore:
    """Store using only the in-process copy provider."""
    return LocalBuildCacheStore(
        cache_dir=cache_dir, copier=ArtifactCopier([ShutilCopyProvider()])
    )


@pytest.fixture
def staged_store(cache_dir: CacheDirectory) -> LocalBuildCacheStore:
    return LocalBuildCacheStore(
        cache_dir=cache_dir,
        copier=ArtifactCopier([ShutilCopyProvider()]),
        staged_uploads=True,
    )


# === FIXTURES: Build artifacts ===


@pytest.fixture
def ios_bundle(tmp_path: Path) -> Path:
    """Minimal .app bundle directory."""
    bundle = tmp_path / "build" / "MyApp.app"
    (bundle / "Frameworks").mkdir(parents=True)
    (bundle / "Info.plist").write_text("<plist><dict/></plist>", encoding="utf-8")
    (bundle / "MyApp").write_bytes(b"\xcf\xfa\xed\xfe binary")
    (bundle / "Frameworks" / "Hermes.framework").write_bytes(b"hermes")
    return bundle


@pytest.fixture
def android_apk(tmp_path: Path) -> Path:
    """Minimal .apk file."""
    apk = tmp_path / "build" / "app-debug.apk"
    apk.parent.mkdir(parents=True, exist_ok=True)
    apk.write_bytes(b"PK\x03\x04 apk payload")
    return apk
