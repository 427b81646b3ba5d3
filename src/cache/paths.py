# src/cache/paths.py - v1
"""Cache path conventions.

Entries live directly under the cache root and are named
``{platform}_{fingerprint_hash}{extension}``. No index or manifest is kept:
the filename is the only metadata.
"""

from __future__ import annotations

from pathlib import Path

from buildcache.cache.models import CacheKey, Platform

# Prefix of in-flight staged uploads, hidden from listings.
STAGING_PREFIX = "."


def make_cache_key(fingerprint_hash: str, platform: Platform | str) -> CacheKey:
    """Build a CacheKey, rejecting unknown platforms and empty hashes.

    Raises:
        UnsupportedPlatformError: If platform is not a known platform.
        ValueError: If fingerprint_hash is empty.
    """
    resolved = Platform.parse(platform)
    if not fingerprint_hash:
        raise ValueError("fingerprint_hash must be non-empty")
    return CacheKey(fingerprint_hash=fingerprint_hash, platform=resolved)


def cache_filename(fingerprint_hash: str, platform: Platform | str) -> str:
    """Return the entry filename for a key."""
    return make_cache_key(fingerprint_hash, platform).filename


def cache_path(root: Path, fingerprint_hash: str, platform: Platform | str) -> Path:
    """Return the entry path for a key under ``root``. No I/O."""
    return Path(root) / cache_filename(fingerprint_hash, platform)


def parse_cache_filename(name: str) -> CacheKey | None:
    """Recover the CacheKey from an entry filename.

    Returns None for names that do not follow the naming scheme.
    """
    if name.startswith(STAGING_PREFIX):
        return None
    for platform in Platform:
        prefix = f"{platform.value}_"
        if not (name.startswith(prefix) and name.endswith(platform.extension)):
            continue
        fingerprint_hash = name[len(prefix) : -len(platform.extension)]
        if fingerprint_hash:
            return CacheKey(fingerprint_hash=fingerprint_hash, platform=platform)
    return None
