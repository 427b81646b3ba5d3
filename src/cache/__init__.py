# src/cache/__init__.py - v1
"""Build cache: key/path conventions, validation and the local store."""

from buildcache.cache.errors import BuildCacheError, UnsupportedPlatformError
from buildcache.cache.models import CacheKey, Platform

__all__ = ["BuildCacheError", "CacheKey", "Platform", "UnsupportedPlatformError"]
