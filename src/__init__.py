# src/__init__.py - v1
"""Local filesystem build artifact cache.

Resolves previously stored build artifacts by (fingerprint, platform) and
stores freshly built ones for reuse.
"""

from buildcache.api.facade import resolve_build_cache, upload_build_cache
from buildcache.version import __version__

__all__ = ["__version__", "resolve_build_cache", "upload_build_cache"]
