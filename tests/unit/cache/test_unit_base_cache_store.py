# tests/unit/cache/test_unit_base_cache_store.py - v1
"""Tests for cache/base_cache_store.py: BaseBuildCacheStore ABC."""

from __future__ import annotations

import pytest

from buildcache.cache.base_cache_store import BaseBuildCacheStore


class TestBaseBuildCacheStore:
    def test_cannot_instantiate(self):
        with pytest.raises(TypeError):
            BaseBuildCacheStore()  # type: ignore[abstract]

    def test_has_required_methods(self):
        for method in ["resolve", "upload", "list_entries"]:
            assert hasattr(BaseBuildCacheStore, method)
