# tests/unit/cache/test_unit_validator.py - v1
"""Tests for cache/validator.py: platform-specific entry shape checks."""

from __future__ import annotations

import os

import pytest

from buildcache.cache.errors import UnsupportedPlatformError
from buildcache.cache.validator import check_cache_entry, is_valid_cache_entry


class TestCheckCacheEntry:
    def test_missing(self, tmp_path):
        assert check_cache_entry(tmp_path / "ios_x.app", "ios") == "missing"
        assert check_cache_entry(tmp_path / "android_x.apk", "android") == "missing"

    def test_ios_directory_is_hit(self, tmp_path):
        bundle = tmp_path / "ios_x.app"
        bundle.mkdir()
        assert check_cache_entry(bundle, "ios") == "hit"

    def test_ios_file_is_shape_mismatch(self, tmp_path):
        entry = tmp_path / "ios_x.app"
        entry.write_bytes(b"partial")
        assert check_cache_entry(entry, "ios") == "shape_mismatch"

    def test_android_accepts_file(self, tmp_path):
        apk = tmp_path / "android_x.apk"
        apk.write_bytes(b"apk")
        assert check_cache_entry(apk, "android") == "hit"

    def test_android_accepts_directory(self, tmp_path):
        d = tmp_path / "android_x.apk"
        d.mkdir()
        assert check_cache_entry(d, "android") == "hit"

    @pytest.mark.skipif(not hasattr(os, "symlink"), reason="symlinks unsupported")
    def test_dangling_symlink_is_missing(self, tmp_path):
        link = tmp_path / "android_x.apk"
        link.symlink_to(tmp_path / "gone.apk")
        assert check_cache_entry(link, "android") == "missing"

    def test_unknown_platform(self, tmp_path):
        with pytest.raises(UnsupportedPlatformError):
            check_cache_entry(tmp_path, "web")


class TestIsValidCacheEntry:
    def test_bool_wrapper(self, tmp_path):
        bundle = tmp_path / "ios_x.app"
        assert is_valid_cache_entry(bundle, "ios") is False
        bundle.mkdir()
        assert is_valid_cache_entry(bundle, "ios") is True
