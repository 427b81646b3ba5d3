# tests/unit/cache/test_unit_models.py - v1
"""Tests for cache/models.py."""

from __future__ import annotations

from pathlib import Path

import pytest
from pydantic import ValidationError

from buildcache.cache.errors import UnsupportedPlatformError
from buildcache.cache.models import CacheKey, Platform, ResolveResult, UploadResult


class TestPlatform:
    def test_extensions(self):
        assert Platform.IOS.extension == ".app"
        assert Platform.ANDROID.extension == ".apk"

    def test_only_ios_is_bundle(self):
        assert Platform.IOS.is_bundle is True
        assert Platform.ANDROID.is_bundle is False

    def test_parse_string(self):
        assert Platform.parse("ios") is Platform.IOS
        assert Platform.parse("android") is Platform.ANDROID

    def test_parse_passthrough(self):
        assert Platform.parse(Platform.IOS) is Platform.IOS

    @pytest.mark.parametrize("value", ["web", "IOS", "", "windows"])
    def test_parse_unknown(self, value):
        with pytest.raises(UnsupportedPlatformError) as exc_info:
            Platform.parse(value)
        assert exc_info.value.value == value

    def test_unsupported_platform_is_value_error(self):
        with pytest.raises(ValueError):
            Platform.parse("web")


class TestCacheKey:
    def test_filename_ios(self):
        key = CacheKey(fingerprint_hash="xyz", platform="ios")
        assert key.filename == "ios_xyz.app"

    def test_filename_android(self):
        key = CacheKey(fingerprint_hash="abc123", platform=Platform.ANDROID)
        assert key.filename == "android_abc123.apk"

    def test_same_hash_different_platforms(self):
        ios = CacheKey(fingerprint_hash="h", platform="ios")
        android = CacheKey(fingerprint_hash="h", platform="android")
        assert ios.filename != android.filename

    def test_empty_hash_rejected(self):
        with pytest.raises(ValidationError):
            CacheKey(fingerprint_hash="", platform="ios")

    def test_unknown_platform_rejected(self):
        with pytest.raises(ValidationError):
            CacheKey(fingerprint_hash="abc", platform="web")

    def test_frozen_and_hashable(self):
        key = CacheKey(fingerprint_hash="abc", platform="android")
        with pytest.raises(ValidationError):
            key.fingerprint_hash = "other"  # type: ignore[misc]
        assert {key: 1}[CacheKey(fingerprint_hash="abc", platform="android")] == 1


class TestResults:
    def test_resolve_result_defaults_to_miss(self):
        result = ResolveResult(key=CacheKey(fingerprint_hash="a", platform="ios"))
        assert result.hit is False
        assert result.path is None

    def test_upload_result_ok(self):
        key = CacheKey(fingerprint_hash="a", platform="android")
        stored = UploadResult(key=key, path=Path("/c/android_a.apk"), status="stored")
        failed = UploadResult(key=key, status="copy_failed", error="boom")
        assert stored.ok is True
        assert failed.ok is False
