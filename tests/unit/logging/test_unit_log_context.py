# tests/unit/logging/test_unit_log_context.py - v1
"""Tests for logging/context.py."""

from __future__ import annotations

import pytest

from buildcache.logging.context import (
    clear_context,
    get_context,
    operation_context,
    set_operation_context,
)


class TestLogContext:
    def test_empty_by_default(self):
        assert get_context().as_dict() == {}

    def test_set_and_clear(self):
        set_operation_context("upload", "ios", "h")
        assert get_context().operation == "upload"
        clear_context()
        assert get_context().operation is None

    def test_scoped_context_restores_previous(self):
        set_operation_context("upload", "ios", "outer")
        with operation_context("resolve", "android", "inner"):
            assert get_context().fingerprint_hash == "inner"
        assert get_context().as_dict() == {
            "operation": "upload", "platform": "ios", "fingerprint_hash": "outer",
        }

    def test_scoped_context_restored_on_error(self):
        with pytest.raises(RuntimeError):
            with operation_context("resolve", "ios", "h"):
                raise RuntimeError("boom")
        assert get_context().as_dict() == {}
