# src/cache/validator.py - v1
"""Cache entry validation: does a path hold a usable artifact for a platform?"""

from __future__ import annotations

from pathlib import Path
from typing import Literal

from buildcache.cache.models import Platform

EntryCheck = Literal["hit", "missing", "shape_mismatch"]


def check_cache_entry(path: Path, platform: Platform | str) -> EntryCheck:
    """Classify the entry at ``path``.

    iOS bundles must be directories; any existing entry is accepted for
    other platforms. Symlinks are followed, so a dangling link is missing.
    """
    platform = Platform.parse(platform)
    path = Path(path)
    if not path.exists():
        return "missing"
    if platform.is_bundle and not path.is_dir():
        return "shape_mismatch"
    return "hit"


def is_valid_cache_entry(path: Path, platform: Platform | str) -> bool:
    """Return True if ``path`` is a usable cached artifact for ``platform``."""
    return check_cache_entry(path, platform) == "hit"
