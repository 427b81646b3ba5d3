# src/cache/cache_directory.py - v1
"""Cache root location with lazy, idempotent creation."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from buildcache.config.settings import Settings

logger = logging.getLogger(__name__)


class CacheDirectory:
    """Root directory under which all cache entries are stored.

    Relative roots are anchored once, at construction, against ``base_dir``
    (the process working directory when omitted).
    """

    def __init__(self, root: str | Path, base_dir: str | Path | None = None) -> None:
        path = Path(root).expanduser()
        if not path.is_absolute():
            anchor = Path(base_dir).expanduser() if base_dir else Path.cwd()
            path = anchor / path
        self._root = path

    @classmethod
    def from_settings(
        cls, settings: Settings, base_dir: str | Path | None = None
    ) -> CacheDirectory:
        return cls(settings.cache_root, base_dir=base_dir)

    @property
    def root(self) -> Path:
        return self._root

    def exists(self) -> bool:
        return self._root.is_dir()

    def ensure_root(self) -> Path:
        """Create the root and any missing ancestors; no-op if present.

        Raises:
            OSError: If the directory cannot be created.
        """
        if not self._root.is_dir():
            self._root.mkdir(parents=True, exist_ok=True)
            logger.debug("Created cache root %s", self._root)
        return self._root

    def __repr__(self) -> str:
        return f"CacheDirectory({str(self._root)!r})"
