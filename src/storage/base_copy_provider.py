# src/storage/base_copy_provider.py - v1
"""Abstract copy provider interface.

A provider is one strategy for duplicating a directory tree. The artifact
copier tries its providers in order until one succeeds.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from pathlib import Path


class BaseCopyProvider(ABC):
    """Unified interface for directory copy strategies."""

    name: str = ""

    def is_available(self) -> bool:
        """Whether the strategy can run in this environment."""
        return True

    @abstractmethod
    def attempt_copy(self, source: Path, destination: Path) -> bool:
        """Copy ``source`` tree to ``destination``; return True on success.

        Implementations report failure through the return value and must
        not raise for ordinary copy failures.
        """

    def __repr__(self) -> str:
        return f"{type(self).__name__}(name={self.name!r})"
