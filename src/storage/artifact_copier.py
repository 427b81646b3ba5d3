# src/storage/artifact_copier.py - v1
"""Materialize an artifact (file or directory tree) at a destination path.

The destination is always replaced, never merged: existing content is
removed before copying. Directory trees go through an ordered list of copy
providers, falling back to the next one when a provider fails. Single files
are duplicated directly.
"""

from __future__ import annotations

import logging
import shutil
from dataclasses import dataclass
from pathlib import Path

from buildcache.storage.base_copy_provider import BaseCopyProvider

logger = logging.getLogger(__name__)

FILE_STRATEGY = "file"


@dataclass(frozen=True)
class CopyOutcome:
    """Result of a copy. Truthy when the copy succeeded."""

    success: bool
    strategy: str | None = None
    error: str | None = None

    def __bool__(self) -> bool:
        return self.success


def clear_destination(path: Path) -> None:
    """Remove whatever is at ``path``: a directory tree, a file or a symlink."""
    if path.is_symlink() or path.is_file():
        path.unlink()
    elif path.is_dir():
        shutil.rmtree(path)
    elif path.exists():
        path.unlink()


class ArtifactCopier:
    """Copy artifacts using an ordered list of directory copy providers."""

    def __init__(self, providers: list[BaseCopyProvider]) -> None:
        if not providers:
            raise ValueError("ArtifactCopier requires at least one copy provider")
        self._providers = list(providers)

    @property
    def providers(self) -> list[BaseCopyProvider]:
        return list(self._providers)

    def copy(self, source: Path, destination: Path) -> CopyOutcome:
        """Replace ``destination`` with a copy of ``source``.

        Never raises: failures, including unexpected exceptions, are
        reported through the returned outcome.
        """
        source = Path(source)
        destination = Path(destination)
        try:
            if source.is_dir():
                return self.copy_directory(source, destination)
            return self.copy_file(source, destination)
        except Exception as e:  # noqa: BLE001
            logger.error("Copy %s -> %s failed: %s", source, destination, e, exc_info=True)
            return CopyOutcome(success=False, error=str(e))

    def copy_file(self, source: Path, destination: Path) -> CopyOutcome:
        """Duplicate a single regular file."""
        self._prepare_destination(destination)
        shutil.copy2(str(source), str(destination))
        logger.debug("Copied file %s -> %s", source, destination)
        return CopyOutcome(success=True, strategy=FILE_STRATEGY)

    def copy_directory(self, source: Path, destination: Path) -> CopyOutcome:
        """Copy a directory tree, trying each provider in order."""
        self._prepare_destination(destination)

        attempted: list[str] = []
        for provider in self._providers:
            if not provider.is_available():
                logger.debug("Copy strategy %s unavailable, skipping", provider.name)
                continue
            if attempted:
                logger.info(
                    "Falling back to %s after %s failed", provider.name, attempted[-1]
                )
                # Drop partial output from the failed attempt
                clear_destination(destination)
            attempted.append(provider.name)
            if provider.attempt_copy(source, destination):
                logger.debug(
                    "Copied directory %s -> %s via %s", source, destination, provider.name
                )
                return CopyOutcome(success=True, strategy=provider.name)

        if not attempted:
            error = "no copy strategy available"
        else:
            error = f"all copy strategies failed: {', '.join(attempted)}"
        logger.error("Failed to copy directory %s: %s", source, error)
        return CopyOutcome(success=False, error=error)

    @staticmethod
    def _prepare_destination(destination: Path) -> None:
        destination.parent.mkdir(parents=True, exist_ok=True)
        if destination.exists() or destination.is_symlink():
            clear_destination(destination)
