# src/storage/copy_providers.py - v1
"""Built-in directory copy providers.

- ditto: macOS bundle-aware copy, preserves resource forks and attributes
- cp: portable ``cp -R`` recursive copy
- shutil: in-process ``shutil.copytree``, no external executable needed
"""

from __future__ import annotations

import logging
import shutil
import subprocess
from pathlib import Path

from buildcache.storage.base_copy_provider import BaseCopyProvider

logger = logging.getLogger(__name__)

DEFAULT_TIMEOUT_SECONDS = 600.0


class SubprocessCopyProvider(BaseCopyProvider):
    """Copy provider backed by an external executable.

    Success means the process exited with status 0. A missing executable,
    an OS error or a timeout count as a failed attempt.
    """

    executable: str = ""

    def __init__(self, timeout: float = DEFAULT_TIMEOUT_SECONDS) -> None:
        self._timeout = timeout

    def build_command(self, source: Path, destination: Path) -> list[str]:
        raise NotImplementedError

    def is_available(self) -> bool:
        return shutil.which(self.executable) is not None

    def attempt_copy(self, source: Path, destination: Path) -> bool:
        command = self.build_command(source, destination)
        logger.debug("Running %s", " ".join(command))
        try:
            result = subprocess.run(
                command,
                capture_output=True,
                text=True,
                timeout=self._timeout,
                check=False,
            )
        except subprocess.TimeoutExpired:
            logger.warning(
                "%s timed out after %.0fs copying %s", self.name, self._timeout, source
            )
            return False
        except OSError as e:
            logger.warning("%s could not be started: %s", self.name, e)
            return False

        if result.returncode != 0:
            stderr = (result.stderr or "").strip()
            logger.warning(
                "%s exited with status %d: %s",
                self.name, result.returncode, stderr,
                extra={"data": {
                    "strategy": self.name,
                    "command": command,
                    "returncode": result.returncode,
                    "stderr": stderr,
                }},
            )
            return False
        return True


class DittoCopyProvider(SubprocessCopyProvider):
    """``ditto <src> <dst>``, suited to .app bundles."""

    name = "ditto"
    executable = "ditto"

    def build_command(self, source: Path, destination: Path) -> list[str]:
        return [self.executable, str(source), str(destination)]


class CpCopyProvider(SubprocessCopyProvider):
    """``cp -R <src> <dst>``."""

    name = "cp"
    executable = "cp"

    def build_command(self, source: Path, destination: Path) -> list[str]:
        return [self.executable, "-R", str(source), str(destination)]


class ShutilCopyProvider(BaseCopyProvider):
    """In-process recursive copy. Symlinks inside the tree are kept as links."""

    name = "shutil"

    def attempt_copy(self, source: Path, destination: Path) -> bool:
        try:
            shutil.copytree(str(source), str(destination), symlinks=True)
        except (OSError, shutil.Error) as e:
            logger.warning("shutil copy of %s failed: %s", source, e)
            return False
        return True
