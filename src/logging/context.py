# src/logging/context.py - v2
"""Contextual logging support: attach operation, platform and fingerprint to log records."""

from __future__ import annotations

import contextvars
from collections.abc import Iterator
from contextlib import contextmanager
from dataclasses import dataclass
from typing import Any

# Context variables for structured logging, set per cache operation.
_operation: contextvars.ContextVar[str | None] = contextvars.ContextVar(
    "operation", default=None
)
_platform: contextvars.ContextVar[str | None] = contextvars.ContextVar(
    "platform", default=None
)
_fingerprint_hash: contextvars.ContextVar[str | None] = contextvars.ContextVar(
    "fingerprint_hash", default=None
)


@dataclass
class LogContext:
    """Immutable snapshot of current logging context."""

    operation: str | None = None
    platform: str | None = None
    fingerprint_hash: str | None = None

    def as_dict(self) -> dict[str, Any]:
        """Return non-None fields as dict for JSON log injection."""
        return {k: v for k, v in self.__dict__.items() if v is not None}


def get_context() -> LogContext:
    """Snapshot current context variables."""
    return LogContext(
        operation=_operation.get(),
        platform=_platform.get(),
        fingerprint_hash=_fingerprint_hash.get(),
    )


def set_operation_context(operation: str, platform: str, fingerprint_hash: str) -> None:
    """Set context for one cache operation."""
    _operation.set(operation)
    _platform.set(platform)
    _fingerprint_hash.set(fingerprint_hash)


@contextmanager
def operation_context(
    operation: str, platform: str, fingerprint_hash: str
) -> Iterator[None]:
    """Scope the operation context to a block, restoring the previous one after."""
    tokens = (
        _operation.set(operation),
        _platform.set(platform),
        _fingerprint_hash.set(fingerprint_hash),
    )
    try:
        yield
    finally:
        _fingerprint_hash.reset(tokens[2])
        _platform.reset(tokens[1])
        _operation.reset(tokens[0])


def clear_context() -> None:
    """Reset all context variables."""
    _operation.set(None)
    _platform.set(None)
    _fingerprint_hash.set(None)
