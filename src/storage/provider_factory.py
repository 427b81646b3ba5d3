# src/storage/provider_factory.py - v1
"""Factory: instantiate the ordered copy provider list from configuration."""

from __future__ import annotations

from buildcache.config.settings import ConfigurationError, Settings
from buildcache.storage.base_copy_provider import BaseCopyProvider
from buildcache.storage.copy_providers import (
    CpCopyProvider,
    DittoCopyProvider,
    ShutilCopyProvider,
)


def create_copy_provider(name: str, timeout: float) -> BaseCopyProvider:
    """Create a single provider by strategy name.

    Raises:
        ConfigurationError: If the strategy name is unknown.
    """
    if name == "ditto":
        return DittoCopyProvider(timeout=timeout)
    if name == "cp":
        return CpCopyProvider(timeout=timeout)
    if name == "shutil":
        return ShutilCopyProvider()
    raise ConfigurationError(f"Unsupported copy strategy: {name!r}")


def create_copy_providers(settings: Settings | None = None) -> list[BaseCopyProvider]:
    """Create providers in the order given by COPY_STRATEGIES.

    Args:
        settings: Application settings. Defaults to ditto then cp.

    Returns:
        Ordered list of copy providers.
    """
    settings = settings or Settings()
    return [
        create_copy_provider(name, settings.copy_timeout_seconds)
        for name in settings.copy_strategies_list
    ]
