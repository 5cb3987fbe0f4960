"""
Configuration Package Initialization.

Provides a unified, flat public API for configuration components while
avoiding eager imports of pydantic and YAML for callers that only need the
path utilities or the filesystem port.

Architecture:
    - Lazy Import Pattern (PEP 562): Uses __getattr__ for on-demand loading
    - Flat API: All configs accessible from quay.core.config namespace
    - Caching: Loaded attributes cached in globals() after first access

Example:
    >>> from quay.core.config import Config, PublishingConfig
    >>> cfg = Config.from_args(args)
"""

from __future__ import annotations

from importlib import import_module
from typing import Any

__all__ = [
    "Config",
    "PublishingConfig",
    "StorageConfig",
    "TelemetryConfig",
    "ValidatedPath",
    "MirrorMode",
    "BaseUri",
]

# LAZY IMPORTS MAPPING
_LAZY_IMPORTS: dict[str, str] = {
    "Config": "quay.core.config.manifest",
    "PublishingConfig": "quay.core.config.publishing_config",
    "StorageConfig": "quay.core.config.storage_config",
    "TelemetryConfig": "quay.core.config.telemetry_config",
    "ValidatedPath": "quay.core.config.types",
    "MirrorMode": "quay.core.config.types",
    "BaseUri": "quay.core.config.types",
}


# LAZY LOADER FUNCTION
def __getattr__(name: str) -> Any:
    """Lazily import configuration components on first access."""
    if name not in _LAZY_IMPORTS:
        raise AttributeError(f"module {__name__!r} has no attribute {name!r}")

    module = import_module(_LAZY_IMPORTS[name])
    attr = getattr(module, name)

    # Cache on module for future access
    globals()[name] = attr
    return attr


# DIR SUPPORT
def __dir__() -> list[str]:
    """Support for dir() and IDE auto-completion."""
    return sorted(__all__)
