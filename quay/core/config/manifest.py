"""
Publishing Configuration Manifest.

Declarative core aggregating the specialized sub-configurations into a single
immutable object. Transforms raw inputs (YAML, CLI) into a validated manifest.

Key Features:
    * Hierarchical aggregation: Unifies publishing, storage and telemetry
      settings plus the static package registry
    * Factory polymorphism: Dual entry points via YAML files or CLI arguments
    * Relative paths (roots, log directory, package sources) are anchored to
      the YAML file's directory
"""

import argparse
from pathlib import Path
from typing import Any, Dict, Optional

from pydantic import BaseModel, ConfigDict, Field

from ..io import load_config_from_yaml
from .publishing_config import PublishingConfig
from .storage_config import StorageConfig
from .telemetry_config import TelemetryConfig
from .types import PackageKey, ValidatedPath


# MAIN CONFIGURATION
class Config(BaseModel):
    """
    Main publishing manifest aggregating specialized sub-configurations.

    Attributes:
        publishing: Publishing root, base URI, mirror mode, exclusions
        storage: Private content-addressed resource store
        telemetry: Logging destination and level
        packages: Static packages to publish, name → source directory

    Example:
        >>> cfg = Config.from_yaml(Path("recipes/publishing.yaml"))
        >>> cfg.publishing.mirror_mode
        'copy'
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    publishing: PublishingConfig = Field(default_factory=PublishingConfig)
    storage: StorageConfig = Field(default_factory=StorageConfig)
    telemetry: TelemetryConfig = Field(default_factory=TelemetryConfig)
    packages: Dict[PackageKey, ValidatedPath] = Field(default_factory=dict)

    @classmethod
    def from_yaml(cls, yaml_path: Path) -> "Config":
        """
        Factory from a YAML manifest.

        Relative roots and package sources are resolved against the directory
        containing the YAML file.
        """
        raw = load_config_from_yaml(yaml_path)
        return cls(**_anchor_paths(raw, Path(yaml_path).resolve().parent))

    @classmethod
    def from_args(cls, args: argparse.Namespace) -> "Config":
        """
        Factory from CLI arguments.

        Loads ``args.config`` when given, then applies the CLI overrides on
        top of each section.
        """
        raw: Dict[str, Any] = {}
        config_path: Optional[str] = getattr(args, "config", None)
        if config_path:
            yaml_path = Path(config_path)
            raw = _anchor_paths(load_config_from_yaml(yaml_path), yaml_path.resolve().parent)

        return cls(
            publishing=PublishingConfig.from_args(args, raw.get("publishing")),
            storage=StorageConfig.from_args(args, raw.get("storage")),
            telemetry=TelemetryConfig.from_args(args, raw.get("telemetry")),
            packages=raw.get("packages") or {},
        )


# Path-valued keys per section, anchored like the package sources
_ANCHORED_KEYS: Dict[str, tuple] = {
    "publishing": ("root", "web_root"),
    "storage": ("root",),
    "telemetry": ("log_dir",),
}


def _anchor(value: Any, anchor: Path) -> Any:
    if value is None or Path(value).expanduser().is_absolute():
        return value
    return anchor / value


def _anchor_paths(raw: Dict[str, Any], anchor: Path) -> Dict[str, Any]:
    """Resolves relative paths of a raw YAML manifest against ``anchor``."""
    anchored: Dict[str, Any] = dict(raw)
    for section, keys in _ANCHORED_KEYS.items():
        values = raw.get(section)
        if isinstance(values, dict):
            anchored[section] = {
                k: (_anchor(v, anchor) if k in keys else v) for k, v in values.items()
            }

    packages = raw.get("packages") or {}
    anchored["packages"] = {name: _anchor(source, anchor) for name, source in packages.items()}
    return anchored
