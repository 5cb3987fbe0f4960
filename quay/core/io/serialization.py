"""
Configuration Serialization Utilities.

Loads YAML configuration manifests from disk and writes the effective
configuration back, converting Path objects into plain strings so the output
stays environment-agnostic.
"""

import logging
import os
from pathlib import Path
from typing import Any, Dict

import yaml

from ..paths import LOGGER_NAME

logger = logging.getLogger(LOGGER_NAME)


def load_config_from_yaml(yaml_path: Path) -> Dict[str, Any]:
    """
    Loads a raw configuration dictionary from a YAML file.

    Args:
        yaml_path (Path): Path to the source YAML file.

    Returns:
        Dict[str, Any]: The loaded configuration manifest (empty for an empty file).

    Raises:
        FileNotFoundError: If the specified path does not exist.
        ValueError: If the document root is not a mapping.
    """
    yaml_path = Path(yaml_path)
    if not yaml_path.exists():
        raise FileNotFoundError(f"YAML configuration file not found at: {yaml_path}")

    with open(yaml_path, "r", encoding="utf-8") as f:
        data = yaml.safe_load(f)

    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ValueError(
            f"YAML configuration must be a mapping, got {type(data).__name__} in {yaml_path}"
        )
    return data


def save_config_as_yaml(data: Any, yaml_path: Path) -> Path:
    """
    Saves a configuration object as a YAML file.

    Args:
        data (Any): The configuration data (Pydantic model or dict).
        yaml_path (Path): The target filesystem path for the YAML file.

    Returns:
        Path: The path where the configuration was stored.
    """
    raw_dict = data.model_dump(mode="json") if hasattr(data, "model_dump") else data
    final_data = _sanitize_for_yaml(raw_dict)

    yaml_path = Path(yaml_path)
    yaml_path.parent.mkdir(parents=True, exist_ok=True)
    with open(yaml_path, "w", encoding="utf-8") as f:
        yaml.safe_dump(final_data, f, default_flow_style=False, sort_keys=False, indent=4)
        f.flush()
        os.fsync(f.fileno())

    logger.info(f"Configuration written to → {yaml_path}")
    return yaml_path


def _sanitize_for_yaml(obj: Any) -> Any:
    """Recursively converts Path objects and tuples into YAML-safe types."""
    if isinstance(obj, dict):
        return {k: _sanitize_for_yaml(v) for k, v in obj.items()}
    if isinstance(obj, (list, tuple)):
        return [_sanitize_for_yaml(i) for i in obj]
    if isinstance(obj, Path):
        return str(obj)
    return obj
