"""
Static Path Constants & Project Root Discovery.

Defines the fixed names of the publishing layout and the default locations
used when no configuration overrides them:

    <publishing root>/Static/<package>/<relative path>
    <publishing root>/Persistent/<hash>[.<extension>]
    <storage root>/<hash>
"""

import os
from pathlib import Path
from typing import Final

# Global logger identity shared by every module
LOGGER_NAME: Final[str] = "quay"

# Publishing layout
STATIC_DIR_NAME: Final[str] = "Static"
PERSISTENT_DIR_NAME: Final[str] = "Persistent"

# Files carrying these extensions run on the server and are never published
DEFAULT_EXCLUDED_EXTENSIONS: Final[tuple[str, ...]] = ("php",)

_ROOT_MARKERS: Final[tuple[str, ...]] = (".git", "pyproject.toml", "recipes")


def get_project_root() -> Path:
    """
    Locates the project root directory.

    Honors the ``QUAY_ROOT`` environment variable first, then walks up from
    this file looking for a marker (``.git``, ``pyproject.toml``, ``recipes``).
    Falls back to the current working directory when nothing matches.

    Returns:
        Absolute path of the project root
    """
    env_root = os.getenv("QUAY_ROOT")
    if env_root:
        return Path(env_root).expanduser().resolve()

    current = Path(__file__).resolve().parent
    for parent in current.parents:
        if any((parent / marker).exists() for marker in _ROOT_MARKERS):
            return parent

    return Path.cwd().resolve()


PROJECT_ROOT: Final[Path] = get_project_root()

# Default public and private roots
WEB_ROOT: Final[Path] = PROJECT_ROOT / "Web"
PUBLISHING_ROOT: Final[Path] = WEB_ROOT / "_Resources"
STORAGE_ROOT: Final[Path] = PROJECT_ROOT / "Data" / "Persistent" / "Resources"
