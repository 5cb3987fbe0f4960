"""
Filesystem Authority and Path Utilities Package.

This package centralizes all path-related logic for the publishing engine.
It provides a dual-layer approach:
1. Static: Project root, layout names and default roots via 'constants'.
2. Utilities: Stateless path joining, directory and symlink helpers via 'files'.
"""

# Public Interface
from .constants import (
    DEFAULT_EXCLUDED_EXTENSIONS,
    LOGGER_NAME,
    PERSISTENT_DIR_NAME,
    PROJECT_ROOT,
    PUBLISHING_ROOT,
    STATIC_DIR_NAME,
    STORAGE_ROOT,
    WEB_ROOT,
    get_project_root,
)
from .files import (
    concatenate_paths,
    create_directory_recursively,
    create_symlink,
    is_link,
    iter_files_recursively,
    realpath,
    remove_directory_recursively,
    unix_style_path,
)

# Export Schema
__all__ = [
    "PROJECT_ROOT",
    "WEB_ROOT",
    "PUBLISHING_ROOT",
    "STORAGE_ROOT",
    "LOGGER_NAME",
    "STATIC_DIR_NAME",
    "PERSISTENT_DIR_NAME",
    "DEFAULT_EXCLUDED_EXTENSIONS",
    "get_project_root",
    "concatenate_paths",
    "create_directory_recursively",
    "create_symlink",
    "is_link",
    "iter_files_recursively",
    "realpath",
    "remove_directory_recursively",
    "unix_style_path",
]
