"""
Core Utilities Package

This package exposes the essential components for configuration, logging,
filesystem access and project constants shared by the publishing engine.
"""

# Command Line Interface
from .cli import parse_args

# Configuration
from .config import Config, PublishingConfig, StorageConfig, TelemetryConfig

# Input/Output Utilities
from .io import (
    FileSystemProtocol,
    LocalFileSystem,
    load_config_from_yaml,
    save_config_as_yaml,
    sha1_bytes,
    sha1_checksum,
)

# Logging
from .logger import Logger, LogStyle, Reporter, ReporterProtocol

# Constants & Paths
from .paths import (
    LOGGER_NAME,
    PERSISTENT_DIR_NAME,
    PROJECT_ROOT,
    PUBLISHING_ROOT,
    STATIC_DIR_NAME,
    STORAGE_ROOT,
    WEB_ROOT,
    get_project_root,
)

# Public Interface
__all__ = [
    # Configuration
    "Config",
    "PublishingConfig",
    "StorageConfig",
    "TelemetryConfig",
    # Constants & Paths
    "PROJECT_ROOT",
    "WEB_ROOT",
    "PUBLISHING_ROOT",
    "STORAGE_ROOT",
    "LOGGER_NAME",
    "STATIC_DIR_NAME",
    "PERSISTENT_DIR_NAME",
    "get_project_root",
    # Logging
    "Logger",
    "Reporter",
    "ReporterProtocol",
    "LogStyle",
    # I/O
    "FileSystemProtocol",
    "LocalFileSystem",
    "load_config_from_yaml",
    "save_config_as_yaml",
    "sha1_checksum",
    "sha1_bytes",
    # CLI
    "parse_args",
]
