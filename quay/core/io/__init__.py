"""
Input/Output & Persistence Utilities.

This package manages the engine's interaction with the filesystem: the
filesystem port used by every publisher, content hashing for resource
pointers, and YAML configuration serialization.
"""

from .checksums import sha1_bytes, sha1_checksum
from .filesystem import FileSystemProtocol, LocalFileSystem
from .serialization import load_config_from_yaml, save_config_as_yaml

__all__ = [
    # Filesystem port
    "FileSystemProtocol",
    "LocalFileSystem",
    # Serialization
    "load_config_from_yaml",
    "save_config_as_yaml",
    # Content hashing
    "sha1_checksum",
    "sha1_bytes",
]
