"""
Private Content-Addressed Resource Storage.

Imports files or payloads into ``<storage root>/<hash>`` and locates them again
for publishing. Identical content is stored once, whatever filename it was
imported under.
"""

import logging
import tempfile
from pathlib import Path
from typing import Optional, Protocol

from ..core.io import FileSystemProtocol, LocalFileSystem
from ..core.paths import LOGGER_NAME
from .pointer import ResourcePointer
from .resource import Resource

logger = logging.getLogger(LOGGER_NAME)


class SourceLocatorProtocol(Protocol):
    """Maps a resource to the absolute path of its private source file."""

    def get_source_path(self, resource: Resource) -> Optional[Path]:
        """Source path, or None if the source does not exist."""
        ...  # pragma: no cover


class ResourceStorage:
    """
    Default SourceLocatorProtocol backed by a hash-named directory.

    Attributes:
        root: Storage directory
        filesystem: Filesystem port used for all disk access
    """

    def __init__(self, root: Path, filesystem: Optional[FileSystemProtocol] = None) -> None:
        self.root = Path(root)
        self.filesystem = filesystem if filesystem is not None else LocalFileSystem()

    def path_for(self, pointer: ResourcePointer) -> Path:
        return self.root / pointer.hash

    def get_source_path(self, resource: Resource) -> Optional[Path]:
        path = self.path_for(resource.pointer)
        return path if self.filesystem.exists(path) else None

    def import_file(self, source: Path, filename: Optional[str] = None) -> Resource:
        """
        Imports a file into the store.

        Args:
            source: File to import
            filename: Original filename to record (default: source basename)

        Returns:
            Resource pointing at the stored content

        Raises:
            FileNotFoundError: If source is not an existing file
        """
        source = Path(source)
        if not source.is_file():
            raise FileNotFoundError(f"Cannot import resource, file not found: {source}")

        pointer = ResourcePointer.from_file(source)
        target = self.path_for(pointer)
        if self.filesystem.exists(target):
            logger.debug(f"Resource content {pointer.hash} already stored")
        else:
            self.filesystem.make_dirs(self.root)
            self.filesystem.copy_file(source, target)
            logger.info(f"Imported {source.name} as {pointer.hash}")

        return Resource(pointer=pointer, filename=filename if filename is not None else source.name)

    def import_bytes(self, content: bytes, filename: Optional[str] = None) -> Resource:
        """Imports an in-memory payload into the store."""
        pointer = ResourcePointer.from_bytes(content)
        target = self.path_for(pointer)
        if not self.filesystem.exists(target):
            self.filesystem.make_dirs(self.root)
            # Write beside the target first so a partial file is never visible
            with tempfile.NamedTemporaryFile(dir=self.root, delete=False) as handle:
                handle.write(content)
                staged = Path(handle.name)
            staged.replace(target)
            logger.info(f"Imported {len(content)} bytes as {pointer.hash}")

        return Resource(pointer=pointer, filename=filename)
