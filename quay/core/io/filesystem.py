"""
Filesystem Port.

Every raw filesystem operation performed by the publishing engine (stat,
copy, link, mkdir, unlink, traversal) goes through ``FileSystemProtocol``.
``LocalFileSystem`` is the production implementation; tests substitute
mocks or fakes at this boundary.
"""

import os
import shutil
from pathlib import Path
from typing import Iterator, Optional, Protocol

from ..paths import files


class FileSystemProtocol(Protocol):
    """Narrow set of filesystem operations used by the publishing engine."""

    def exists(self, path: Path) -> bool:
        """True if something (file, directory or valid link) is at path."""
        ...  # pragma: no cover

    def is_dir(self, path: Path) -> bool:
        """True if path is a directory (links are followed)."""
        ...  # pragma: no cover

    def is_link(self, path: Path) -> bool:
        """True if path itself is a symbolic link."""
        ...  # pragma: no cover

    def is_readable(self, path: Path) -> bool:
        """True if the current process may read path."""
        ...  # pragma: no cover

    def mtime(self, path: Path) -> Optional[float]:
        """Modification time in seconds, or None if path does not exist."""
        ...  # pragma: no cover

    def copy_file(self, source: Path, target: Path) -> None:
        """Byte-for-byte copy of source to target."""
        ...  # pragma: no cover

    def copy_mtime(self, source: Path, target: Path) -> None:
        """Gives target the exact access and modification times of source."""
        ...  # pragma: no cover

    def symlink(self, source: Path, target: Path) -> None:
        """Creates a symbolic link at target pointing to source."""
        ...  # pragma: no cover

    def unlink(self, path: Path) -> None:
        """Removes a file or symbolic link."""
        ...  # pragma: no cover

    def make_dirs(self, path: Path) -> None:
        """Creates path and all missing parents."""
        ...  # pragma: no cover

    def remove_tree(self, path: Path) -> None:
        """Removes a directory tree (links are unlinked, not followed)."""
        ...  # pragma: no cover

    def realpath(self, path: Path) -> Path:
        """Canonical absolute form of path."""
        ...  # pragma: no cover

    def iter_files(self, path: Path) -> Iterator[Path]:
        """Every regular file below path, depth first."""
        ...  # pragma: no cover


class LocalFileSystem:
    """Default implementation of FileSystemProtocol on the local disk."""

    def exists(self, path: Path) -> bool:
        return Path(path).exists()

    def is_dir(self, path: Path) -> bool:
        return Path(path).is_dir()

    def is_link(self, path: Path) -> bool:
        return files.is_link(path)

    def is_readable(self, path: Path) -> bool:
        return os.access(path, os.R_OK)

    def mtime(self, path: Path) -> Optional[float]:
        try:
            return Path(path).stat().st_mtime
        except FileNotFoundError:
            return None

    def copy_file(self, source: Path, target: Path) -> None:
        shutil.copyfile(source, target)

    def copy_mtime(self, source: Path, target: Path) -> None:
        stat = os.stat(source)
        os.utime(target, ns=(stat.st_atime_ns, stat.st_mtime_ns))

    def symlink(self, source: Path, target: Path) -> None:
        files.create_symlink(source, target)

    def unlink(self, path: Path) -> None:
        Path(path).unlink()

    def make_dirs(self, path: Path) -> None:
        files.create_directory_recursively(path)

    def remove_tree(self, path: Path) -> None:
        files.remove_directory_recursively(path)

    def realpath(self, path: Path) -> Path:
        return files.realpath(path)

    def iter_files(self, path: Path) -> Iterator[Path]:
        return files.iter_files_recursively(path)
