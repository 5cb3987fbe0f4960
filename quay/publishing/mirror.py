"""
Mirror Engine.

Realizes a target path as a reproduction of a source file, either as a byte
copy carrying the source's modification time or as a symbolic link, according
to the configured mirror mode. The engine keeps no state between calls.

Freshness is decided by callers through ``needs_mirroring()``: a target whose
modification time is equal to or newer than the source's is considered
current. This is an mtime heuristic, not a content comparison.
"""

import logging
from pathlib import Path
from typing import Optional, Protocol

from ..core.config.types import MirrorMode
from ..core.io import FileSystemProtocol, LocalFileSystem
from ..core.paths import LOGGER_NAME

logger = logging.getLogger(LOGGER_NAME)


class MirrorProtocol(Protocol):
    """Copy-or-link primitive used by the publishers."""

    def mirror(self, source: Path, target: Path, force_copy: bool = False) -> None:
        """Reproduces source at target, raising OSError on failure."""
        ...  # pragma: no cover


def needs_mirroring(filesystem: FileSystemProtocol, source: Path, target: Path) -> bool:
    """
    Freshness check applied before mirroring a static file.

    Returns:
        True if target is missing or its modification time is older than
        the source's; False if target is equal or newer
    """
    target_mtime = filesystem.mtime(target)
    if target_mtime is None:
        return True
    source_mtime = filesystem.mtime(source)
    return source_mtime is not None and source_mtime > target_mtime


class FileMirror:
    """
    Default MirrorProtocol implementation on top of the filesystem port.

    Attributes:
        mode: 'copy' or 'link'
        filesystem: Filesystem port used for every operation
    """

    def __init__(
        self, mode: MirrorMode = "copy", filesystem: Optional[FileSystemProtocol] = None
    ) -> None:
        if mode not in ("copy", "link"):
            raise ValueError(f"An invalid mirror mode ({mode!r}) has been configured")
        self.mode = mode
        self.filesystem = filesystem if filesystem is not None else LocalFileSystem()

    def mirror(self, source: Path, target: Path, force_copy: bool = False) -> None:
        """
        Reproduces ``source`` at ``target``.

        Args:
            source: Existing source file
            target: Path to realize; parent directories are created
            force_copy: Copy even when the configured mode is 'link'

        Raises:
            FileExistsError: In link mode, if a non-link entry occupies target
            OSError: If copying or linking fails, or target is missing afterwards
        """
        self.filesystem.make_dirs(Path(target).parent)

        if force_copy or self.mode == "copy":
            self._copy(source, target)
        else:
            self._link(source, target)

        if not self.filesystem.exists(target):
            raise OSError(f'The resource "{source}" could not be mirrored to "{target}"')

    def _copy(self, source: Path, target: Path) -> None:
        if self.filesystem.is_link(target):
            # A link left over from link mode would be written through
            self.filesystem.unlink(target)
        self.filesystem.copy_file(source, target)
        # Equal mtimes mark the copy as current for needs_mirroring()
        self.filesystem.copy_mtime(source, target)
        logger.debug(f"Copied {source} → {target}")

    def _link(self, source: Path, target: Path) -> None:
        if self.filesystem.is_link(target):
            if self.filesystem.realpath(target) == self.filesystem.realpath(source):
                return
            self.filesystem.unlink(target)
        elif self.filesystem.exists(target):
            raise FileExistsError(
                f'Cannot link "{target}": a file that is not a symbolic link exists there'
            )

        self.filesystem.symlink(source, target)
        logger.debug(f"Linked {target} → {source}")
