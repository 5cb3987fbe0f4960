"""
Static Tree Publisher.

Publishes a package's public asset directory under
``<publishing root>/Static/<package>/``, preserving its relative structure.
Server-side scripts (by extension) are never published. Each file is mirrored
independently and skipped while its published copy is current.

In link mode the whole directory may instead be published as one symbolic
link; files reachable through the public path are the same either way.
"""

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Dict, Mapping, Optional

from ..core.config.publishing_config import PublishingConfig
from ..core.config.types import is_package_key
from ..core.io import FileSystemProtocol, LocalFileSystem
from ..core.paths import LOGGER_NAME
from .mirror import FileMirror, MirrorProtocol, needs_mirroring

logger = logging.getLogger(LOGGER_NAME)


@dataclass
class TreeMirrorStats:
    """Counters collected while mirroring one package tree."""

    mirrored: int = 0
    skipped: int = 0
    excluded: int = 0


class StaticResourcePublisher:
    """
    Mirrors static package directories into the publishing root.

    Attributes:
        config: Publishing configuration
        filesystem: Filesystem port
        mirror: Copy-or-link primitive invoked per file
    """

    def __init__(
        self,
        config: PublishingConfig,
        filesystem: Optional[FileSystemProtocol] = None,
        mirror: Optional[MirrorProtocol] = None,
    ) -> None:
        self.config = config
        self.filesystem = filesystem if filesystem is not None else LocalFileSystem()
        self.mirror = mirror if mirror is not None else FileMirror(config.mirror_mode, self.filesystem)

    def target_path(self, package: str) -> Path:
        return self.config.static_root / package

    def publish(self, source_dir: Path, package: str) -> bool:
        """
        Publishes every eligible file of ``source_dir`` as ``package``.

        Args:
            source_dir: Private directory holding the package's public assets
            package: Name of the directory created below ``Static/``

        Returns:
            False if package is not a plain directory name, or if source_dir
            is missing, not a directory or unreadable;
            True once the tree has been published

        Raises:
            OSError: If mirroring a file fails (the call aborts, no rollback)
        """
        if not is_package_key(package):
            logger.error(f"Invalid package name {package!r}: expected a single directory name")
            return False

        source_dir = Path(source_dir)
        if not self.filesystem.is_dir(source_dir) or not self.filesystem.is_readable(source_dir):
            logger.warning(f"Static resources of '{package}' not found or unreadable: {source_dir}")
            return False

        source_dir = self.filesystem.realpath(source_dir)
        target_dir = self.target_path(package)

        if self.config.mirror_mode == "link" and self.config.link_whole_directories:
            if self._link_directory(source_dir, target_dir):
                return True
        elif self.filesystem.is_link(target_dir):
            logger.debug(f"Replacing directory link {target_dir} with mirrored files")
            self.filesystem.unlink(target_dir)

        stats = self._mirror_tree(source_dir, target_dir)
        logger.info(
            f"Published static resources of '{package}': {stats.mirrored} mirrored, "
            f"{stats.skipped} up to date, {stats.excluded} excluded"
        )
        return True

    def publish_all(self, packages: Mapping[str, Path]) -> Dict[str, bool]:
        """Publishes several packages, returning the outcome per package."""
        return {name: self.publish(source, name) for name, source in packages.items()}

    def _link_directory(self, source_dir: Path, target_dir: Path) -> bool:
        """
        Links target_dir to source_dir as a whole.

        Returns:
            False if a real directory occupies target_dir, so the caller
            falls back to per-file mirroring
        """
        if self.filesystem.is_link(target_dir):
            if self.filesystem.realpath(target_dir) == source_dir:
                logger.debug(f"Static link {target_dir} is up to date")
                return True
            self.filesystem.unlink(target_dir)
        elif self.filesystem.is_dir(target_dir):
            logger.debug(f"{target_dir} is a real directory, mirroring file by file")
            return False

        self.filesystem.make_dirs(target_dir.parent)
        self.filesystem.symlink(source_dir, target_dir)
        logger.info(f"Linked static resources {target_dir} → {source_dir}")
        return True

    def _is_stale(self, source_file: Path, target_file: Path) -> bool:
        # Copy mode never keeps a per-file link left by link mode
        if self.config.mirror_mode == "copy" and self.filesystem.is_link(target_file):
            return True
        return needs_mirroring(self.filesystem, source_file, target_file)

    def _mirror_tree(self, source_dir: Path, target_dir: Path) -> TreeMirrorStats:
        stats = TreeMirrorStats()
        for source_file in self.filesystem.iter_files(source_dir):
            if self.config.is_excluded(source_file.name):
                stats.excluded += 1
                continue

            target_file = target_dir / source_file.relative_to(source_dir)
            if not self._is_stale(source_file, target_file):
                stats.skipped += 1
                continue

            self.mirror.mirror(source_file, target_file)
            stats.mirrored += 1
        return stats
