"""
Persistent Resource Publisher.

Publishes content-addressed resources as flat files named
``<hash>[.<extension>]`` below ``<publishing root>/Persistent/``. The target
path is a pure function of the content, so an existing file is always current
and concurrent publishers converge on the same bytes.
"""

import logging
import re
from pathlib import Path
from typing import Optional

from ..core.config.publishing_config import PublishingConfig
from ..core.io import FileSystemProtocol, LocalFileSystem
from ..core.paths import LOGGER_NAME, PERSISTENT_DIR_NAME
from ..resource import Resource, SourceLocatorProtocol
from .mirror import FileMirror, MirrorProtocol

logger = logging.getLogger(LOGGER_NAME)

_SEPARATORS = re.compile(r"[ _]")
_UNSAFE_CHARACTERS = re.compile(r"[^-a-zA-Z0-9.]")


def rewrite_filename_for_uri(filename: str) -> str:
    """
    Makes a filename safe as the last URI segment.

    Spaces and underscores become dashes, anything outside ``[-A-Za-z0-9.]``
    is dropped.

    Example:
        >>> rewrite_filename_for_uri("My Holiday_Photo (1).JPG")
        'My-Holiday-Photo-1.JPG'
    """
    return _UNSAFE_CHARACTERS.sub("", _SEPARATORS.sub("-", filename))


class PersistentResourcePublisher:
    """
    Publishes and unpublishes single persistent resources.

    Attributes:
        config: Publishing configuration
        source_locator: Maps resources to their private source files
        filesystem: Filesystem port
        mirror: Copy-or-link primitive
    """

    def __init__(
        self,
        config: PublishingConfig,
        source_locator: SourceLocatorProtocol,
        filesystem: Optional[FileSystemProtocol] = None,
        mirror: Optional[MirrorProtocol] = None,
    ) -> None:
        self.config = config
        self.source_locator = source_locator
        self.filesystem = filesystem if filesystem is not None else LocalFileSystem()
        self.mirror = mirror if mirror is not None else FileMirror(config.mirror_mode, self.filesystem)

    def target_path(self, resource: Resource) -> Path:
        return self.config.persistent_root / resource.published_filename

    def build_web_uri(self, resource: Resource, base_uri: str) -> str:
        """
        Public URI ``<base>Persistent/<hash>[/<filename>]``.

        The filename segment is only appended for a non-empty filename.
        """
        uri = f"{base_uri}{PERSISTENT_DIR_NAME}/{resource.hash}"
        if resource.has_filename:
            uri = f"{uri}/{rewrite_filename_for_uri(resource.filename)}"
        return uri

    def publish(self, resource: Resource, base_uri: str) -> Optional[str]:
        """
        Publishes a resource if needed and returns its public URI.

        Args:
            resource: Resource to publish
            base_uri: Resolved base URI of the publishing root

        Returns:
            Public URI, or None if the resource is unpublished and its source
            does not exist

        Raises:
            OSError: If mirroring fails
        """
        target = self.target_path(resource)

        if self.filesystem.exists(target):
            logger.debug(f"Persistent resource {target.name} already published")
        else:
            source = self.source_locator.get_source_path(resource)
            if source is None:
                logger.warning(f"Source of persistent resource {resource.hash} does not exist")
                return None
            self.mirror.mirror(source, target)
            logger.info(f"Published persistent resource {target.name}")

        return self.build_web_uri(resource, base_uri)

    def unpublish(self, resource: Resource) -> bool:
        """
        Deletes exactly the published file of ``resource``.

        Returns:
            True if the file was removed or was already absent, False on an
            unexpected I/O error
        """
        target = self.target_path(resource)
        try:
            self.filesystem.unlink(target)
        except FileNotFoundError:
            logger.debug(f"Persistent resource {target.name} was not published")
            return True
        except OSError as e:
            logger.error(f"Failed to unpublish persistent resource {target.name}: {e}")
            return False

        logger.info(f"Unpublished persistent resource {target.name}")
        return True
