"""
Filesystem Publishing Target.

This module provides FileSystemPublishingTarget, the single entry point for
callers that publish resources. It composes the static and persistent
publishers, the mirror engine and the base URI resolver around one immutable
PublishingConfig.

Architecture:
    - Dependency Injection: Every collaborator is injectable for testability
    - Protocol-Based: Filesystem, mirror, source locator and request accessor
      are replaced at their protocol boundary, never by patching internals
    - Lazy Defaults: Production collaborators are built only when not supplied

Typical Usage:
    >>> cfg = Config.from_yaml(Path("recipes/publishing.yaml"))
    >>> storage = ResourceStorage(cfg.storage.root)
    >>> target = FileSystemPublishingTarget(cfg.publishing, source_locator=storage)
    >>> target.initialize()
    >>> target.publish_static_resources(Path("Packages/Acme/Public"), "Acme")
    True
    >>> target.publish_persistent_resource(storage.import_file(Path("logo.png")))
    '/_Resources/Persistent/2aae6c35c94fcfb415dbe95f408b9ce91ee846ed/logo.png'
"""

import logging
from pathlib import Path
from typing import Callable, Dict, Mapping, Optional, TypeVar

from ..core.config.publishing_config import PublishingConfig
from ..core.io import FileSystemProtocol, LocalFileSystem
from ..core.paths import LOGGER_NAME, STATIC_DIR_NAME
from ..resource import Resource, SourceLocatorProtocol
from .base_uri import ActiveRequestProtocol, BaseUriResolver
from .mirror import FileMirror, MirrorProtocol
from .persistent import PersistentResourcePublisher
from .static import StaticResourcePublisher

logger = logging.getLogger(LOGGER_NAME)

T = TypeVar("T")


def _resolve(value: Optional[T], default_factory: Callable[[], T]) -> T:
    """
    Resolve optional dependency with lazy default instantiation.

    Args:
        value: Caller-supplied dependency, or None to use the default.
        default_factory: Zero-argument callable producing the default.

    Returns:
        The provided value, or a fresh default.
    """
    return value if value is not None else default_factory()


class _MissingSourceLocator:
    """Source locator used when none is injected: no source ever exists."""

    def get_source_path(self, resource: Resource) -> Optional[Path]:
        return None


class FileSystemPublishingTarget:
    """
    Publishes static package trees and persistent resources to a local directory.

    Attributes:
        config (PublishingConfig): Immutable publishing configuration
        filesystem (FileSystemProtocol): Port for all raw filesystem access
        mirror (MirrorProtocol): Copy-or-link primitive shared by both publishers
        base_uri_resolver (BaseUriResolver): Memoizing base URI resolver
        static_publisher (StaticResourcePublisher): Static tree publisher
        persistent_publisher (PersistentResourcePublisher): Persistent resource publisher
    """

    def __init__(
        self,
        config: PublishingConfig,
        source_locator: Optional[SourceLocatorProtocol] = None,
        request_accessor: Optional[ActiveRequestProtocol] = None,
        filesystem: Optional[FileSystemProtocol] = None,
        mirror: Optional[MirrorProtocol] = None,
        base_uri_resolver: Optional[BaseUriResolver] = None,
    ) -> None:
        """
        Initializes the target with dependency injection.

        Args:
            config: Validated publishing configuration
            source_locator: Resource → private source path (default: none found)
            request_accessor: Active request URI accessor for base URI detection
            filesystem: Filesystem port (default: LocalFileSystem())
            mirror: Mirror primitive (default: FileMirror(config.mirror_mode))
            base_uri_resolver: Base URI resolver (default: built from config)
        """
        self.config = config
        self.filesystem = _resolve(filesystem, LocalFileSystem)
        self.mirror = _resolve(mirror, lambda: FileMirror(config.mirror_mode, self.filesystem))
        self.base_uri_resolver = _resolve(
            base_uri_resolver,
            lambda: BaseUriResolver(
                web_path=config.web_path,
                configured_base_uri=config.base_uri,
                request_accessor=request_accessor,
            ),
        )

        self.static_publisher = StaticResourcePublisher(config, self.filesystem, self.mirror)
        self.persistent_publisher = PersistentResourcePublisher(
            config,
            _resolve(source_locator, _MissingSourceLocator),
            self.filesystem,
            self.mirror,
        )

    def initialize(self) -> None:
        """
        Creates the publishing root and its Persistent/ directory.

        Idempotent; safe to call on every start.

        Raises:
            OSError: If the publishing root cannot be created
        """
        self.filesystem.make_dirs(self.config.root)
        self.filesystem.make_dirs(self.config.persistent_root)
        logger.debug(f"Publishing root ready at {self.config.root}")

    def get_resources_base_uri(self) -> str:
        """Base URI of the publishing root, detected on first use."""
        return self.base_uri_resolver.resolve()

    def get_static_resources_web_base_uri(self) -> str:
        """Base URI under which static package trees are reachable."""
        return f"{self.get_resources_base_uri()}{STATIC_DIR_NAME}/"

    def publish_static_resources(self, source_dir: Path, package: str) -> bool:
        """
        Publishes a static directory as ``Static/<package>``.

        Returns:
            False if source_dir does not exist or is unreadable, else True
        """
        return self.static_publisher.publish(source_dir, package)

    def publish_all_static_resources(self, packages: Mapping[str, Path]) -> Dict[str, bool]:
        """Publishes every package of a name → source directory mapping."""
        return self.static_publisher.publish_all(packages)

    def publish_persistent_resource(self, resource: Resource) -> Optional[str]:
        """
        Publishes a persistent resource.

        Returns:
            Public URI, or None if the resource's source does not exist
        """
        return self.persistent_publisher.publish(resource, self.get_resources_base_uri())

    def unpublish_persistent_resource(self, resource: Resource) -> bool:
        """Removes the published file of a persistent resource (idempotent)."""
        return self.persistent_publisher.unpublish(resource)

    def get_persistent_resource_web_uri(self, resource: Resource) -> Optional[str]:
        """Public URI of a persistent resource, publishing it if necessary."""
        return self.publish_persistent_resource(resource)
