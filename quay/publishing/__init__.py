"""
Resource Publishing Package.

Mirrors static package trees and content-addressed persistent resources into
a publicly servable directory and derives their public URIs.
"""

from .base_uri import ActiveRequestProtocol, BaseUriResolver, StaticRequestAccessor, site_root_uri
from .mirror import FileMirror, MirrorProtocol, needs_mirroring
from .persistent import PersistentResourcePublisher, rewrite_filename_for_uri
from .static import StaticResourcePublisher, TreeMirrorStats
from .target import FileSystemPublishingTarget

__all__ = [
    # Facade
    "FileSystemPublishingTarget",
    # Publishers
    "StaticResourcePublisher",
    "PersistentResourcePublisher",
    "TreeMirrorStats",
    "rewrite_filename_for_uri",
    # Mirror engine
    "FileMirror",
    "MirrorProtocol",
    "needs_mirroring",
    # Base URI
    "BaseUriResolver",
    "ActiveRequestProtocol",
    "StaticRequestAccessor",
    "site_root_uri",
]
