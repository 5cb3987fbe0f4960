"""
Resource Model Package.

Value objects for content-addressed resources and the private storage they
are published from.
"""

from .pointer import ResourcePointer
from .resource import Resource
from .storage import ResourceStorage, SourceLocatorProtocol

__all__ = [
    "ResourcePointer",
    "Resource",
    "ResourceStorage",
    "SourceLocatorProtocol",
]
