"""
Quay: content-addressed resource publishing.

Mirrors static package assets and hash-named persistent resources into a
publicly servable directory and derives their public URIs.
"""

__version__ = "0.1.0"
