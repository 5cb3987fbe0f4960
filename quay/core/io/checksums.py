"""
Content Hashing Utilities.

Computes the SHA-1 digests that identify resources by content. Two inputs with
identical bytes always produce the same 40 character hexadecimal digest.
"""

import hashlib
from pathlib import Path

# Chunk size for buffered reading
_CHUNK_SIZE = 8192


def sha1_checksum(path: Path) -> str:
    """
    Calculates the SHA-1 checksum of a file using buffered reading.

    Args:
        path (Path): Path to the file to hash.

    Returns:
        str: The calculated hexadecimal SHA-1 hash.

    Raises:
        FileNotFoundError: If the file does not exist.
    """
    digest = hashlib.sha1()
    with Path(path).open("rb") as f:
        for chunk in iter(lambda: f.read(_CHUNK_SIZE), b""):
            digest.update(chunk)
    return digest.hexdigest()


def sha1_bytes(content: bytes) -> str:
    """Hexadecimal SHA-1 digest of an in-memory payload."""
    return hashlib.sha1(content).hexdigest()
