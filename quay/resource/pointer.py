"""
Content Pointer Value Object.

A ResourcePointer identifies resource bytes by their SHA-1 hash. Identity and
equality are by hash alone, so any number of logical resources with the same
content collapse onto one pointer and one published file.
"""

from pathlib import Path
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

from ..core.io import sha1_bytes, sha1_checksum


class ResourcePointer(BaseModel):
    """
    Immutable pointer to resource content.

    Attributes:
        hash: 40 character lowercase hexadecimal SHA-1 digest
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    hash: str = Field(..., pattern=r"^[0-9a-f]{40}$", description="SHA-1 of the content")

    @field_validator("hash", mode="before")
    @classmethod
    def _lowercase_hash(cls, v: Any) -> Any:
        return v.strip().lower() if isinstance(v, str) else v

    @classmethod
    def from_file(cls, path: Path) -> "ResourcePointer":
        """Pointer for the content of a file on disk."""
        return cls(hash=sha1_checksum(path))

    @classmethod
    def from_bytes(cls, content: bytes) -> "ResourcePointer":
        """Pointer for an in-memory payload."""
        return cls(hash=sha1_bytes(content))

    def __str__(self) -> str:
        return self.hash

    def __repr__(self) -> str:
        return f"<ResourcePointer: {self.hash}>"
