"""
Resource Value Object.

A Resource couples a content pointer with the human facing filename it was
imported under. Resources are created by the storage layer (or any external
resource manager) and are only read by the publishing engine.
"""

from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field, model_validator

from ..core.config.types import EXTENSION_PATTERN, FileExtension
from .pointer import ResourcePointer


class Resource(BaseModel):
    """
    Immutable resource description.

    Attributes:
        pointer: Content pointer (hash of the bytes)
        filename: Original filename, may be empty or absent
        file_extension: Lowercase alphanumeric extension without dot; derived
            from the filename when not given explicitly
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    pointer: ResourcePointer
    filename: Optional[str] = Field(default=None)
    file_extension: Optional[FileExtension] = Field(default=None)

    @model_validator(mode="before")
    @classmethod
    def derive_file_extension(cls, values: Any) -> Any:
        """
        Fills in and normalizes the extension.

        Logic:
        1. An explicit file_extension is kept (lowercased, leading dot removed)
           and must consist of letters and digits only
        2. Otherwise the text after the last dot of filename is used, unless
           it is not a plain alphanumeric suffix
        3. Empty results are stored as None
        """
        if not isinstance(values, dict):
            return values

        values = dict(values)
        extension = values.get("file_extension")
        if extension is None:
            filename = values.get("filename") or ""
            base, dot, suffix = filename.rpartition(".")
            extension = suffix.lower() if dot and base else ""
            if not EXTENSION_PATTERN.fullmatch(extension):
                extension = ""

        extension = extension.strip().lstrip(".").lower()
        values["file_extension"] = extension or None
        return values

    @property
    def hash(self) -> str:
        """Shortcut for the pointer hash."""
        return self.pointer.hash

    @property
    def published_filename(self) -> str:
        """Content-addressed filename: ``<hash>[.<extension>]``."""
        if self.file_extension:
            return f"{self.pointer.hash}.{self.file_extension}"
        return self.pointer.hash

    @property
    def has_filename(self) -> bool:
        """True unless the filename is absent or empty."""
        return bool(self.filename)

    def __repr__(self) -> str:
        return f"<Resource: {self.published_filename} ({self.filename or 'unnamed'})>"
