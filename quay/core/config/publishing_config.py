"""
Publishing Target Configuration.

Immutable manifest describing where published resources live, how files are
realized there (copy or symbolic link), which files are never published and
under which base URI they are reachable. Passed to the publishing target at
construction time; reconfiguration afterwards is not supported.
"""

import argparse
from pathlib import Path
from typing import Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field, model_validator

from ..paths import (
    DEFAULT_EXCLUDED_EXTENSIONS,
    PERSISTENT_DIR_NAME,
    PUBLISHING_ROOT,
    STATIC_DIR_NAME,
)
from .types import BaseUri, FileExtension, MirrorMode, ValidatedPath


class PublishingConfig(BaseModel):
    """
    Validated manifest for the filesystem publishing target.

    Attributes:
        root: Absolute publishing root holding ``Static/`` and ``Persistent/``
        web_root: Document root; the public URI path of ``root`` is computed
            relative to it (defaults to the parent of ``root``)
        base_uri: Optional pre-configured public base URI (ends with '/')
        mirror_mode: 'copy' duplicates bytes, 'link' creates symbolic links
        excluded_extensions: Extensions of server-side files never published
        link_whole_directories: In link mode, link a static package directory
            as a whole instead of mirroring file by file
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    root: ValidatedPath = Field(default=PUBLISHING_ROOT)
    web_root: Optional[ValidatedPath] = Field(default=None)
    base_uri: Optional[BaseUri] = Field(default=None)
    mirror_mode: MirrorMode = Field(default="copy")
    excluded_extensions: Tuple[FileExtension, ...] = Field(
        default=DEFAULT_EXCLUDED_EXTENSIONS
    )
    link_whole_directories: bool = Field(default=True)

    @model_validator(mode="after")
    def validate_web_root(self) -> "PublishingConfig":
        """
        Defaults web_root to the parent of root and checks containment.

        Raises:
            ValueError: If root does not live below web_root
        """
        if self.web_root is None:
            # Use object.__setattr__ to bypass frozen restriction
            object.__setattr__(self, "web_root", self.root.parent)

        if self.root == self.web_root or not self.root.is_relative_to(self.web_root):
            raise ValueError(
                f"Publishing root ({self.root}) must be located below web_root ({self.web_root})"
            )
        return self

    @property
    def static_root(self) -> Path:
        """Directory holding the mirrored static package trees."""
        return self.root / STATIC_DIR_NAME

    @property
    def persistent_root(self) -> Path:
        """Directory holding the flat, hash-named persistent resources."""
        return self.root / PERSISTENT_DIR_NAME

    @property
    def web_path(self) -> str:
        """Public URI path of the publishing root, with a trailing slash."""
        return self.root.relative_to(self.web_root).as_posix().strip("/") + "/"

    def is_excluded(self, filename: str) -> bool:
        """True if the file extension marks a server-side script."""
        _, dot, extension = filename.rpartition(".")
        return bool(dot) and extension.lower() in self.excluded_extensions

    @classmethod
    def from_args(cls, args: argparse.Namespace, base: Optional[dict] = None) -> "PublishingConfig":
        """
        Builds the config from YAML values overlaid with CLI overrides.

        Args:
            args: Parsed CLI namespace (only non-None overrides are applied)
            base: Raw ``publishing`` section from YAML
        """
        values = dict(base or {})
        overrides = {
            "root": getattr(args, "root", None),
            "base_uri": getattr(args, "base_uri", None),
            "mirror_mode": getattr(args, "mirror_mode", None),
        }
        values.update({k: v for k, v in overrides.items() if v is not None})
        return cls(**values)
