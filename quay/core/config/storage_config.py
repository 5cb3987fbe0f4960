"""
Private Resource Storage Configuration.

Location of the content-addressed store from which persistent resources are
published. Files there are named by their SHA-1 hash and are never served
directly.
"""

import argparse
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from ..paths import STORAGE_ROOT
from .types import ValidatedPath


class StorageConfig(BaseModel):
    """Validated manifest for the private resource store."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    root: ValidatedPath = Field(
        default=STORAGE_ROOT, description="Directory of hash-named private resources"
    )

    @classmethod
    def from_args(cls, args: argparse.Namespace, base: Optional[dict] = None) -> "StorageConfig":
        values = dict(base or {})
        if getattr(args, "storage_root", None) is not None:
            values["root"] = args.storage_root
        return cls(**values)
