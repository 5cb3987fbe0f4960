"""
Semantic Type Definitions & Validation Primitives.

Foundational type-system for the configuration engine. Leverages Pydantic's
Annotated types and functional validators to enforce domain constraints
(path integrity, mirror modes, URI shape, package keys) before values reach
the publishing logic.
"""

import re
from pathlib import Path
from typing import Annotated, Literal
from urllib.parse import urlsplit

from pydantic import AfterValidator, Field, PlainSerializer

# Published names are plain path segments
EXTENSION_PATTERN = re.compile(r"[a-z0-9]{1,32}")
PACKAGE_KEY_PATTERN = re.compile(r"[A-Za-z0-9][A-Za-z0-9._-]{0,127}")


# VALIDATORS
def _sanitize_path(v: Path) -> Path:
    """Resolve path to absolute form without disk side-effects."""
    return v.expanduser().resolve()


def _validate_base_uri(v: str) -> str:
    """Accept absolute http(s) URIs ending with a slash, unchanged."""
    parts = urlsplit(v)
    if parts.scheme not in ("http", "https") or not parts.netloc:
        raise ValueError(f"base_uri must be an absolute http(s) URI, got {v!r}")
    if not v.endswith("/"):
        raise ValueError(f"base_uri must end with '/', got {v!r}")
    return v


def _normalize_extension(v: str) -> str:
    """Lowercase extension without leading dot, 1 to 32 letters or digits."""
    normalized = v.strip().lstrip(".").lower()
    if not EXTENSION_PATTERN.fullmatch(normalized):
        raise ValueError(f"File extension must be 1 to 32 letters or digits, got {v!r}")
    return normalized


def is_package_key(v: str) -> bool:
    """True if v is usable as a directory name below Static/."""
    return bool(PACKAGE_KEY_PATTERN.fullmatch(v))


# FILESYSTEM
ValidatedPath = Annotated[
    Path,
    AfterValidator(_sanitize_path),
    PlainSerializer(lambda v: str(v), when_used="json", return_type=str),
]

# PUBLISHING
MirrorMode = Literal["copy", "link"]

BaseUri = Annotated[str, AfterValidator(_validate_base_uri)]

FileExtension = Annotated[str, AfterValidator(_normalize_extension)]

# Package keys become directory names below Static/
PackageKey = Annotated[
    str, Field(pattern=f"^{PACKAGE_KEY_PATTERN.pattern}$", min_length=1, max_length=128)
]

# SYSTEM
LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
