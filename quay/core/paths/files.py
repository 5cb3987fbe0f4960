"""
Filesystem Path Utilities.

Stateless helpers for path joining, directory management and symbolic links.
Paths are handled in unix style (forward slashes) so that generated publish
targets and URIs are stable across platforms.
"""

import os
import shutil
from pathlib import Path
from typing import Iterator, Union

PathLike = Union[str, os.PathLike]


def unix_style_path(path: PathLike) -> str:
    """Replaces backslashes and collapses duplicate slashes."""
    text = os.fspath(path).replace("\\", "/")
    # Keep the scheme separator of stream wrappers (e.g. "file://") intact
    scheme, sep, rest = text.partition("://")
    if not sep:
        scheme, rest = "", text
    while "//" in rest:
        rest = rest.replace("//", "/")
    return f"{scheme}{sep}{rest}"


def concatenate_paths(*parts: PathLike) -> str:
    """
    Joins path fragments with exactly one slash between them.

    Empty fragments are ignored. A leading slash of the first fragment and a
    trailing slash of the last one are preserved.

    Example:
        >>> concatenate_paths("/var/www/", "/_Resources", "Static/")
        '/var/www/_Resources/Static/'
    """
    fragments = [unix_style_path(p) for p in parts if os.fspath(p) != ""]
    if not fragments:
        return ""

    joined = fragments[0].rstrip("/") if len(fragments) > 1 else fragments[0]
    for fragment in fragments[1:-1]:
        joined = f"{joined}/{fragment.strip('/')}"
    if len(fragments) > 1:
        joined = f"{joined}/{fragments[-1].lstrip('/')}"

    return unix_style_path(joined)


def create_directory_recursively(path: PathLike) -> Path:
    """
    Creates a directory and all missing parents.

    Raises:
        FileExistsError: If a regular file occupies the path
    """
    directory = Path(path)
    if directory.exists() and not directory.is_dir():
        raise FileExistsError(f"Cannot create directory, a file exists at: {directory}")
    directory.mkdir(parents=True, exist_ok=True)
    return directory


def remove_directory_recursively(path: PathLike) -> None:
    """
    Removes a directory tree.

    A symbolic link to a directory is unlinked instead of being descended
    into, so the link target is never touched. Missing paths are ignored.
    """
    target = Path(path)
    if is_link(target):
        target.unlink()
    elif target.is_dir():
        shutil.rmtree(target)


def is_link(path: PathLike) -> bool:
    """Checks whether the path is a symbolic link (trailing slashes ignored)."""
    text = os.fspath(path)
    stripped = text.rstrip("/\\") or text
    return os.path.islink(stripped)


def create_symlink(source: PathLike, target: PathLike) -> Path:
    """
    Creates a symbolic link at ``target`` pointing to ``source``.

    Raises:
        OSError: If the platform or filesystem cannot create symbolic links
    """
    link = Path(target)
    source_path = Path(source)
    try:
        link.symlink_to(source_path, target_is_directory=source_path.is_dir())
    except NotImplementedError as e:
        raise OSError(f"Symbolic links are not supported on this platform: {e}") from e
    return link


def realpath(path: PathLike) -> Path:
    """Canonical absolute form with symlinks and relative segments resolved."""
    return Path(os.path.realpath(os.fspath(path)))


def iter_files_recursively(path: PathLike) -> Iterator[Path]:
    """
    Yields every regular file below ``path``, depth first.

    Within a directory, subdirectories are visited before files and both are
    sorted by name, so the order is deterministic. Symlinked directories are
    followed.

    Raises:
        NotADirectoryError: If ``path`` is not a directory
    """
    directory = Path(path)
    if not directory.is_dir():
        raise NotADirectoryError(f"Not a directory: {directory}")

    with os.scandir(directory) as scanner:
        entries = sorted(scanner, key=lambda entry: entry.name)

    subdirectories = [e for e in entries if e.is_dir()]
    files = [e for e in entries if e.is_file()]

    for entry in subdirectories:
        yield from iter_files_recursively(entry.path)
    for entry in files:
        yield Path(entry.path)
