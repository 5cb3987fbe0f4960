"""
Pytest Configuration and Shared Fixtures for the Quay Test Suite.

This module provides reusable fixtures for publishing tests, including:
- A web root with a publishing root below it, isolated in tmp_path
- Publishing configurations for copy and link mode
- A sample static package tree with a server-side script
- A private resource storage pre-filled with one resource

Fixtures are automatically discovered by pytest across all test modules.
"""

# Standard Imports
import argparse
from pathlib import Path

# Third-Party Imports
import pytest

# Internal Imports
from quay.core.config import PublishingConfig
from quay.resource import Resource, ResourcePointer, ResourceStorage

SAMPLE_CONTENT = b"sample image bytes"


# LOGGING ISOLATION
@pytest.fixture(autouse=True)
def _no_debug_env(monkeypatch):
    """Keeps QUAY_DEBUG from leaking into level assertions."""
    monkeypatch.delenv("QUAY_DEBUG", raising=False)


# PUBLISHING FIXTURES
@pytest.fixture
def web_root(tmp_path) -> Path:
    """Document root of a simulated site."""
    root = tmp_path / "Web"
    root.mkdir()
    return root


@pytest.fixture
def publishing_config(web_root) -> PublishingConfig:
    """Copy-mode configuration publishing into Web/_Resources."""
    return PublishingConfig(root=web_root / "_Resources", base_uri="http://Foo/_Resources/")


@pytest.fixture
def link_config(web_root) -> PublishingConfig:
    """Link-mode configuration publishing into Web/_Resources."""
    return PublishingConfig(
        root=web_root / "_Resources", base_uri="http://Foo/_Resources/", mirror_mode="link"
    )


@pytest.fixture
def static_source(tmp_path) -> Path:
    """
    Sample package tree::

        Bar/
            Bar.txt
            Bar.php
            SubDirectory/Foo.txt
            SubDirectory/SubSubDirectory/Baz.txt
    """
    root = tmp_path / "Packages" / "Bar"
    (root / "SubDirectory" / "SubSubDirectory").mkdir(parents=True)
    (root / "Bar.txt").write_text("bar")
    (root / "Bar.php").write_text("<?php echo 'server side';")
    (root / "SubDirectory" / "Foo.txt").write_text("foo")
    (root / "SubDirectory" / "SubSubDirectory" / "Baz.txt").write_text("baz")
    return root


# RESOURCE FIXTURES
@pytest.fixture
def storage(tmp_path) -> ResourceStorage:
    """Empty private storage below tmp_path."""
    return ResourceStorage(tmp_path / "Data" / "Persistent" / "Resources")


@pytest.fixture
def stored_resource(storage) -> Resource:
    """Resource whose content already lives in ``storage``."""
    return storage.import_bytes(SAMPLE_CONTENT, filename="source.jpg")


@pytest.fixture
def make_resource():
    """Factory for resources that are not backed by stored content."""

    def _make(resource_hash: str = "a" * 40, filename=None, file_extension=None) -> Resource:
        return Resource(
            pointer=ResourcePointer(hash=resource_hash),
            filename=filename,
            file_extension=file_extension,
        )

    return _make


# CLI FIXTURES
@pytest.fixture
def empty_args() -> argparse.Namespace:
    """Namespace without any CLI overrides."""
    return argparse.Namespace(
        command="init",
        config=None,
        mirror_mode=None,
        root=None,
        base_uri=None,
        storage_root=None,
        log_dir=None,
        log_level=None,
    )
