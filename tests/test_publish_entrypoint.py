"""
Integration Tests for the Command Line Entry Point.

Runs ``publish.main`` end to end against a temporary web root.
"""

import pytest
import yaml

from publish import main


@pytest.fixture
def manifest(tmp_path, static_source):
    """Manifest publishing into tmp_path/Web/_Resources with one package."""
    path = tmp_path / "publishing.yaml"
    path.write_text(
        yaml.safe_dump(
            {
                "publishing": {
                    "root": str(tmp_path / "Web" / "_Resources"),
                    "base_uri": "http://Foo/_Resources/",
                },
                "storage": {"root": str(tmp_path / "Data")},
                "packages": {"Bar": str(static_source)},
            }
        )
    )
    return path


@pytest.mark.integration
def test_main_init(manifest, tmp_path):
    assert main(["--config", str(manifest), "init"]) == 0
    assert (tmp_path / "Web" / "_Resources" / "Persistent").is_dir()


@pytest.mark.integration
def test_main_packages(manifest, tmp_path):
    """Test every manifest package is published."""
    assert main(["--config", str(manifest), "packages"]) == 0
    assert (tmp_path / "Web" / "_Resources" / "Static" / "Bar" / "Bar.txt").exists()


@pytest.mark.integration
def test_main_static_missing_source(manifest, tmp_path):
    assert main(["--config", str(manifest), "static", str(tmp_path / "nope"), "Bar"]) == 1


@pytest.mark.integration
def test_main_persistent_then_unpublish(manifest, tmp_path):
    """Test a file published by hash can be unpublished again."""
    source = tmp_path / "photo.jpg"
    source.write_bytes(b"jpeg")

    assert main(["--config", str(manifest), "persistent", str(source)]) == 0
    published = list((tmp_path / "Web" / "_Resources" / "Persistent").iterdir())
    assert len(published) == 1

    resource_hash = published[0].stem
    code = main(["--config", str(manifest), "unpublish", resource_hash, "--extension", "jpg"])

    assert code == 0
    assert not published[0].exists()


@pytest.mark.integration
def test_main_persistent_missing_file(manifest, tmp_path):
    """Test an OSError from the import is reported as exit code 1."""
    assert main(["--config", str(manifest), "persistent", str(tmp_path / "missing.jpg")]) == 1
