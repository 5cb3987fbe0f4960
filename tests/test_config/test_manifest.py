"""
Test Suite for the Config Manifest.

Tests aggregation of the sub-configurations, YAML loading with anchored package
paths and the CLI override chain.
"""

# Standard Imports
import argparse

# Third-Party Imports
import pytest
import yaml
from pydantic import ValidationError

# Internal Imports
from quay.core.config import Config, PublishingConfig, StorageConfig, TelemetryConfig


@pytest.fixture
def manifest_file(tmp_path):
    """YAML manifest with one relative and one absolute package."""
    recipe_dir = tmp_path / "recipes"
    recipe_dir.mkdir()
    path = recipe_dir / "publishing.yaml"
    path.write_text(
        yaml.safe_dump(
            {
                "publishing": {
                    "root": str(tmp_path / "Web" / "_Resources"),
                    "mirror_mode": "link",
                    "base_uri": "http://Foo/_Resources/",
                },
                "storage": {"root": str(tmp_path / "Data")},
                "telemetry": {"log_level": "DEBUG"},
                "packages": {
                    "Acme.Site": "../Packages/Acme.Site/Public",
                    "Vendor.Lib": str(tmp_path / "Vendor"),
                },
            }
        )
    )
    return path


# DEFAULTS
@pytest.mark.unit
def test_config_defaults():
    """Test an empty manifest falls back to every section default."""
    cfg = Config()

    assert isinstance(cfg.publishing, PublishingConfig)
    assert isinstance(cfg.storage, StorageConfig)
    assert isinstance(cfg.telemetry, TelemetryConfig)
    assert cfg.packages == {}


@pytest.mark.unit
def test_config_rejects_unknown_section():
    with pytest.raises(ValidationError):
        Config(publisher={})


@pytest.mark.unit
def test_config_rejects_bad_package_key(tmp_path):
    """Test package keys that would escape Static/ are rejected."""
    with pytest.raises(ValidationError):
        Config(packages={"../etc": tmp_path})


# FROM YAML
@pytest.mark.unit
def test_from_yaml_loads_sections(manifest_file, tmp_path):
    """Test every section of the YAML manifest is applied."""
    cfg = Config.from_yaml(manifest_file)

    assert cfg.publishing.mirror_mode == "link"
    assert cfg.publishing.base_uri == "http://Foo/_Resources/"
    assert cfg.storage.root == (tmp_path / "Data").resolve()
    assert cfg.telemetry.log_level == "DEBUG"


@pytest.mark.unit
def test_from_yaml_anchors_relative_packages(manifest_file, tmp_path):
    """Test relative package paths resolve against the YAML file's directory."""
    cfg = Config.from_yaml(manifest_file)

    assert cfg.packages["Acme.Site"] == (tmp_path / "Packages" / "Acme.Site" / "Public").resolve()
    assert cfg.packages["Vendor.Lib"] == (tmp_path / "Vendor").resolve()


@pytest.mark.unit
def test_from_yaml_anchors_relative_roots(tmp_path):
    """Test relative roots and log directory resolve against the YAML file's directory."""
    recipe_dir = tmp_path / "recipes"
    recipe_dir.mkdir()
    path = recipe_dir / "relative.yaml"
    path.write_text(
        "publishing:\n"
        "  root: ../Web/_Resources\n"
        "  web_root: ../Web\n"
        "storage:\n"
        "  root: ../Data\n"
        "telemetry:\n"
        "  log_dir: ../logs\n"
    )

    cfg = Config.from_yaml(path)

    assert cfg.publishing.root == (tmp_path / "Web" / "_Resources").resolve()
    assert cfg.publishing.web_path == "_Resources/"
    assert cfg.storage.root == (tmp_path / "Data").resolve()
    assert cfg.telemetry.log_dir == (tmp_path / "logs").resolve()


# FROM ARGS
@pytest.mark.unit
def test_from_args_without_config(empty_args):
    """Test no --config yields the defaults."""
    cfg = Config.from_args(empty_args)

    assert cfg == Config()


@pytest.mark.unit
def test_from_args_cli_overrides_yaml(manifest_file, empty_args, tmp_path):
    """Test CLI overrides are layered on top of the YAML manifest."""
    args = argparse.Namespace(
        **{
            **vars(empty_args),
            "config": str(manifest_file),
            "mirror_mode": "copy",
            "storage_root": str(tmp_path / "Other"),
            "log_level": "warning",
        }
    )

    cfg = Config.from_args(args)

    assert cfg.publishing.mirror_mode == "copy"
    assert cfg.publishing.base_uri == "http://Foo/_Resources/"
    assert cfg.storage.root == (tmp_path / "Other").resolve()
    assert cfg.telemetry.log_level == "WARNING"
    assert set(cfg.packages) == {"Acme.Site", "Vendor.Lib"}


@pytest.mark.unit
def test_from_args_missing_config_file(empty_args, tmp_path):
    """Test a missing manifest path raises FileNotFoundError."""
    args = argparse.Namespace(**{**vars(empty_args), "config": str(tmp_path / "nope.yaml")})

    with pytest.raises(FileNotFoundError):
        Config.from_args(args)
