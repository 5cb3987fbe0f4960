"""
Test Suite for the Static Tree Publisher.

Tests end-to-end tree mirroring, exclusion of server-side scripts, the
freshness skip rule and whole-directory linking.
"""

# Standard Imports
import os
from pathlib import Path
from unittest.mock import MagicMock

# Third-Party Imports
import pytest

# Internal Imports
from quay.core.config import PublishingConfig
from quay.publishing import StaticResourcePublisher


def _published(root: Path) -> list:
    return sorted(p.relative_to(root).as_posix() for p in root.rglob("*") if p.is_file())


# COPY MODE
@pytest.mark.integration
def test_publish_mirrors_tree_without_php(publishing_config, static_source):
    """Test the tree structure is reproduced and .php files are skipped."""
    publisher = StaticResourcePublisher(publishing_config)

    assert publisher.publish(static_source, "Bar") is True

    target = publishing_config.static_root / "Bar"
    assert _published(target) == [
        "Bar.txt",
        "SubDirectory/Foo.txt",
        "SubDirectory/SubSubDirectory/Baz.txt",
    ]
    assert (target / "SubDirectory" / "Foo.txt").read_text() == "foo"
    assert not (target / "Bar.txt").is_symlink()


@pytest.mark.integration
def test_publish_nested_tree_into_empty_root(publishing_config, tmp_path):
    """Test a deep tree with one script among images and texts."""
    source = tmp_path / "Source"
    (source / "sub" / "deep").mkdir(parents=True)
    for rel in [
        "file1.txt",
        "file2.txt",
        "sub/file2.txt",
        "sub/deep/file3.txt",
        "sub/deep/file4.php",
        "sub/deep/file5.jpg",
    ]:
        (source / rel).write_text(rel)

    assert StaticResourcePublisher(publishing_config).publish(source, "Bar") is True

    target = publishing_config.static_root / "Bar"
    assert _published(target) == [
        "file1.txt",
        "file2.txt",
        "sub/deep/file3.txt",
        "sub/deep/file5.jpg",
        "sub/file2.txt",
    ]
    assert not list(publishing_config.root.rglob("file4.php"))


@pytest.mark.unit
def test_republish_unchanged_tree_writes_nothing(publishing_config, static_source):
    """Test a second run over unchanged sources never calls the mirror."""
    StaticResourcePublisher(publishing_config).publish(static_source, "Bar")
    mirror = MagicMock()

    StaticResourcePublisher(publishing_config, mirror=mirror).publish(static_source, "Bar")

    mirror.mirror.assert_not_called()


@pytest.mark.unit
def test_publish_visits_files_in_traversal_order(publishing_config, static_source):
    """Test the mirror is called per eligible file, subdirectories first."""
    mirror = MagicMock()
    publisher = StaticResourcePublisher(publishing_config, mirror=mirror)

    publisher.publish(static_source, "Bar")

    source_root = static_source.resolve()
    target_root = publishing_config.static_root / "Bar"
    expected = [
        "SubDirectory/SubSubDirectory/Baz.txt",
        "SubDirectory/Foo.txt",
        "Bar.txt",
    ]
    assert [c.args for c in mirror.mirror.call_args_list] == [
        (source_root / rel, target_root / rel) for rel in expected
    ]


@pytest.mark.unit
def test_publish_skips_current_targets(publishing_config, static_source):
    """Test files whose target is as new as the source are not mirrored again."""
    StaticResourcePublisher(publishing_config).publish(static_source, "Bar")
    os.utime(static_source / "Bar.txt", (2_000_000_000, 2_000_000_000))
    mirror = MagicMock()

    StaticResourcePublisher(publishing_config, mirror=mirror).publish(static_source, "Bar")

    mirror.mirror.assert_called_once()
    assert mirror.mirror.call_args.args[0].name == "Bar.txt"


@pytest.mark.unit
def test_publish_custom_exclusions(web_root, static_source):
    """Test configured extensions replace the default exclusion list."""
    cfg = PublishingConfig(root=web_root / "_Resources", excluded_extensions=["txt"])

    StaticResourcePublisher(cfg).publish(static_source, "Bar")

    assert _published(cfg.static_root / "Bar") == ["Bar.php"]


# PRECONDITIONS
@pytest.mark.unit
def test_publish_missing_source_returns_false(publishing_config, tmp_path):
    """Test a missing source directory yields False and creates nothing."""
    mirror = MagicMock()
    publisher = StaticResourcePublisher(publishing_config, mirror=mirror)

    assert publisher.publish(tmp_path / "missing", "Bar") is False
    mirror.mirror.assert_not_called()
    assert not publishing_config.static_root.exists()


@pytest.mark.unit
def test_publish_file_as_source_returns_false(publishing_config, tmp_path):
    source = tmp_path / "file.txt"
    source.write_text("x")

    assert StaticResourcePublisher(publishing_config).publish(source, "Bar") is False


@pytest.mark.unit
def test_publish_unreadable_source_returns_false(publishing_config, static_source):
    """Test an unreadable source directory yields False."""
    fs = MagicMock()
    fs.is_dir.return_value = True
    fs.is_readable.return_value = False

    publisher = StaticResourcePublisher(publishing_config, filesystem=fs, mirror=MagicMock())

    assert publisher.publish(static_source, "Bar") is False


@pytest.mark.unit
def test_publish_propagates_mirror_errors(publishing_config, static_source):
    """Test a failing mirror aborts the call with OSError."""
    mirror = MagicMock()
    mirror.mirror.side_effect = OSError("disk full")

    with pytest.raises(OSError, match="disk full"):
        StaticResourcePublisher(publishing_config, mirror=mirror).publish(static_source, "Bar")


# LINK MODE
@pytest.mark.integration
def test_link_mode_links_whole_directory(link_config, static_source):
    """Test link mode publishes the package as one symbolic link."""
    mirror = MagicMock()
    publisher = StaticResourcePublisher(link_config, mirror=mirror)

    assert publisher.publish(static_source, "Bar") is True

    target = link_config.static_root / "Bar"
    assert target.is_symlink()
    assert target.resolve() == static_source.resolve()
    assert (target / "SubDirectory" / "Foo.txt").read_text() == "foo"
    mirror.mirror.assert_not_called()


@pytest.mark.integration
def test_link_mode_is_idempotent_and_repoints(link_config, static_source, tmp_path):
    """Test re-publishing keeps a correct link and re-points a stale one."""
    publisher = StaticResourcePublisher(link_config)
    publisher.publish(static_source, "Bar")
    publisher.publish(static_source, "Bar")

    other = tmp_path / "Other"
    other.mkdir()
    publisher.publish(other, "Bar")

    assert (link_config.static_root / "Bar").resolve() == other.resolve()


@pytest.mark.integration
def test_link_mode_falls_back_to_files_for_real_directory(link_config, static_source):
    """Test an existing real directory is populated with per-file links."""
    (link_config.static_root / "Bar").mkdir(parents=True)

    StaticResourcePublisher(link_config).publish(static_source, "Bar")

    published = link_config.static_root / "Bar" / "SubDirectory" / "Foo.txt"
    assert not (link_config.static_root / "Bar").is_symlink()
    assert published.is_symlink()
    assert not (link_config.static_root / "Bar" / "Bar.php").exists()


@pytest.mark.integration
def test_link_mode_per_file_when_whole_directories_disabled(web_root, static_source):
    """Test link mode without whole-directory linking links each file."""
    cfg = PublishingConfig(
        root=web_root / "_Resources", mirror_mode="link", link_whole_directories=False
    )

    StaticResourcePublisher(cfg).publish(static_source, "Bar")

    target = cfg.static_root / "Bar"
    assert not target.is_symlink()
    assert (target / "Bar.txt").is_symlink()
    assert not (target / "Bar.php").exists()


@pytest.mark.integration
def test_copy_mode_replaces_directory_link(publishing_config, link_config, static_source):
    """Test switching from link to copy mode replaces the link with real files."""
    StaticResourcePublisher(link_config).publish(static_source, "Bar")

    StaticResourcePublisher(publishing_config).publish(static_source, "Bar")

    target = publishing_config.static_root / "Bar"
    assert not target.is_symlink()
    assert (target / "Bar.txt").read_text() == "bar"
    assert (static_source / "Bar.php").exists()


@pytest.mark.integration
def test_copy_mode_replaces_per_file_links(web_root, publishing_config, static_source):
    """Test copy mode turns per-file links into real copies and leaves sources alone."""
    per_file_links = PublishingConfig(
        root=web_root / "_Resources", mirror_mode="link", link_whole_directories=False
    )
    StaticResourcePublisher(per_file_links).publish(static_source, "Bar")

    StaticResourcePublisher(publishing_config).publish(static_source, "Bar")

    target = publishing_config.static_root / "Bar"
    assert not (target / "Bar.txt").is_symlink()
    assert not (target / "SubDirectory" / "Foo.txt").is_symlink()
    assert (target / "Bar.txt").read_text() == "bar"
    assert (static_source / "Bar.txt").read_text() == "bar"


# PACKAGE NAMES
@pytest.mark.unit
@pytest.mark.parametrize("package", ["../../../escaped", "a/b", "..", ".hidden", ""])
def test_publish_rejects_unsafe_package_names(publishing_config, static_source, tmp_path, package):
    """Test names that are not a single directory below Static/ publish nothing."""
    mirror = MagicMock()
    publisher = StaticResourcePublisher(publishing_config, mirror=mirror)

    assert publisher.publish(static_source, package) is False

    mirror.mirror.assert_not_called()
    assert not (tmp_path / "escaped").exists()
    assert not publishing_config.root.exists()


# PUBLISH ALL
@pytest.mark.unit
def test_publish_all_reports_per_package(publishing_config, static_source, tmp_path):
    publisher = StaticResourcePublisher(publishing_config)

    results = publisher.publish_all({"Bar": static_source, "Missing": tmp_path / "nope"})

    assert results == {"Bar": True, "Missing": False}
