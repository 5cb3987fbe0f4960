"""
Publishing Phase Functions.

One function per command-line operation, each working against a shared
FileSystemPublishingTarget and returning a process exit code.

Phases:
    1. Init: Create the publishing directories, optionally save the manifest
    2. Static: Publish one static directory, or every configured package
    3. Persistent: Import a file into storage and publish it
    4. Unpublish: Remove one published persistent resource
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

from pydantic import ValidationError

from quay.core import LOGGER_NAME, Config, LogStyle, ReporterProtocol, save_config_as_yaml
from quay.publishing import FileSystemPublishingTarget
from quay.resource import Resource, ResourcePointer, ResourceStorage

logger = logging.getLogger(LOGGER_NAME)

EXIT_OK = 0
EXIT_FAILURE = 1


def run_init_phase(
    target: FileSystemPublishingTarget,
    cfg: Config,
    save_path: Optional[Path] = None,
) -> int:
    """
    Creates the publishing directories.

    Args:
        target: Publishing target to initialize
        cfg: Effective configuration
        save_path: Optional YAML destination for the effective manifest
    """
    target.initialize()
    logger.info(f"{LogStyle.INDENT}{LogStyle.SUCCESS} Publishing root ready: {cfg.publishing.root}")
    if save_path is not None:
        save_config_as_yaml(cfg, save_path)
    return EXIT_OK


def run_static_phase(
    target: FileSystemPublishingTarget,
    reporter: ReporterProtocol,
    source: Path,
    package: str,
) -> int:
    """Publishes one static directory as ``package``."""
    target.initialize()
    ok = target.publish_static_resources(source, package)
    reporter.log_static_summary(logger, {package: ok})
    if ok:
        logger.info(f"{LogStyle.INDENT}{LogStyle.ARROW} {target.get_static_resources_web_base_uri()}{package}/")
    return EXIT_OK if ok else EXIT_FAILURE


def run_packages_phase(
    target: FileSystemPublishingTarget,
    reporter: ReporterProtocol,
    cfg: Config,
) -> int:
    """Publishes every package listed in the manifest."""
    if not cfg.packages:
        logger.warning(f"{LogStyle.WARNING} No packages configured, nothing to publish")
        return EXIT_OK

    target.initialize()
    results = target.publish_all_static_resources(cfg.packages)
    reporter.log_static_summary(logger, results)
    return EXIT_OK if all(results.values()) else EXIT_FAILURE


def run_persistent_phase(
    target: FileSystemPublishingTarget,
    reporter: ReporterProtocol,
    storage: ResourceStorage,
    source: Path,
    filename: Optional[str] = None,
) -> int:
    """
    Imports ``source`` into the private storage and publishes it.

    Raises:
        FileNotFoundError: If source does not exist
    """
    target.initialize()
    resource = storage.import_file(source, filename=filename)
    uri = target.publish_persistent_resource(resource)
    reporter.log_persistent_result(logger, resource.hash, uri)
    return EXIT_OK if uri is not None else EXIT_FAILURE


def run_unpublish_phase(
    target: FileSystemPublishingTarget,
    resource_hash: str,
    extension: Optional[str] = None,
) -> int:
    """Removes the published file of the resource with the given hash."""
    try:
        resource = Resource(pointer=ResourcePointer(hash=resource_hash), file_extension=extension)
    except ValidationError:
        logger.error(
            f"{LogStyle.FAILURE} Not a valid resource: hash {resource_hash!r}, extension {extension!r}"
        )
        return EXIT_FAILURE

    ok = target.unpublish_persistent_resource(resource)
    if ok:
        logger.info(f"{LogStyle.INDENT}{LogStyle.SUCCESS} Unpublished {resource.published_filename}")
    return EXIT_OK if ok else EXIT_FAILURE
