"""
Publishing Session Reporting Engine.

Formats configuration baselines and publication outcomes into readable log
blocks. Used by the command line entry point; the publishers themselves only
emit one-line records.
"""

import logging
from typing import TYPE_CHECKING, Mapping, Optional, Protocol

from pydantic import BaseModel, ConfigDict

if TYPE_CHECKING:  # pragma: no cover
    from ..config import Config


class LogStyle:
    """Unified logging style constants for consistent visual hierarchy."""

    # Session headers
    HEAVY = "━" * 80
    # Subsections / separators
    LIGHT = "─" * 80

    ARROW = "»"
    BULLET = "•"
    WARNING = "⚠"
    SUCCESS = "✓"
    FAILURE = "✗"

    INDENT = "  "


class ReporterProtocol(Protocol):
    """Protocol for session reporting, enabling mocking in tests."""

    def log_initial_status(self, logger_instance: logging.Logger, cfg: "Config") -> None:
        ...  # pragma: no cover

    def log_static_summary(
        self, logger_instance: logging.Logger, results: Mapping[str, bool]
    ) -> None:
        ...  # pragma: no cover

    def log_persistent_result(
        self, logger_instance: logging.Logger, resource_hash: str, uri: Optional[str]
    ) -> None:
        ...  # pragma: no cover


class Reporter(BaseModel):
    """Centralized reporting utility for publishing sessions."""

    model_config = ConfigDict(arbitrary_types_allowed=True)

    def log_initial_status(self, logger_instance: logging.Logger, cfg: "Config") -> None:
        """
        Logs the effective publishing configuration.

        Args:
            logger_instance: Active session logger
            cfg: Validated publishing manifest
        """
        pub = cfg.publishing
        base_uri = pub.base_uri or f"(detected) /{pub.web_path}"

        logger_instance.info("")
        logger_instance.info(LogStyle.HEAVY)
        logger_instance.info(f"{'RESOURCE PUBLISHING':^80}")
        logger_instance.info(LogStyle.HEAVY)
        logger_instance.info(f"{LogStyle.INDENT}{LogStyle.ARROW} Publishing Root : {pub.root}")
        logger_instance.info(f"{LogStyle.INDENT}{LogStyle.ARROW} Base URI        : {base_uri}")
        logger_instance.info(f"{LogStyle.INDENT}{LogStyle.ARROW} Mirror Mode     : {pub.mirror_mode}")
        logger_instance.info(
            f"{LogStyle.INDENT}{LogStyle.ARROW} Excluded        : "
            f"{', '.join(pub.excluded_extensions) or 'none'}"
        )
        logger_instance.info(f"{LogStyle.INDENT}{LogStyle.ARROW} Storage Root    : {cfg.storage.root}")
        logger_instance.info(f"{LogStyle.INDENT}{LogStyle.ARROW} Packages        : {len(cfg.packages)}")
        logger_instance.info(LogStyle.LIGHT)

    def log_static_summary(
        self, logger_instance: logging.Logger, results: Mapping[str, bool]
    ) -> None:
        """Logs one line per static package plus a totals line."""
        published = sum(1 for ok in results.values() if ok)

        logger_instance.info(LogStyle.LIGHT)
        for package, ok in results.items():
            mark = LogStyle.SUCCESS if ok else LogStyle.FAILURE
            logger_instance.info(f"{LogStyle.INDENT}{mark} {package}")
        logger_instance.info(
            f"{LogStyle.INDENT}{LogStyle.ARROW} Static packages published: "
            f"{published}/{len(results)}"
        )
        logger_instance.info(LogStyle.LIGHT)

    def log_persistent_result(
        self, logger_instance: logging.Logger, resource_hash: str, uri: Optional[str]
    ) -> None:
        """Logs the public URI of a persistent resource, or a warning."""
        if uri is None:
            logger_instance.warning(
                f"{LogStyle.INDENT}{LogStyle.WARNING} Resource {resource_hash} has no source, "
                f"nothing published"
            )
            return
        logger_instance.info(f"{LogStyle.INDENT}{LogStyle.SUCCESS} {resource_hash} → {uri}")
