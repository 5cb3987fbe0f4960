"""
Quay: Resource Publishing Entry Point.

Single entry point for every publishing operation. The YAML manifest supplies
the defaults; global flags override it; the subcommand selects the phase.

Usage:
    # Create Web/_Resources and Web/_Resources/Persistent
    python publish.py --config recipes/publishing.yaml init

    # Publish one static directory as Static/Acme.Site/
    python publish.py static Packages/Acme.Site/Resources/Public Acme.Site

    # Publish every package listed in the manifest, linking instead of copying
    python publish.py --config recipes/publishing.yaml --mirror-mode link packages

    # Import a file and publish it under its content hash
    python publish.py --base-uri https://cdn.example.com/_Resources/ persistent logo.png

    # Remove a published persistent resource
    python publish.py unpublish 2aae6c35c94fcfb415dbe95f408b9ce91ee846ed --extension png
"""

from pathlib import Path
from typing import Optional, Sequence

from quay.core import LOGGER_NAME, Config, Logger, Reporter, parse_args
from quay.pipeline import (
    EXIT_FAILURE,
    run_init_phase,
    run_packages_phase,
    run_persistent_phase,
    run_static_phase,
    run_unpublish_phase,
)
from quay.publishing import FileSystemPublishingTarget
from quay.resource import ResourceStorage


def main(argv: Optional[Sequence[str]] = None) -> int:
    """
    Parses arguments, builds the publishing target and runs one phase.

    Returns:
        Process exit code (0 on success, 1 on failure)
    """
    args = parse_args(argv)
    cfg = Config.from_args(args)

    run_logger = Logger.setup(
        name=LOGGER_NAME, log_dir=cfg.telemetry.log_dir, level=cfg.telemetry.log_level
    )
    reporter = Reporter()
    reporter.log_initial_status(run_logger, cfg)

    storage = ResourceStorage(cfg.storage.root)
    target = FileSystemPublishingTarget(cfg.publishing, source_locator=storage)

    try:
        if args.command == "init":
            save_path = Path(args.save_config) if args.save_config else None
            return run_init_phase(target, cfg, save_path)
        if args.command == "static":
            return run_static_phase(target, reporter, Path(args.source), args.package)
        if args.command == "packages":
            return run_packages_phase(target, reporter, cfg)
        if args.command == "persistent":
            return run_persistent_phase(target, reporter, storage, Path(args.file), args.filename)
        return run_unpublish_phase(target, args.hash, args.extension)

    except OSError as e:
        run_logger.error(f"Publishing failed: {e}")
        return EXIT_FAILURE


if __name__ == "__main__":
    raise SystemExit(main())
