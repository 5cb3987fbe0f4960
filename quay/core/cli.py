"""
Argument Parsing Module.

Handles the command-line interface of the publishing engine. Global options
override the YAML manifest; subcommands select the operation.
"""

import argparse
from typing import Optional, Sequence


# ARGUMENT PARSING
def parse_args(argv: Optional[Sequence[str]] = None) -> argparse.Namespace:
    """
    Configure and parse command-line arguments for the publishing script.

    Args:
        argv: Argument list (default: sys.argv[1:])

    Returns:
        Parsed arguments namespace (``command`` holds the subcommand)
    """
    parser = argparse.ArgumentParser(
        description="Publish static package resources and content-addressed persistent resources.",
        formatter_class=argparse.ArgumentDefaultsHelpFormatter,
    )

    # ===== Global Strategy =====
    strat_group = parser.add_argument_group("Global Strategy")

    strat_group.add_argument(
        "--config",
        type=str,
        default=None,
        help="Path to YAML publishing manifest",
    )
    strat_group.add_argument(
        "--mirror-mode",
        type=str,
        dest="mirror_mode",
        choices=["copy", "link"],
        default=None,
        help="Copy files or create symbolic links (overrides the manifest)",
    )

    # ===== Paths & URIs =====
    path_group = parser.add_argument_group("Paths & URIs")

    path_group.add_argument(
        "--root",
        type=str,
        default=None,
        help="Publishing root holding Static/ and Persistent/",
    )
    path_group.add_argument(
        "--base-uri",
        type=str,
        dest="base_uri",
        default=None,
        help="Public base URI of the publishing root (must end with '/')",
    )
    path_group.add_argument(
        "--storage-root",
        type=str,
        dest="storage_root",
        default=None,
        help="Private hash-named resource storage",
    )

    # ===== Logging =====
    log_group = parser.add_argument_group("Logging")

    log_group.add_argument(
        "--log-dir", type=str, dest="log_dir", default=None, help="Directory for log files"
    )
    log_group.add_argument(
        "--log-level",
        type=str.upper,
        dest="log_level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        default=None,
        help="Logging verbosity",
    )

    # ===== Commands =====
    subparsers = parser.add_subparsers(dest="command", metavar="COMMAND", required=True)

    init_cmd = subparsers.add_parser("init", help="Create the publishing directories")
    init_cmd.add_argument(
        "--save-config",
        type=str,
        dest="save_config",
        default=None,
        help="Write the effective manifest to this YAML file",
    )

    static_cmd = subparsers.add_parser("static", help="Publish one static resource directory")
    static_cmd.add_argument("source", type=str, help="Directory with the package's public files")
    static_cmd.add_argument("package", type=str, help="Package name below Static/")

    subparsers.add_parser("packages", help="Publish every package listed in the manifest")

    persistent_cmd = subparsers.add_parser(
        "persistent", help="Import a file into storage and publish it"
    )
    persistent_cmd.add_argument("file", type=str, help="File to import and publish")
    persistent_cmd.add_argument(
        "--filename", type=str, default=None, help="Filename used in the public URI"
    )

    unpublish_cmd = subparsers.add_parser("unpublish", help="Remove a published persistent resource")
    unpublish_cmd.add_argument("hash", type=str, help="SHA-1 of the resource content")
    unpublish_cmd.add_argument(
        "--extension", type=str, default=None, help="File extension of the published file"
    )

    return parser.parse_args(argv)
