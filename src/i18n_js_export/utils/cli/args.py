"""
Command-line argument parsing for the i18n JavaScript export.

Options given on the command line take precedence over the values of the
configuration file.
"""

import argparse
import sys
from pathlib import Path
from typing import NamedTuple

from ..core.version import get_version


class PathValidationError(Exception):
    """Raised when a path validation fails."""

    pass


class ParsedArgs(NamedTuple):
    """Container for parsed command-line arguments."""

    config_file: Path
    locales: str | None
    encoding: str | None
    output_root: Path | None
    bundle_dir: Path | None
    base_name: str | None
    log_folder: Path | None
    dry_run: bool
    init_config: bool
    verbose: bool


class DefaultPaths:
    """Default paths for the export."""

    CONFIG_FILE: Path = Path("i18n-export.yml")


def validate_config_file_path(config_file_str: str) -> Path:
    """
    Validate configuration file path.

    Args:
        config_file_str: String path to configuration file

    Returns:
        Resolved Path object for the configuration file

    Raises:
        PathValidationError: If the configuration file path is invalid
    """
    try:
        config_file = Path(config_file_str).expanduser().resolve()
    except (OSError, ValueError) as e:
        raise PathValidationError(f"Invalid config file path: {e}") from e

    if config_file.exists() and config_file.is_dir():
        raise PathValidationError(
            f"Config file path exists but is not a file: {config_file}"
        )

    if not config_file.parent.exists():
        raise PathValidationError(
            f"Parent directory for config file does not exist: {config_file.parent}"
        )

    return config_file


def validate_folder_path(path_str: str, folder_name: str) -> Path:
    """
    Validate and resolve a folder path.

    Args:
        path_str: String representation of the folder path
        folder_name: Name of the folder (for error messages)

    Returns:
        Resolved absolute path to the folder

    Raises:
        PathValidationError: If the path is invalid
    """
    try:
        path = Path(path_str).expanduser().resolve()
    except (OSError, ValueError) as e:
        raise PathValidationError(f"Invalid {folder_name} path: {e}") from e

    if path.exists() and not path.is_dir():
        raise PathValidationError(
            f"{folder_name.capitalize()} path exists but is not a directory: {path}"
        )

    return path


def create_argument_parser() -> argparse.ArgumentParser:
    """
    Create the argument parser for the export command.

    Returns:
        Configured ArgumentParser instance
    """
    parser = argparse.ArgumentParser(
        prog="i18n-js-export",
        description="Export .properties resource bundles to $.msg jQuery scripts",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  i18n-js-export
    Export using i18n-export.yml in the current directory

  i18n-js-export --locales pt,pt_BR,en,es --bundle-dir resources --output-root WebContent
    Export without a configuration file

  i18n-js-export --config-file deploy/i18n.yml --dry-run
    Show which files would be written

  i18n-js-export --init-config
    Write a default configuration file
""",
    )

    defaults = DefaultPaths()

    _ = parser.add_argument(
        "--config-file",
        type=str,
        default=str(defaults.CONFIG_FILE),
        help=(
            "Path to the configuration file (default: %(default)s). "
            "The file is optional when all settings are given as options."
        ),
        metavar="PATH",
    )

    _ = parser.add_argument(
        "--locales",
        type=str,
        help='Comma-separated list of locales to export (e.g. "pt,pt_BR,en")',
        metavar="LIST",
    )

    _ = parser.add_argument(
        "--encoding",
        type=str,
        help="Text encoding of the generated files (default: UTF-8)",
        metavar="NAME",
    )

    _ = parser.add_argument(
        "--output-root",
        type=str,
        help="Root directory the js/i18n folder is created in",
        metavar="PATH",
    )

    _ = parser.add_argument(
        "--bundle-dir",
        type=str,
        help="Directory containing the .properties bundles",
        metavar="PATH",
    )

    _ = parser.add_argument(
        "--base-name",
        type=str,
        help='Base name of the bundle files (default: "messages")',
        metavar="NAME",
    )

    _ = parser.add_argument(
        "--log-folder",
        type=str,
        help="Also write logs to rotating files in this folder",
        metavar="PATH",
    )

    _ = parser.add_argument(
        "--dry-run",
        action="store_true",
        help="Show what would be written without writing any file",
    )

    _ = parser.add_argument(
        "--init-config",
        action="store_true",
        help="Write a default configuration file to --config-file and exit",
    )

    _ = parser.add_argument(
        "--verbose",
        action="store_true",
        help="Enable verbose logging",
    )

    _ = parser.add_argument(
        "--version", action="version", version=f"%(prog)s {get_version()}"
    )

    return parser


def parse_arguments(args: list[str] | None = None) -> ParsedArgs:
    """
    Parse command-line arguments.

    Args:
        args: List of arguments to parse (defaults to sys.argv[1:])

    Returns:
        ParsedArgs containing validated and resolved paths

    Raises:
        SystemExit: If argument parsing or path validation fails, or --help
            is requested
    """
    parser = create_argument_parser()
    parsed = parser.parse_args(args)

    config_file_str: str = getattr(parsed, "config_file", "")
    output_root_str: str | None = getattr(parsed, "output_root", None)
    bundle_dir_str: str | None = getattr(parsed, "bundle_dir", None)
    log_folder_str: str | None = getattr(parsed, "log_folder", None)

    try:
        config_file = validate_config_file_path(config_file_str)
        output_root = (
            validate_folder_path(output_root_str, "output root")
            if output_root_str
            else None
        )
        bundle_dir = (
            validate_folder_path(bundle_dir_str, "bundle directory")
            if bundle_dir_str
            else None
        )
        log_folder = (
            validate_folder_path(log_folder_str, "log folder")
            if log_folder_str
            else None
        )
    except PathValidationError as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(1)

    return ParsedArgs(
        config_file=config_file,
        locales=getattr(parsed, "locales", None),
        encoding=getattr(parsed, "encoding", None),
        output_root=output_root,
        bundle_dir=bundle_dir,
        base_name=getattr(parsed, "base_name", None),
        log_folder=log_folder,
        dry_run=bool(getattr(parsed, "dry_run", False)),
        init_config=bool(getattr(parsed, "init_config", False)),
        verbose=bool(getattr(parsed, "verbose", False)),
    )
