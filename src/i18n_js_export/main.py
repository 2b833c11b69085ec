"""
Main entry point for the i18n JavaScript export.

This module parses the command line, sets up logging, loads the
configuration and runs the export once.
"""

import logging
import logging.handlers
import sys
from pathlib import Path

import yaml
from pydantic import ValidationError

from .config.manager import ConfigManager
from .config.schema import ExportAppConfig
from .i18n.exporter import export_javascript_files
from .utils.cli.args import ParsedArgs, parse_arguments

LOG_FILE_NAME = "i18n-js-export.log"

logger = logging.getLogger(__name__)


def setup_logging(verbose: bool = False, log_folder: Path | None = None) -> None:
    """
    Configure console logging and, optionally, a rotating log file.

    Args:
        verbose: Log DEBUG messages to the console
        log_folder: Folder for the rotating log file; no file logging if None
    """
    root_logger = logging.getLogger()
    root_logger.setLevel(logging.DEBUG)
    root_logger.handlers.clear()

    detailed_formatter = logging.Formatter(
        "%(asctime)s - %(name)s - %(levelname)s - %(funcName)s:%(lineno)d - %(message)s"
    )
    simple_formatter = logging.Formatter(
        "%(asctime)s - %(levelname)s - %(message)s", datefmt="%Y-%m-%d %H:%M:%S"
    )

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(logging.DEBUG if verbose else logging.INFO)
    console_handler.setFormatter(simple_formatter)
    root_logger.addHandler(console_handler)

    if log_folder is not None:
        log_folder.mkdir(parents=True, exist_ok=True)
        # File handler with rotation (5MB max, keep 5 backups)
        file_handler = logging.handlers.RotatingFileHandler(
            log_folder / LOG_FILE_NAME,
            maxBytes=5 * 1024 * 1024,
            backupCount=5,
            encoding="utf-8",
        )
        file_handler.setLevel(logging.DEBUG)
        file_handler.setFormatter(detailed_formatter)
        root_logger.addHandler(file_handler)


def build_config(args: ParsedArgs) -> ExportAppConfig:
    """
    Load the configuration file, if any, and apply command-line overrides.

    Raises:
        yaml.YAMLError: If the configuration file is not valid YAML
        ValueError: If the configuration file is not a mapping
        ValidationError: If the configuration or an override is invalid
    """
    if args.config_file.exists():
        config = ConfigManager.load_config(args.config_file)
    else:
        logger.debug(f"No configuration file at {args.config_file}, using defaults")
        config = ExportAppConfig()

    overrides: dict[str, dict[str, object]] = {
        "export": {
            "locales": args.locales,
            "encoding": args.encoding,
            "output_root": args.output_root,
        },
        "bundles": {
            "directory": args.bundle_dir,
            "base_name": args.base_name,
        },
    }
    return ConfigManager.apply_overrides(config, overrides)


def init_config(args: ParsedArgs) -> int:
    """Write a default configuration file; refuses to overwrite an existing one."""
    if args.config_file.exists():
        logger.error(f"Configuration file already exists: {args.config_file}")
        return 1

    config = build_config(args)
    ConfigManager.save_config(config, args.config_file)
    return 0


def run(argv: list[str] | None = None) -> int:
    """
    Run the export command.

    Args:
        argv: Command-line arguments (defaults to sys.argv[1:])

    Returns:
        Exit code (0 for success, 1 for error)
    """
    args = parse_arguments(argv)
    setup_logging(args.verbose, args.log_folder)

    try:
        if args.init_config:
            return init_config(args)

        config = build_config(args)
    except (yaml.YAMLError, ValueError, ValidationError) as e:
        logger.error(f"Invalid configuration: {e}")
        return 1
    except OSError as e:
        logger.error(f"Could not read or write the configuration file: {e}")
        return 1

    result = export_javascript_files(config, dry_run=args.dry_run)

    return 0 if result.ok else 1
