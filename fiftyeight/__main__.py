"""
Main CLI entry point for fiftyeight.

Launches the settings form, or runs single-shot schema/settings commands.
"""

import argparse
import sys
from pathlib import Path

from fiftyeight.logging import configure_logging_from_args, get_logger
from fiftyeight.paths import get_config_path
from fiftyeight.schema import SCHEMA_FORMATS


def build_parser() -> argparse.ArgumentParser:
    """
    Build the main argument parser with subcommands.

    Returns:
        Configured ArgumentParser
    """
    parser = argparse.ArgumentParser(
        prog="fiftyeight",
        description="fiftyeight - watchface settings form and settings store",
        epilog="Use 'fiftyeight <command> --help' for more information on a specific command.",
    )

    parser.add_argument(
        "--config",
        type=Path,
        default=None,
        help=f"Path to configuration file (default: {get_config_path()} if present)",
    )
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Enable verbose output (DEBUG level)",
    )
    parser.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        help="Set logging level (overrides --verbose)",
    )
    parser.add_argument(
        "--log-file",
        type=Path,
        help="Write logs to file",
    )

    subparsers = parser.add_subparsers(
        dest="command",
        title="commands",
        description="Available commands",
        required=False,  # No command opens the settings form
    )

    # -------------------------------------------------------------------------
    # Schema subcommand
    # -------------------------------------------------------------------------
    schema_parser = subparsers.add_parser(
        "schema",
        help="Print the settings form schema",
        description="Print the settings schema in the host wire form.",
    )
    schema_parser.add_argument(
        "--format",
        choices=list(SCHEMA_FORMATS),
        default="json",
        help="Output format (default: json)",
    )

    # -------------------------------------------------------------------------
    # Settings subcommand
    # -------------------------------------------------------------------------
    settings_parser = subparsers.add_parser(
        "settings",
        help="Show or change persisted settings",
        description="Read and replace the persisted key/value settings mapping.",
    )
    settings_subparsers = settings_parser.add_subparsers(
        dest="settings_command",
        title="settings commands",
        required=True,
    )
    settings_subparsers.add_parser("show", help="Print the current settings as JSON")

    set_parser = settings_subparsers.add_parser("set", help="Set a single toggle")
    set_parser.add_argument("key", help="Toggle key, e.g. DarkMode")
    set_parser.add_argument("value", help="true/false, on/off, yes/no or 1/0")

    settings_subparsers.add_parser("reset", help="Restore default settings")

    submit_parser = settings_subparsers.add_parser(
        "submit",
        help="Replace settings with a JSON/YAML payload file",
    )
    submit_parser.add_argument("file", type=Path, help="Payload file (.json, .yaml or .yml)")

    return parser


def main(argv: list[str] | None = None) -> int:
    """
    Main entry point for the fiftyeight CLI.

    Args:
        argv: Command-line arguments (for testing)

    Returns:
        Exit code (0 for success, non-zero for failure)
    """
    parser = build_parser()
    args = parser.parse_args(argv)

    configure_logging_from_args(
        verbose=args.verbose,
        log_level=args.log_level,
        log_file=str(args.log_file) if args.log_file else None,
    )

    logger = get_logger(__name__)
    logger.debug(f"Parsed arguments: {args}")

    if args.command == "schema":
        from fiftyeight.ui.shell.cli import run_schema
        return run_schema(args)

    try:
        from fiftyeight.config import default_config, load_config_from_file

        if args.config is not None:
            cfg_path = Path(args.config).expanduser().resolve()
            if not cfg_path.exists():
                logger.error(f"Config file not found: {cfg_path}")
                print(f"Error: Configuration file not found: {cfg_path}")
                return 1
            logger.info(f"Loading configuration from: {cfg_path}")
            config = load_config_from_file(cfg_path)
        elif get_config_path().exists():
            logger.info(f"Loading configuration from: {get_config_path()}")
            config = load_config_from_file(get_config_path())
        else:
            config = default_config()

        configure_logging_from_args(
            verbose=args.verbose,
            log_level=args.log_level,
            log_file=str(args.log_file) if args.log_file else None,
            config_level=config.log_level,
            config_log_file=str(config.log_file) if config.log_file else None,
        )
        logger.debug(f"Config log level: {config.log_level}")

        if not args.command:
            logger.info("Starting settings form")
            from fiftyeight.ui.tui.app import run_tui
            return run_tui(config)

        if args.command == "settings":
            from fiftyeight.ui.shell.cli import run_settings
            return run_settings(args, config)

        parser.print_help()
        return 1

    except KeyboardInterrupt:
        logger.info("Interrupted by user")
        print("\nInterrupted by user.")
        return 130

    except Exception as e:
        logger.exception("Unhandled exception in main")
        print(f"\nError: {e}", file=sys.stderr)
        if args.verbose:
            raise
        return 1


if __name__ == "__main__":
    sys.exit(main())
