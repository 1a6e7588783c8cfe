"""
cli.py

Entry point for the `pywhoami` command-line interface (CLI).

This module sets up the CLI, parses arguments, configures logging, and prints the
answer of the requested identity query.

The CLI allows users to:

- Print a single identity fact (`username`, `hostname`, `distro`, ...), either
  best-effort or, with `--fallible`, failing loudly.
- Print every fact at once as a table, JSON or YAML (`report` command).
- Print the username when no command is given.

Functions:
    cli(): Parses CLI arguments, sets up logging, and dispatches the requested
            subcommand.
"""

import argparse
import sys
from pathlib import Path
from typing import List, Optional

from pywhoami import __version__, __package_name__, __package_home__
from pywhoami.config import config
from pywhoami.exceptions.exceptions import ConfigurationError, WhoamiError
from pywhoami.interface import query, report
from pywhoami.interface.commands import Command
from pywhoami.logging.logger import WhoamiLogger, get_logger
from pywhoami.report.render import render_text
from pywhoami.report.schema import collect_report
from pywhoami.utilities.os.filesystem import create_directory, get_absolute_path


def setup_logging(log_dir: Optional[Path] = None, verbose: bool = False) -> None:
    """
    Configure the package-wide logging settings.

    Args:
        log_dir (Path, optional): Directory for log files; console only when None.
        verbose (bool, optional): Enable debug logging to console. Defaults to False.

    Raises:
        ConfigurationError: If the log directory cannot be created.
    """
    if log_dir is not None:
        try:
            log_dir = create_directory(get_absolute_path(log_dir))
        except OSError as exc:
            raise ConfigurationError(
                message="Failed to create log directory",
                step="logging",
                invalid_key="log_dir",
                context={"log_dir": str(log_dir), "error": str(exc)},
            ) from exc
    config.log_dir = log_dir
    config.verbose = verbose


def dispatch_cli(args: argparse.Namespace, logger: WhoamiLogger) -> int:
    """
    Process CLI arguments and print the requested answer.

    Args:
        args (Namespace): Parsed command-line arguments from argparse.
        logger (WhoamiLogger): Current logging instance

    Returns:
        int: Process exit code.
    """
    if args.command is None:
        args.command = Command.USERNAME.value
        args.fallible = False

    command = Command(args.command)

    if command == Command.REPORT:
        identity = collect_report()
        if args.format == "json":
            print(identity.to_json())
        elif args.format == "yaml":
            print(identity.to_yaml(), end="")
        else:
            try:
                print(render_text(identity))
            except WhoamiError as e:
                logger.log_error(f"Rendering failed: {e}")
                return 1
        return 0

    run = query.get_query(command, use_fallible=args.fallible)
    try:
        answer = run()
    except WhoamiError as e:
        logger.log_error(f"{command.value}: {e}")
        return 1

    output = query.format_answer(command, answer)
    if output:
        print(output)
    return 0


def cli(argv: Optional[List[str]] = None) -> None:
    """
    Parse CLI arguments, configure logging, and execute the requested subcommand.

    Args:
        argv: Argument list; ``sys.argv[1:]`` when None.
    """

    parser = argparse.ArgumentParser(
        prog=__package_name__,
        description="Print who is running this program and on what kind of system: "
        "user names, device names, OS distribution, desktop environment, CPU "
        f"architecture and preferred languages. Visit {__package_home__} for more information.",
        epilog="Without a command, the username is printed.",
    )

    parser.add_argument(
        "--log-dir",
        help="Directory for log files. Logs go to the console only when omitted.",
    )

    parser.add_argument(
        "--verbose", "-v", action="store_true", help="Enable debug logging to console."
    )

    parser.add_argument(
        "--version",
        "--ver",
        action="version",
        version=f"{__package_name__}:{__version__}",
        help="Show program's version number and exit.",
    )

    subparsers = parser.add_subparsers(
        dest="command",
        title="Commands",
        description="Available commands:",
    )

    query.add_subcommands(subparsers)
    report.add_subcommands(subparsers)

    args = parser.parse_args(argv)

    try:
        setup_logging(
            log_dir=Path(args.log_dir) if args.log_dir else None,
            verbose=args.verbose,
        )
    except ConfigurationError as e:
        print(f"{__package_name__}: {e}", file=sys.stderr)
        sys.exit(1)

    logger = get_logger(__name__, config.log_dir, config.verbose)
    logger.log_debug(f'Using Package: "{__package_name__}:{__version__}"')

    sys.exit(dispatch_cli(args, logger))


if __name__ == "__main__":
    cli()
