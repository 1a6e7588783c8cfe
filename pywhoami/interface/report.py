"""
report.py

Defines the `report` subcommand, which prints every identity fact at once.
"""

import argparse

from pywhoami.interface.commands import Command

REPORT_FORMATS = ("text", "json", "yaml")


def add_subcommands(parser: argparse._SubParsersAction):
    """
    Add the `report` subcommand to the given parser.

    Args:
        parser (argparse._SubParsersAction): The subparsers object returned by
        parser.add_subparsers().
    """
    sub = parser.add_parser(
        Command.REPORT.value,
        description=(
            "The `report` command queries every identity fact through the defaulting "
            "layer and prints them together, as an aligned table or as JSON / YAML "
            "for other tools to consume."
        ),
        help="Print every identity fact.",
    )
    sub.add_argument(
        "--format",
        choices=REPORT_FORMATS,
        default="text",
        help="Output format (default: text).",
    )
