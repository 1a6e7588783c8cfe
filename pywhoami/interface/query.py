"""
query.py

Defines one subcommand per identity query. Each prints the answer of the
defaulting layer, or with ``--fallible`` the answer of the fallible layer.
"""

import argparse
from typing import Callable, Dict

from pywhoami import api, fallible
from pywhoami.interface.commands import Command

QUERY_HELP: Dict[Command, str] = {
    Command.USERNAME: "Print the user's username.",
    Command.REALNAME: "Print the user's full name.",
    Command.ACCOUNT: "Print the user's account name (may include the account server).",
    Command.DEVICENAME: "Print the device's pretty name.",
    Command.HOSTNAME: "Print the device's hostname.",
    Command.DISTRO: "Print the operating system distribution.",
    Command.DESKTOP_ENV: "Print the desktop environment.",
    Command.PLATFORM: "Print the platform.",
    Command.ARCH: "Print the CPU architecture.",
    Command.LANGS: "Print the preferred languages, one per line.",
}

QUERY_FUNCTIONS: Dict[Command, str] = {
    Command.USERNAME: "username",
    Command.REALNAME: "realname",
    Command.ACCOUNT: "account",
    Command.DEVICENAME: "devicename",
    Command.HOSTNAME: "hostname",
    Command.DISTRO: "distro",
    Command.DESKTOP_ENV: "desktop_env",
    Command.PLATFORM: "platform",
    Command.ARCH: "arch",
    Command.LANGS: "langs",
}


def add_subcommands(parser: argparse._SubParsersAction):
    """
    Add one subcommand per identity query to the given parser.

    Args:
        parser (argparse._SubParsersAction): The subparsers object returned by
        parser.add_subparsers().
    """
    for command, help_text in QUERY_HELP.items():
        sub = parser.add_parser(command.value, description=help_text, help=help_text)
        sub.add_argument(
            "--fallible",
            "-f",
            action="store_true",
            help="Report the error and exit non-zero instead of falling back to a default.",
        )


def get_query(command: Command, use_fallible: bool = False) -> Callable:
    """Return the query function behind ``command``."""
    module = fallible if use_fallible else api
    return getattr(module, QUERY_FUNCTIONS[command])


def format_answer(command: Command, answer) -> str:
    """Render a query answer for printing."""
    if command == Command.LANGS:
        return "\n".join(str(lang) for lang in answer)
    return str(answer)
