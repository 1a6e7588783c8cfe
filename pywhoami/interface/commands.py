"""
commands.py

Defines the valid CLI commands for the pywhoami package.

This module provides the `Command` enumeration, which centralizes all
subcommand names used by the CLI.
"""

from enum import Enum


class Command(Enum):
    """
    Enumeration of valid CLI commands for pywhoami.

    Every command except REPORT prints a single identity fact.

    Attributes:
        REPORT (str): Print every identity fact as a table, JSON or YAML.
    """

    USERNAME = "username"
    REALNAME = "realname"
    ACCOUNT = "account"
    DEVICENAME = "devicename"
    HOSTNAME = "hostname"
    DISTRO = "distro"
    DESKTOP_ENV = "desktop-env"
    PLATFORM = "platform"
    ARCH = "arch"
    LANGS = "langs"
    REPORT = "report"
