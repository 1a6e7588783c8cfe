"""
pywhoami

Best-effort, cross-platform answers to "who is running this, and where?".

The top-level functions never raise: when the operating system cannot answer, they walk
a fallback chain and end at a fixed default. Use ``pywhoami.fallible`` for the
error-carrying versions, and the ``*_os`` variants for native (undecoded) strings.
"""

__package_name__ = "pywhoami"
__version__ = "0.1.0"
__package_home__ = "https://pypi.org/project/pywhoami/"

# pylint: disable=wrong-import-position
from pywhoami.api import (
    account,
    account_os,
    arch,
    desktop_env,
    devicename,
    devicename_os,
    distro,
    hostname,
    langs,
    platform,
    realname,
    realname_os,
    username,
    username_os,
)
from pywhoami.descriptors import Arch, DesktopEnv, Platform, Width
from pywhoami.lang import Language, Region, parse_locale

__all__ = [
    "account",
    "account_os",
    "arch",
    "desktop_env",
    "devicename",
    "devicename_os",
    "distro",
    "hostname",
    "langs",
    "platform",
    "realname",
    "realname_os",
    "username",
    "username_os",
    "Arch",
    "DesktopEnv",
    "Platform",
    "Width",
    "Language",
    "Region",
    "parse_locale",
]
