"""
fallible.py

Identity queries that report failure instead of hiding it.

Each function asks the provider once and hands back its answer; ``UnavailableError``
and ``InvalidDataError`` propagate unchanged. Text results are strictly decoded, so a
name that is not valid UTF-8 (or UTF-16) raises rather than being mangled. Use
``pywhoami.api`` for queries that always produce a value.
"""

from typing import List, Optional

from pywhoami.descriptors.arch import Arch
from pywhoami.descriptors.desktop import DesktopEnv
from pywhoami.descriptors.platform import Platform
from pywhoami.encoding.conversions import NativeString, decode
from pywhoami.lang.language import Language
from pywhoami.lang.parser import parse_locale
from pywhoami.targets import current_target
from pywhoami.targets.base import Target


def _resolve(target: Optional[Target]) -> Target:
    return target if target is not None else current_target()


def username(target: Optional[Target] = None) -> str:
    """Get the user's account name; usually just the user's first name, no spaces."""
    return decode(_resolve(target).username())


def username_os(target: Optional[Target] = None) -> NativeString:
    """Get the user's account name as a native string."""
    return _resolve(target).username()


def realname(target: Optional[Target] = None) -> str:
    """Get the user's full name; empty when the system does not record one."""
    return decode(_resolve(target).realname())


def realname_os(target: Optional[Target] = None) -> NativeString:
    return _resolve(target).realname()


def account(target: Optional[Target] = None) -> str:
    """Get the account name, which may include the account server (``user@domain``)."""
    return decode(_resolve(target).account())


def account_os(target: Optional[Target] = None) -> NativeString:
    return _resolve(target).account()


def devicename(target: Optional[Target] = None) -> str:
    """Get the device's "pretty" name; empty when the system does not record one."""
    return decode(_resolve(target).devicename())


def devicename_os(target: Optional[Target] = None) -> NativeString:
    return _resolve(target).devicename()


def hostname(target: Optional[Target] = None) -> str:
    """Get the host device's hostname, with the case the system reports."""
    return _resolve(target).hostname()


def distro(target: Optional[Target] = None) -> str:
    """Get the name and (possibly) version of the operating system distribution."""
    return _resolve(target).distro()


def langs(target: Optional[Target] = None) -> List[Language]:
    """Get the user's preferred languages, most preferred first."""
    return parse_locale(_resolve(target).langs())


def arch(target: Optional[Target] = None) -> Arch:
    """Get the CPU architecture."""
    return _resolve(target).arch()


def desktop_env(target: Optional[Target] = None) -> DesktopEnv:
    return _resolve(target).desktop_env()


def platform(target: Optional[Target] = None) -> Platform:
    return _resolve(target).platform()
