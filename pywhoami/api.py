"""
api.py

Identity queries that always produce a value.

Each query walks an explicit fallback chain (``pywhoami.fallback``). A source that is
empty or that raises (including a name that does not decode) passes control to the
next source; a fixed default ends every chain. Nothing here raises ``WhoamiError``.

Chains:
    username    username                          -> "unknown"
    realname    realname, username                -> "unknown"
    account     account, username                 -> "unknown"
    devicename  devicename, lower(hostname)        -> "localhost"
    hostname    lower(hostname)                    -> "localhost"
    distro      distro                            -> "Unknown <platform>"

Hostnames are lower-cased here and nowhere else.
"""

from typing import Callable, List, Optional

from pywhoami.config import config
from pywhoami.descriptors.arch import Arch
from pywhoami.descriptors.desktop import DesktopEnv
from pywhoami.descriptors.platform import Platform
from pywhoami.encoding.conversions import NativeString, decode, encode_native
from pywhoami.exceptions.exceptions import WhoamiError
from pywhoami.fallback import FallbackChain
from pywhoami.lang.language import Language
from pywhoami.lang.parser import parse_locale
from pywhoami.logging.logger import get_package_logger
from pywhoami.targets import current_target
from pywhoami.targets.base import Target


def _resolve(target: Optional[Target]) -> Target:
    return target if target is not None else current_target()


def _text(source: Callable[[], NativeString]) -> Callable[[], str]:
    return lambda: decode(source())


def _lower_hostname(target: Target) -> Callable[[], str]:
    return lambda: target.hostname().lower()


def _native_default(target: Target, text: str) -> NativeString:
    return encode_native(text, wide=target.wide_strings)


def username(target: Optional[Target] = None) -> str:
    """Get the user's account name, or ``"unknown"``."""
    t = _resolve(target)
    return (
        FallbackChain("username", config.default_username)
        .then("username", _text(t.username))
        .resolve()
    )


def username_os(target: Optional[Target] = None) -> NativeString:
    t = _resolve(target)
    return (
        FallbackChain("username_os", _native_default(t, config.default_username))
        .then("username", t.username)
        .resolve()
    )


def realname(target: Optional[Target] = None) -> str:
    """Get the user's full name, falling back to the account name."""
    t = _resolve(target)
    return (
        FallbackChain("realname", config.default_username)
        .then("realname", _text(t.realname))
        .then("username", _text(t.username))
        .resolve()
    )


def realname_os(target: Optional[Target] = None) -> NativeString:
    t = _resolve(target)
    return (
        FallbackChain("realname_os", _native_default(t, config.default_username))
        .then("realname", t.realname)
        .then("username", t.username)
        .resolve()
    )


def account(target: Optional[Target] = None) -> str:
    """Get the account name (possibly ``user@domain``), falling back to the username."""
    t = _resolve(target)
    return (
        FallbackChain("account", config.default_username)
        .then("account", _text(t.account))
        .then("username", _text(t.username))
        .resolve()
    )


def account_os(target: Optional[Target] = None) -> NativeString:
    t = _resolve(target)
    return (
        FallbackChain("account_os", _native_default(t, config.default_username))
        .then("account", t.account)
        .then("username", t.username)
        .resolve()
    )


def devicename(target: Optional[Target] = None) -> str:
    """Get the device's "pretty" name, falling back to the hostname."""
    t = _resolve(target)
    return (
        FallbackChain("devicename", config.default_hostname)
        .then("devicename", _text(t.devicename))
        .then("hostname", _lower_hostname(t))
        .resolve()
    )


def devicename_os(target: Optional[Target] = None) -> NativeString:
    t = _resolve(target)
    return (
        FallbackChain("devicename_os", _native_default(t, config.default_hostname))
        .then("devicename", t.devicename)
        .then("hostname", lambda: _native_default(t, t.hostname().lower()))
        .resolve()
    )


def hostname(target: Optional[Target] = None) -> str:
    """Get the host device's hostname, lower-cased."""
    t = _resolve(target)
    return (
        FallbackChain("hostname", config.default_hostname)
        .then("hostname", _lower_hostname(t))
        .resolve()
    )


def distro(target: Optional[Target] = None) -> str:
    """Get the OS distribution, or ``"Unknown <platform>"``."""
    t = _resolve(target)
    platform_ = t.platform()
    # The nameless placeholder platform gives a bare "Unknown".
    default = f"Unknown {platform_}" if platform_.known or platform_.name else "Unknown"
    return (
        FallbackChain("distro", default)
        .then("distro", t.distro)
        .resolve()
    )


def langs(target: Optional[Target] = None) -> List[Language]:
    """Get the user's preferred languages; empty if they cannot be determined."""
    t = _resolve(target)
    try:
        return parse_locale(t.langs())
    except WhoamiError as exc:
        get_package_logger(__name__).log_debug(f"langs: provider errored: {exc}")
        return []


def arch(target: Optional[Target] = None) -> Arch:
    """Get the CPU architecture; an escape value when it cannot be determined."""
    t = _resolve(target)
    try:
        return t.arch()
    except WhoamiError as exc:
        get_package_logger(__name__).log_debug(f"arch: provider errored: {exc}")
        return Arch.unknown()


def desktop_env(target: Optional[Target] = None) -> DesktopEnv:
    """Get the desktop environment."""
    return _resolve(target).desktop_env()


def platform(target: Optional[Target] = None) -> Platform:
    """Get the platform."""
    return _resolve(target).platform()
