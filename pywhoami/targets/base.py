"""
base.py

The capability set every platform provider implements.

A provider answers each identity question straight from the operating system and
does no defaulting of its own. It follows two rules:

- If the primitive could not be reached (no passwd record, failed call, missing file,
  helper program not installed), raise ``UnavailableError``.
- If the primitive answered but the fact is simply not set (no GECOS name, no pretty
  hostname), return an empty value. This is success, not an error.

Keeping these two signals apart is what lets ``pywhoami.api`` choose the right fallback.
"""

from abc import ABC, abstractmethod

from pywhoami.descriptors.arch import Arch
from pywhoami.descriptors.desktop import DesktopEnv
from pywhoami.descriptors.platform import Platform
from pywhoami.encoding.conversions import NativeString

HOST_NAME_MAX = 255


class Target(ABC):
    """
    Platform support for one operating-system family.

    Attributes:
        wide_strings: True when native strings are UTF-16 (``str``) rather than bytes.
    """

    wide_strings = False

    @abstractmethod
    def langs(self) -> str:
        """Return the raw, ``;``-delimited language preference string."""

    @abstractmethod
    def username(self) -> NativeString:
        """Return the user's login name."""

    @abstractmethod
    def realname(self) -> NativeString:
        """Return the user's "real" / "full" name; empty when unset."""

    def account(self) -> NativeString:
        """Return the account name, which may include an account server."""
        return self.username()

    @abstractmethod
    def devicename(self) -> NativeString:
        """Return the device's "pretty" name; empty when unset."""

    @abstractmethod
    def hostname(self) -> str:
        """Return the device's hostname, case preserved."""

    @abstractmethod
    def distro(self) -> str:
        """Return the OS distribution name and (possibly) version."""

    @abstractmethod
    def desktop_env(self) -> DesktopEnv:
        """Return the desktop environment; never fails."""

    @abstractmethod
    def platform(self) -> Platform:
        """Return the target platform; never fails."""

    @abstractmethod
    def arch(self) -> Arch:
        """Return the CPU architecture."""

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}()"
