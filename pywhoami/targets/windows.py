"""
windows.py

Identity provider for Windows, built on the Win32 API through ctypes.

Native strings are ``str`` built from raw UTF-16 code units with ``from_wide`` so that
an unpaired surrogate in a user or computer name reaches the codec instead of being
silently replaced.
"""

import ctypes

from ctypes import wintypes
from typing import Callable, Tuple

from pywhoami.descriptors.arch import Arch
from pywhoami.descriptors.desktop import DesktopEnv
from pywhoami.descriptors.platform import Platform
from pywhoami.encoding.conversions import decode, from_wide
from pywhoami.exceptions.exceptions import UnavailableError
from pywhoami.targets.base import Target

# EXTENDED_NAME_FORMAT
NAME_DISPLAY = 3
NAME_USER_PRINCIPAL = 8

# COMPUTER_NAME_FORMAT
COMPUTER_NAME_DNS_HOSTNAME = 1
COMPUTER_NAME_DNS_FULLY_QUALIFIED = 3

MUI_LANGUAGE_NAME = 0x8

ERROR_INSUFFICIENT_BUFFER = 122
ERROR_MORE_DATA = 234
ERROR_NONE_MAPPED = 1332

UNLEN = 256

# (major, minor) -> release name; 10.0 is split on the build number.
WINDOWS_RELEASES = {
    (5, 0): "2000",
    (5, 1): "XP",
    (5, 2): "XP",
    (6, 0): "Vista",
    (6, 1): "7",
    (6, 2): "8",
    (6, 3): "8.1",
}
WINDOWS_11_FIRST_BUILD = 22000


def decode_windows_version(bits: int) -> str:
    """
    Turn the DWORD returned by ``GetVersion`` into a release name.

    The low byte is the major version, the next byte the minor version, and the high
    word the build number when bit 31 is clear.

    >>> decode_windows_version(0x4A61000A)
    'Windows 10'
    """
    major = bits & 0xFF
    minor = (bits >> 8) & 0xFF
    build = (bits >> 16) & 0xFFFF if not bits & 0x80000000 else 0

    if major == 10:
        name = "11" if build >= WINDOWS_11_FIRST_BUILD else "10"
    else:
        name = WINDOWS_RELEASES.get((major, minor), f"{major}.{minor}")
    return f"Windows {name}"


def split_multi_string(text: str) -> Tuple[str, ...]:
    """Split a NUL-separated, double-NUL-terminated string list."""
    return tuple(item for item in text.split("\0") if item)


class WindowsTarget(Target):
    """Provider backed by advapi32, secur32 and kernel32."""

    wide_strings = True

    def __init__(self, machine: str = ""):
        self._machine = machine
        self._kernel32 = ctypes.WinDLL("kernel32", use_last_error=True)
        self._advapi32 = ctypes.WinDLL("advapi32", use_last_error=True)
        self._secur32 = ctypes.WinDLL("secur32", use_last_error=True)
        self._secur32.GetUserNameExW.restype = wintypes.BOOLEAN
        self._kernel32.GetVersion.restype = wintypes.DWORD

    def _sized_call(self, source: str, func: Callable, *args, size: int = UNLEN + 1) -> str:
        """
        Call a Win32 ``(..., LPWSTR buffer, LPDWORD size)`` function, growing the buffer
        until the result fits, and return the result as a native string.
        """
        length = wintypes.DWORD(size)
        while True:
            capacity = length.value
            buffer = (ctypes.c_uint16 * capacity)()
            if func(*args, ctypes.cast(buffer, wintypes.LPWSTR), ctypes.byref(length)):
                return from_wide(buffer)

            error = ctypes.get_last_error()
            if error not in (ERROR_MORE_DATA, ERROR_INSUFFICIENT_BUFFER):
                raise UnavailableError(
                    message=f"{source} failed",
                    source=source,
                    context={"winerror": error},
                )
            if length.value <= capacity:
                length.value = capacity * 2

    def langs(self) -> str:
        count = wintypes.ULONG(0)
        size = wintypes.ULONG(0)
        query = self._kernel32.GetUserPreferredUILanguages
        if not query(MUI_LANGUAGE_NAME, ctypes.byref(count), None, ctypes.byref(size)):
            raise UnavailableError(
                message="GetUserPreferredUILanguages failed",
                source="GetUserPreferredUILanguages",
                context={"winerror": ctypes.get_last_error()},
            )

        buffer = (ctypes.c_uint16 * size.value)()
        if not query(
            MUI_LANGUAGE_NAME,
            ctypes.byref(count),
            ctypes.cast(buffer, wintypes.LPWSTR),
            ctypes.byref(size),
        ):
            raise UnavailableError(
                message="GetUserPreferredUILanguages failed",
                source="GetUserPreferredUILanguages",
                context={"winerror": ctypes.get_last_error()},
            )

        text = bytes(buffer).decode("utf-16-le", errors="surrogatepass")
        return ";".join(decode(item) for item in split_multi_string(text))

    def username(self) -> str:
        return self._sized_call("GetUserNameW", self._advapi32.GetUserNameW)

    def _user_name_ex(self, name_format: int) -> str:
        try:
            return self._sized_call(
                "GetUserNameExW", self._secur32.GetUserNameExW, name_format
            )
        except UnavailableError as exc:
            if exc.context.get("winerror") == ERROR_NONE_MAPPED:
                return ""
            raise

    def realname(self) -> str:
        return self._user_name_ex(NAME_DISPLAY)

    def account(self) -> str:
        # Local accounts have no user principal name.
        return self._user_name_ex(NAME_USER_PRINCIPAL) or self.username()

    def devicename(self) -> str:
        return self._sized_call(
            "GetComputerNameExW",
            self._kernel32.GetComputerNameExW,
            COMPUTER_NAME_DNS_FULLY_QUALIFIED,
        )

    def hostname(self) -> str:
        return decode(
            self._sized_call(
                "GetComputerNameExW",
                self._kernel32.GetComputerNameExW,
                COMPUTER_NAME_DNS_HOSTNAME,
            )
        )

    def distro(self) -> str:
        return decode_windows_version(self._kernel32.GetVersion())

    def desktop_env(self) -> DesktopEnv:
        return DesktopEnv.WINDOWS

    def platform(self) -> Platform:
        return Platform.WINDOWS

    def arch(self) -> Arch:
        if not self._machine:
            raise UnavailableError(
                message="The machine architecture was not reported",
                source="platform.machine",
            )
        return Arch.from_machine(self._machine)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(machine={self._machine!r})"
