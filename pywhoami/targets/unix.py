"""
unix.py

Identity provider for Unix-like systems: Linux, the BSDs, illumos, Android, and
Cygwin/MSYS.

Sources:
    username, realname  the passwd entry of the effective user
    devicename          PRETTY_HOSTNAME in /etc/machine-info, else `hostnamectl --pretty`
    hostname            gethostname(), at most 255 bytes
    distro              PRETTY_NAME (else NAME) in /etc/os-release
    desktop_env         $DESKTOP_SESSION, else $XDG_CURRENT_DESKTOP
    langs               $LANGUAGE, $LC_ALL, $LC_MESSAGES, $LANG (first one set)

Native strings are bytes, recovered from Python's filesystem decoding with
``os.fsencode`` so that non-UTF-8 data reaches the codec unchanged.
"""

import os
import pwd
import socket

from pywhoami.config import config
from pywhoami.descriptors.arch import Arch
from pywhoami.descriptors.desktop import DesktopEnv, desktop_from_session
from pywhoami.descriptors.platform import Platform
from pywhoami.encoding.conversions import decode, truncate_utf8
from pywhoami.exceptions.exceptions import UnavailableError
from pywhoami.logging.logger import get_package_logger
from pywhoami.targets.base import HOST_NAME_MAX, Target
from pywhoami.utilities.os.process import run_command
from pywhoami.utilities.os.release import read_key_values

SESSION_VARIABLES = ("DESKTOP_SESSION", "XDG_CURRENT_DESKTOP")

# First variable that is set wins; LANGUAGE is a colon-separated preference list.
LOCALE_VARIABLES = ("LANGUAGE", "LC_ALL", "LC_MESSAGES", "LANG")


class UnixTarget(Target):
    """Provider backed by the passwd database, gethostname and freedesktop files."""

    def __init__(self, platform: Platform = Platform.LINUX, machine: str = ""):
        self._platform = platform
        self._machine = machine

    def _passwd(self) -> pwd.struct_passwd:
        uid = os.geteuid()
        try:
            return pwd.getpwuid(uid)
        except KeyError as exc:
            raise UnavailableError(
                message="No passwd record for the effective user",
                source="passwd",
                context={"uid": uid},
            ) from exc

    def langs(self) -> str:
        for variable in LOCALE_VARIABLES:
            value = os.environ.get(variable, "")
            if value:
                if variable == "LANGUAGE":
                    return value.replace(":", ";")
                return value
        return ""

    def username(self) -> bytes:
        return os.fsencode(self._passwd().pw_name)

    def realname(self) -> bytes:
        # GECOS is "Full Name,Room,Work Phone,Home Phone,Other"
        gecos = os.fsencode(self._passwd().pw_gecos)
        return gecos.split(b",", 1)[0].strip()

    def devicename(self) -> bytes:
        try:
            machine_info = read_key_values(config.machine_info_file)
        except UnavailableError as exc:
            get_package_logger(__name__).log_debug(
                f"{exc}; asking hostnamectl for the pretty hostname"
            )
            return run_command(["hostnamectl", "--pretty"]).strip()
        return machine_info.get("pretty_hostname", "").strip().encode("utf-8")

    def hostname(self) -> str:
        try:
            name = socket.gethostname()
        except OSError as exc:
            raise UnavailableError(
                message="gethostname failed",
                source="gethostname",
                context={"os_error": str(exc)},
            ) from exc
        return decode(truncate_utf8(os.fsencode(name), HOST_NAME_MAX))

    def distro(self) -> str:
        release = read_key_values(config.os_release_file)
        return release.get("pretty_name") or release.get("name") or ""

    def desktop_env(self) -> DesktopEnv:
        for variable in SESSION_VARIABLES:
            session = os.environ.get(variable, "")
            if session:
                return desktop_from_session(session)
        return DesktopEnv.unknown()

    def platform(self) -> Platform:
        return self._platform

    def arch(self) -> Arch:
        if not self._machine:
            raise UnavailableError(
                message="The machine architecture was not reported",
                source="platform.machine",
            )
        return Arch.from_machine(self._machine)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(platform={self._platform}, machine={self._machine!r})"
