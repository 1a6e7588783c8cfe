"""
macos.py

Identity provider for macOS. The passwd database and gethostname behave as on other
Unix systems; the device name, distribution and language list come from macOS tools.
"""

import re

from pywhoami.descriptors.desktop import DesktopEnv
from pywhoami.descriptors.platform import Platform
from pywhoami.encoding.conversions import decode
from pywhoami.targets.unix import UnixTarget
from pywhoami.utilities.os.process import run_command

SW_VERS_FIELDS = ("-productName", "-productVersion", "-buildVersion")

_PLIST_ITEM = re.compile(rb'^\s*"?([^",()]+)"?,?\s*$')


def parse_apple_languages(output: bytes) -> str:
    """
    Convert ``defaults read -g AppleLanguages`` output into a ``;``-delimited list.

    The output is an old-style plist array::

        (
            "en-US",
            "fr-FR"
        )
    """
    languages = []
    for line in output.splitlines():
        match = _PLIST_ITEM.match(line)
        if match:
            languages.append(decode(match.group(1).strip()))
    return ";".join(languages)


class MacOSTarget(UnixTarget):
    """Provider for macOS."""

    def __init__(self, machine: str = ""):
        super().__init__(platform=Platform.MAC, machine=machine)

    def langs(self) -> str:
        langs = super().langs()
        if langs:
            return langs
        return parse_apple_languages(
            run_command(["defaults", "read", "-g", "AppleLanguages"])
        )

    def devicename(self) -> bytes:
        return run_command(["scutil", "--get", "ComputerName"]).strip()

    def distro(self) -> str:
        parts = [decode(run_command(["sw_vers", field]).strip()) for field in SW_VERS_FIELDS]
        return " ".join(part for part in parts if part)

    def desktop_env(self) -> DesktopEnv:
        return DesktopEnv.AQUA

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(machine={self._machine!r})"
