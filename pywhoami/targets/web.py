"""
web.py

Provider that describes a browser client from its HTTP headers.

The ``User-Agent`` header answers the platform, distribution, architecture and device
(browser) name; the optional ``Accept-Language`` header answers the language list.
A web client exposes no user or host identity, so those come back as placeholders.

Example:
    >>> target = WebTarget(
    ...     "Mozilla/5.0 (X11; Ubuntu; Linux x86_64; rv:120.0) Gecko/20100101 Firefox/120.0",
    ...     accept_language="de-DE,de;q=0.9,en;q=0.8",
    ... )
    >>> target.distro()
    'Ubuntu'
    >>> target.langs()
    'de-DE;de;en'
"""

import re

from typing import List, Optional, Tuple

from pywhoami.descriptors.arch import Arch
from pywhoami.descriptors.desktop import DesktopEnv
from pywhoami.descriptors.platform import Platform
from pywhoami.exceptions.exceptions import UnavailableError
from pywhoami.targets.base import Target

# Checked in order; the first marker found in the platform segment wins.
PLATFORM_MARKERS: Tuple[Tuple[str, Platform], ...] = (
    ("Windows", Platform.WINDOWS),
    ("Android", Platform.ANDROID),
    ("iPhone", Platform.IOS),
    ("iPad", Platform.IOS),
    ("iPod", Platform.IOS),
    ("Macintosh", Platform.MAC),
    ("Mac OS X", Platform.MAC),
    ("CrOS", Platform.LINUX),
    ("Linux", Platform.LINUX),
    ("FreeBSD", Platform.BSD),
    ("OpenBSD", Platform.BSD),
    ("NetBSD", Platform.BSD),
    ("SunOS", Platform.ILLUMOS),
    ("Fuchsia", Platform.FUCHSIA),
    ("PlayStation", Platform.PLAYSTATION),
    ("Nintendo 3DS", Platform.NINTENDO_3DS),
)

_QUALITY = re.compile(r"^q=([0-9.]+)$")


def platform_segment(user_agent: str) -> Optional[str]:
    """Return the text between the first ``(`` and the following ``)``."""
    start = user_agent.find("(")
    end = user_agent.find(")", start + 1)
    if start == -1 or end == -1:
        return None
    return user_agent[start + 1:end]


def _version_after(segment: str, marker: str) -> str:
    index = segment.find(marker)
    if index == -1:
        return ""
    version = segment[index + len(marker):]
    return re.split(r"[;)\s]", version, maxsplit=1)[0]


def parse_accept_language(header: str) -> List[str]:
    """
    Order the tags of an ``Accept-Language`` header by descending quality.

    Ties keep header order; ``*`` and ``q=0`` entries are dropped.
    """
    weighted = []
    for position, item in enumerate(header.split(",")):
        tag, *params = [part.strip() for part in item.split(";")]
        quality = 1.0
        for param in params:
            match = _QUALITY.match(param)
            if match:
                try:
                    quality = float(match.group(1))
                except ValueError:
                    quality = 0.0
        if tag and tag != "*" and quality > 0:
            weighted.append((-quality, position, tag))
    return [tag for _, _, tag in sorted(weighted)]


class WebTarget(Target):
    """Provider for a browser client, described by its request headers."""

    wide_strings = True

    def __init__(self, user_agent: str, accept_language: str = ""):
        self.user_agent = user_agent
        self.accept_language = accept_language

    def langs(self) -> str:
        return ";".join(parse_accept_language(self.accept_language))

    def username(self) -> str:
        return "anonymous"

    def realname(self) -> str:
        return "Anonymous"

    def devicename(self) -> str:
        """Return the browser name, taken from the last ``product/version`` token."""
        tokens = self.user_agent.split()
        if not tokens or "/" not in tokens[-1]:
            return ""
        name = tokens[-1].split("/", 1)[0]
        if name == "Safari" and "Chrome/" in self.user_agent:
            return "Chrome"
        if name == "Edg":
            return "Edge"
        return name

    def hostname(self) -> str:
        return "localhost"

    def distro(self) -> str:
        segment = platform_segment(self.user_agent)
        if segment is None:
            return ""

        if "Windows" in segment:
            version = _version_after(segment, "NT ")
            return f"Windows {version.split('.')[0]}" if version else "Windows"
        if "Android" in segment:
            return f"Android {_version_after(segment, 'Android ')}".strip()
        if "iPhone" in segment or "iPad" in segment or "iPod" in segment:
            version = _version_after(segment, " OS ")
            return f"iOS {version.replace('_', '.')}".strip()
        if "Mac OS X" in segment:
            version = _version_after(segment, "Mac OS X ")
            return f"macOS {version.replace('_', '.')}".strip()
        if "CrOS" in segment:
            return "Chrome OS"

        parts = [
            part.strip()
            for part in segment.split(";")
            if part.strip() and part.strip() not in ("X11", "Wayland", "U")
        ]
        if not parts:
            return ""
        if parts[0].startswith("Linux"):
            return "Unknown Linux"
        return parts[0]

    def desktop_env(self) -> DesktopEnv:
        return DesktopEnv.WEB_BROWSER

    def platform(self) -> Platform:
        segment = platform_segment(self.user_agent) or ""
        for marker, platform in PLATFORM_MARKERS:
            if marker in segment:
                return platform
        return Platform.unknown(segment)

    def arch(self) -> Arch:
        segment = platform_segment(self.user_agent) or ""
        for part in re.split(r"[;\s]+", segment):
            if not part:
                continue
            arch = Arch.from_machine(part)
            if arch.known:
                return arch
        raise UnavailableError(
            message="User agent does not name a CPU architecture",
            source="User-Agent",
            context={"user_agent": self.user_agent},
        )

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(user_agent={self.user_agent!r})"
