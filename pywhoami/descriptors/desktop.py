"""
desktop.py

The desktop shell or session a user is logged into.
"""

from typing import ClassVar

from pywhoami.descriptors.base import Descriptor


class DesktopEnv(Descriptor):
    """
    The desktop environment of a system.

    An unrecognised session name is kept verbatim in an escape value, e.g.
    ``DesktopEnv.unknown("sway")`` renders as ``"Unknown: sway"``.
    """

    GNOME: ClassVar["DesktopEnv"]
    WINDOWS: ClassVar["DesktopEnv"]
    LXDE: ClassVar["DesktopEnv"]
    OPENBOX: ClassVar["DesktopEnv"]
    MATE: ClassVar["DesktopEnv"]
    XFCE: ClassVar["DesktopEnv"]
    KDE: ClassVar["DesktopEnv"]
    CINNAMON: ClassVar["DesktopEnv"]
    I3: ClassVar["DesktopEnv"]
    AQUA: ClassVar["DesktopEnv"]
    IOS: ClassVar["DesktopEnv"]
    ANDROID: ClassVar["DesktopEnv"]
    WEB_BROWSER: ClassVar["DesktopEnv"]
    CONSOLE: ClassVar["DesktopEnv"]
    UBUNTU: ClassVar["DesktopEnv"]
    ERMINE: ClassVar["DesktopEnv"]
    ORBITAL: ClassVar["DesktopEnv"]

    def is_gtk(self) -> bool:
        """True for desktops built on GTK."""
        return self in (
            DesktopEnv.GNOME,
            DesktopEnv.UBUNTU,
            DesktopEnv.CINNAMON,
            DesktopEnv.LXDE,
            DesktopEnv.MATE,
            DesktopEnv.XFCE,
        )

    def is_kde(self) -> bool:
        """True for KDE Plasma."""
        return self == DesktopEnv.KDE


DesktopEnv.GNOME = DesktopEnv("Gnome")
DesktopEnv.WINDOWS = DesktopEnv("Windows")
DesktopEnv.LXDE = DesktopEnv("LXDE")
DesktopEnv.OPENBOX = DesktopEnv("Openbox")
DesktopEnv.MATE = DesktopEnv("Mate")
DesktopEnv.XFCE = DesktopEnv("XFCE")
DesktopEnv.KDE = DesktopEnv("KDE")
DesktopEnv.CINNAMON = DesktopEnv("Cinnamon")
DesktopEnv.I3 = DesktopEnv("I3")
DesktopEnv.AQUA = DesktopEnv("Aqua")
DesktopEnv.IOS = DesktopEnv("IOS")
DesktopEnv.ANDROID = DesktopEnv("Android")
DesktopEnv.WEB_BROWSER = DesktopEnv("Web Browser")
DesktopEnv.CONSOLE = DesktopEnv("Console")
DesktopEnv.UBUNTU = DesktopEnv("Ubuntu")
DesktopEnv.ERMINE = DesktopEnv("Ermine")
DesktopEnv.ORBITAL = DesktopEnv("Orbital")

# Upper-cased substrings searched for in a session name, highest priority first.
SESSION_MARKERS = (
    ("GNOME", DesktopEnv.GNOME),
    ("LXDE", DesktopEnv.LXDE),
    ("OPENBOX", DesktopEnv.OPENBOX),
    ("I3", DesktopEnv.I3),
    ("UBUNTU", DesktopEnv.UBUNTU),
    ("PLASMA", DesktopEnv.KDE),
    ("KDE", DesktopEnv.KDE),
    ("XFCE", DesktopEnv.XFCE),
    ("MATE", DesktopEnv.MATE),
    ("CINNAMON", DesktopEnv.CINNAMON),
)


def desktop_from_session(session: str) -> DesktopEnv:
    """
    Infer the desktop environment from a session name such as ``$DESKTOP_SESSION``.

    Matching is a case-insensitive substring search in priority order; an
    unmatched name becomes ``DesktopEnv.unknown(session)`` with its original spelling.
    """
    upper = session.upper()
    for marker, desktop in SESSION_MARKERS:
        if marker in upper:
            return desktop
    return DesktopEnv.unknown(session)
