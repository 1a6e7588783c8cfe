"""
platform.py

The coarse operating-system family a program is running on.
"""

from typing import ClassVar

from pywhoami.descriptors.base import Descriptor


class Platform(Descriptor):
    """
    The underlying platform for a system.

    Catalog values render as their canonical label, e.g. ``str(Platform.MAC) == "macOS"``;
    ``Platform.unknown("WASI")`` renders as ``"Unknown: WASI"``.
    """

    LINUX: ClassVar["Platform"]
    BSD: ClassVar["Platform"]
    WINDOWS: ClassVar["Platform"]
    MAC: ClassVar["Platform"]
    ILLUMOS: ClassVar["Platform"]
    IOS: ClassVar["Platform"]
    ANDROID: ClassVar["Platform"]
    NINTENDO_3DS: ClassVar["Platform"]
    PLAYSTATION: ClassVar["Platform"]
    FUCHSIA: ClassVar["Platform"]
    REDOX: ClassVar["Platform"]


Platform.LINUX = Platform("Linux")
Platform.BSD = Platform("BSD")
Platform.WINDOWS = Platform("Windows")
Platform.MAC = Platform("macOS")
Platform.ILLUMOS = Platform("illumos")
Platform.IOS = Platform("iOS")
Platform.ANDROID = Platform("Android")
Platform.NINTENDO_3DS = Platform("Nintendo 3DS")
Platform.PLAYSTATION = Platform("PlayStation")
Platform.FUCHSIA = Platform("Fuchsia")
Platform.REDOX = Platform("Redox")
