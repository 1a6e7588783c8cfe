from pywhoami.descriptors.arch import Arch, Width
from pywhoami.descriptors.desktop import DesktopEnv, desktop_from_session
from pywhoami.descriptors.platform import Platform

__all__ = ["Arch", "Width", "DesktopEnv", "desktop_from_session", "Platform"]
