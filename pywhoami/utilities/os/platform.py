"""
Platform Information Utilities

This module identifies the target the interpreter is running on, so that exactly one
identity provider can be chosen for the whole process. It only inspects interpreter
constants (``sys.platform``, ``sys.maxsize``) and ``platform.machine()``; it never
probes the user database or other identity sources.

Classes:
- PlatformInfo:
    Encapsulates system name, machine architecture, pointer width and OS convenience flags.

Functions:
- get_platform_info() -> PlatformInfo:
    Returns a PlatformInfo object for the current system.
"""

from dataclasses import dataclass
import platform
import sys

BSD_SYSTEMS = ("freebsd", "openbsd", "netbsd", "dragonfly")
SANDBOX_SYSTEMS = ("wasi", "emscripten")
POSIX_LAYER_SYSTEMS = ("cygwin", "msys")


def normalize_system(system: str) -> str:
    """
    Normalise a ``sys.platform`` value: lower-case, with trailing release digits
    removed (``freebsd14`` -> ``freebsd``, ``sunos5`` -> ``sunos``). ``win32`` is
    kept as is.
    """
    system = system.lower()
    if system == "win32":
        return system
    return system.rstrip("0123456789")


@dataclass(frozen=True)
class PlatformInfo:
    """
    Encapsulates normalized platform information in an immutable object representing
    the host system running the library.

    Computed properties cover the OS checks used to choose a provider.
    """

    system: str
    machine: str
    pointer_width: int = 64

    @property
    def is_mac(self) -> bool:
        """True if the system is macOS (darwin)."""
        return self.system == "darwin"

    @property
    def is_linux(self) -> bool:
        """True if the system is Linux."""
        return self.system.startswith("linux")

    @property
    def is_windows(self) -> bool:
        """True if the system is native Windows."""
        return self.system == "win32"

    @property
    def is_posix_layer(self) -> bool:
        """True for Cygwin and MSYS, which run POSIX APIs on top of Windows."""
        return self.system in POSIX_LAYER_SYSTEMS

    @property
    def is_bsd(self) -> bool:
        """True if the system is one of the BSDs."""
        return self.system in BSD_SYSTEMS

    @property
    def is_sandboxed(self) -> bool:
        """True for WebAssembly runtimes without access to OS identity."""
        return self.system in SANDBOX_SYSTEMS


def get_platform_info() -> PlatformInfo:
    """
    Retrieve platform information as a PlatformInfo object.

    Returns:
        PlatformInfo: Contains system name, machine architecture, pointer width and OS flags.
    """
    return PlatformInfo(
        system=normalize_system(sys.platform),
        machine=platform.machine(),
        pointer_width=64 if sys.maxsize > 2**32 else 32,
    )
