"""
fake.py

Provider for sandboxed runtimes (WASI, Emscripten) that cannot see any identity of the
host. Every answer is a fixed placeholder; the architecture is the WebAssembly variant
matching the interpreter's pointer width.
"""

from pywhoami.descriptors.arch import Arch
from pywhoami.descriptors.desktop import DesktopEnv
from pywhoami.descriptors.platform import Platform
from pywhoami.targets.base import Target


class FakeTarget(Target):
    """Placeholder provider; never raises."""

    def __init__(self, runtime: str = "", pointer_width: int = 32):
        self._runtime = runtime
        self._pointer_width = pointer_width

    def langs(self) -> str:
        return "en/US"

    def username(self) -> bytes:
        return b"anonymous"

    def realname(self) -> bytes:
        return b"Anonymous"

    def devicename(self) -> bytes:
        return b"Unknown"

    def hostname(self) -> str:
        return "localhost"

    def distro(self) -> str:
        return "Emulated"

    def desktop_env(self) -> DesktopEnv:
        return DesktopEnv.unknown(self._runtime)

    def platform(self) -> Platform:
        return Platform.unknown(self._runtime)

    def arch(self) -> Arch:
        return Arch.WASM64 if self._pointer_width == 64 else Arch.WASM32

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(runtime={self._runtime!r}, pointer_width={self._pointer_width})"
