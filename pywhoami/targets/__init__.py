"""
Platform providers.

Exactly one provider serves the whole process. ``select_target`` chooses it from a
``PlatformInfo``; ``current_target`` does so once for the running interpreter and
reuses the result. Providers are imported lazily so that, e.g., ``pwd`` is never
imported on Windows.
"""

from functools import lru_cache

from pywhoami.descriptors.platform import Platform
from pywhoami.targets.base import Target
from pywhoami.utilities.os.platform import PlatformInfo, get_platform_info

# Non-Linux Unix systems served by the generic Unix provider.
UNIX_PLATFORMS = {
    "sunos": Platform.ILLUMOS,
    "illumos": Platform.ILLUMOS,
    "android": Platform.ANDROID,
    "ios": Platform.IOS,
    "fuchsia": Platform.FUCHSIA,
}

SANDBOX_RUNTIMES = {"wasi": "WASI", "emscripten": "Emscripten"}


def select_target(info: PlatformInfo) -> Target:
    """
    Choose the provider for the system described by ``info``.

    Unrecognised Unix-like systems get the generic Unix provider with an escape
    ``Platform`` naming the system.
    """
    if info.is_sandboxed:
        from pywhoami.targets.fake import FakeTarget

        return FakeTarget(
            runtime=SANDBOX_RUNTIMES.get(info.system, info.system),
            pointer_width=info.pointer_width,
        )

    if info.is_windows:
        from pywhoami.targets.windows import WindowsTarget

        return WindowsTarget(machine=info.machine)

    if info.is_mac:
        from pywhoami.targets.macos import MacOSTarget

        return MacOSTarget(machine=info.machine)

    from pywhoami.targets.unix import UnixTarget

    if info.is_linux:
        platform = Platform.LINUX
    elif info.is_bsd:
        platform = Platform.BSD
    elif info.is_posix_layer:
        platform = Platform.WINDOWS
    else:
        platform = UNIX_PLATFORMS.get(info.system, Platform.unknown(info.system))
    return UnixTarget(platform=platform, machine=info.machine)


@lru_cache(maxsize=None)
def current_target() -> Target:
    """Return the provider for the running interpreter."""
    return select_target(get_platform_info())


__all__ = ["Target", "current_target", "select_target"]
