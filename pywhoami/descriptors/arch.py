"""
arch.py

CPU instruction-set families and their pointer widths.

``Arch.from_machine`` normalises the spellings operating systems report through
``platform.machine()`` (``AMD64``, ``aarch64``, ``armv7l``, ``ppc64le`` ...) onto the
catalog. Information sources for the aliases:

* https://bugs.python.org/issue7146#msg94134
* https://superuser.com/questions/305901/possible-values-of-processor-architecture
"""

from enum import IntEnum
from typing import ClassVar, Dict

from pywhoami.descriptors.base import Descriptor
from pywhoami.exceptions.exceptions import UnknownArchError


class Width(IntEnum):
    """The address width of a CPU architecture."""

    BITS32 = 32
    BITS64 = 64

    def __str__(self) -> str:
        return f"{self.value} bits"


class Arch(Descriptor):
    """
    The CPU architecture of a system.

    ``width()`` is defined for every catalog value; an escape value cannot be sized
    from its name alone and raises ``UnknownArchError``.
    """

    ARMV5: ClassVar["Arch"]
    ARMV6: ClassVar["Arch"]
    ARMV7: ClassVar["Arch"]
    ARM64: ClassVar["Arch"]
    I386: ClassVar["Arch"]
    I586: ClassVar["Arch"]
    I686: ClassVar["Arch"]
    MIPS: ClassVar["Arch"]
    MIPSEL: ClassVar["Arch"]
    MIPS64: ClassVar["Arch"]
    MIPS64EL: ClassVar["Arch"]
    POWERPC: ClassVar["Arch"]
    POWERPC64: ClassVar["Arch"]
    POWERPC64LE: ClassVar["Arch"]
    RISCV32: ClassVar["Arch"]
    RISCV64: ClassVar["Arch"]
    S390X: ClassVar["Arch"]
    SPARC: ClassVar["Arch"]
    SPARC64: ClassVar["Arch"]
    WASM32: ClassVar["Arch"]
    WASM64: ClassVar["Arch"]
    X64: ClassVar["Arch"]

    def width(self) -> Width:
        """
        Return the pointer width of this architecture.

        Raises:
            UnknownArchError: For escape values.
        """
        if not self.known:
            raise UnknownArchError(
                message="Tried getting width of unknown arch",
                step="arch",
                arch=self.name,
            )
        return _WIDTHS[self.name]

    @classmethod
    def from_machine(cls, machine: str) -> "Arch":
        """
        Map a machine string as reported by the OS onto the catalog.

        Unrecognised strings become ``Arch.unknown(machine)``.
        """
        lowered = machine.strip().lower()
        if lowered in _ALIASES:
            return _ALIASES[lowered]
        for prefix, arch in _PREFIXES:
            if lowered.startswith(prefix):
                return arch
        return cls.from_name(machine.strip())


Arch.ARMV5 = Arch("armv5")
Arch.ARMV6 = Arch("armv6")
Arch.ARMV7 = Arch("armv7")
Arch.ARM64 = Arch("arm64")
Arch.I386 = Arch("i386")
Arch.I586 = Arch("i586")
Arch.I686 = Arch("i686")
Arch.MIPS = Arch("mips")
Arch.MIPSEL = Arch("mipsel")
Arch.MIPS64 = Arch("mips64")
Arch.MIPS64EL = Arch("mips64el")
Arch.POWERPC = Arch("powerpc")
Arch.POWERPC64 = Arch("powerpc64")
Arch.POWERPC64LE = Arch("powerpc64le")
Arch.RISCV32 = Arch("riscv32")
Arch.RISCV64 = Arch("riscv64")
Arch.S390X = Arch("s390x")
Arch.SPARC = Arch("sparc")
Arch.SPARC64 = Arch("sparc64")
Arch.WASM32 = Arch("wasm32")
Arch.WASM64 = Arch("wasm64")
Arch.X64 = Arch("x86_64")

_WIDTHS: Dict[str, Width] = {
    "armv5": Width.BITS32,
    "armv6": Width.BITS32,
    "armv7": Width.BITS32,
    "arm64": Width.BITS64,
    "i386": Width.BITS32,
    "i586": Width.BITS32,
    "i686": Width.BITS32,
    "mips": Width.BITS32,
    "mipsel": Width.BITS32,
    "mips64": Width.BITS64,
    "mips64el": Width.BITS64,
    "powerpc": Width.BITS32,
    "powerpc64": Width.BITS64,
    "powerpc64le": Width.BITS64,
    "riscv32": Width.BITS32,
    "riscv64": Width.BITS64,
    "s390x": Width.BITS64,
    "sparc": Width.BITS32,
    "sparc64": Width.BITS64,
    "wasm32": Width.BITS32,
    "wasm64": Width.BITS64,
    "x86_64": Width.BITS64,
}

_ALIASES: Dict[str, Arch] = {
    "amd64": Arch.X64,
    "em64t": Arch.X64,
    "x64": Arch.X64,
    "aarch64": Arch.ARM64,
    "aarch64_be": Arch.ARM64,
    "arm64e": Arch.ARM64,
    "x86": Arch.I686,
    "i486": Arch.I386,
    "ppc": Arch.POWERPC,
    "ppc64": Arch.POWERPC64,
    "ppc64le": Arch.POWERPC64LE,
}

# Checked in order, after the aliases.
_PREFIXES = (
    ("armv5", Arch.ARMV5),
    ("armv6", Arch.ARMV6),
    ("armv7", Arch.ARMV7),
    ("armv8l", Arch.ARMV7),
)
