"""
base.py

Shared shape of the descriptive values (Platform, DesktopEnv, Arch).

Each descriptor is an immutable value holding a canonical display name. The catalog
of known values lives on the class as attributes (``Platform.LINUX``); anything outside
the catalog is represented by an escape value built with ``unknown()``. The escape
still carries the raw name, so no query fails just because it met something exotic.
An escape without a name stands for "nothing reported" and renders as ``Unknown``.
"""

from dataclasses import dataclass
from typing import List, Type, TypeVar

D = TypeVar("D", bound="Descriptor")

UNKNOWN_LABEL = "Unknown"
UNKNOWN_PREFIX = f"{UNKNOWN_LABEL}: "


@dataclass(frozen=True)
class Descriptor:
    """
    A catalog value, or an escape value carrying a name the catalog does not know.

    Attributes:
        name: Canonical display name, or the raw name for escape values.
        known: False for escape values.
    """

    name: str
    known: bool = True

    @classmethod
    def unknown(cls: Type[D], name: str = "") -> D:
        """Build the escape value for ``name``; without a name, the bare placeholder."""
        return cls(name, known=False)

    @classmethod
    def catalog(cls: Type[D]) -> List[D]:
        """Return the known values, in declaration order."""
        return [
            value
            for value in vars(cls).values()
            if isinstance(value, cls) and value.known
        ]

    @classmethod
    def from_name(cls: Type[D], text: str) -> D:
        """
        Match ``text`` case-insensitively against the catalog.

        Both the display name (``"macOS"``) and the attribute name (``"MAC"``)
        are accepted. Unmatched text becomes the escape value.
        """
        wanted = text.strip()
        if wanted.startswith(UNKNOWN_PREFIX):
            return cls.unknown(wanted[len(UNKNOWN_PREFIX):])

        folded = wanted.casefold()
        if folded == UNKNOWN_LABEL.casefold():
            return cls.unknown()
        for attribute, value in vars(cls).items():
            if isinstance(value, cls) and value.known:
                if folded in (value.name.casefold(), attribute.casefold()):
                    return value
        return cls.unknown(wanted)

    def __str__(self) -> str:
        if not self.known:
            return f"{UNKNOWN_PREFIX}{self.name}" if self.name else UNKNOWN_LABEL
        return self.name
