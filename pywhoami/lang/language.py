"""
language.py

A user's preferred language: an ISO 639-1 code plus an ISO 3166-1 region.
"""

from dataclasses import dataclass, field
from typing import FrozenSet

from pywhoami.lang.region import Region

ISO_639_1: FrozenSet[str] = frozenset(
    """
    aa ab ae af ak am an ar as av ay az ba be bg bi bm bn bo br bs ca ce ch co cr
    cs cu cv cy da de dv dz ee el en eo es et eu fa ff fi fj fo fr fy ga gd gl gn
    gu gv ha he hi ho hr ht hu hy hz ia id ie ig ii ik io is it iu ja jv ka kg ki
    kj kk kl km kn ko kr ks ku kv kw ky la lb lg li ln lo lt lu lv mg mh mi mk ml
    mn mr ms mt my na nb nd ne ng nl nn no nr nv ny oc oj om or os pa pi pl ps pt
    qu rm rn ro ru rw sa sc sd se sg si sk sl sm sn so sq sr ss st su sv sw ta te
    tg th ti tk tl tn to tr ts tt tw ty ug uk ur uz ve vi vo wa wo xh yi yo za zh
    zu
    """.split()
)

TAG_SEPARATOR = "/"


@dataclass(frozen=True)
class Language:
    """
    One entry of a user's language preference list.

    Attributes:
        code: Lower-case ISO 639-1 code. For input that does not start with a
            two-letter code this is the normalised token itself.
        region: The region, ``Region.ANY`` when none was given, or ``Region.UNKNOWN``
            when the given region is not in the ISO 3166-1 table.
        tag: The normalised locale token, e.g. ``"de/DE"``. This is what the
            language renders as, so an unrecognised code is never lost.
    """

    code: str
    region: Region = field(default=Region.ANY)
    tag: str = ""

    def __post_init__(self):
        if not self.tag:
            tag = self.code
            if self.region.known:
                tag = f"{self.code}{TAG_SEPARATOR}{self.region.code}"
            object.__setattr__(self, "tag", tag)

    @property
    def known(self) -> bool:
        """True when ``code`` is an ISO 639-1 language code."""
        return self.code in ISO_639_1

    @property
    def is_other(self) -> bool:
        """True for opaque entries outside the ISO 639-1 table."""
        return not self.known

    def __str__(self) -> str:
        return self.tag
