"""
parser.py

Turns a raw locale preference string into a ranked list of ``Language`` values.

Input is one or more locale tokens separated by ``;``, most preferred first, e.g.
``"en_US.UTF-8;fr_FR.UTF-8;C"``. For each token:

1. everything from the first ``.`` (codeset) or ``@`` (modifier) is dropped;
2. ``_`` and ``-`` become ``/``;
3. the POSIX pseudo-locales ``C`` and ``POSIX`` are skipped entirely;
4. a leading two-letter code becomes the (lower-case) language and the first later
   two-letter segment becomes the (upper-case) region.

A token without a leading two-letter code is still returned, as an opaque language
holding the token, so a preference is never dropped just because it is unusual.
"""

from typing import List, Optional

from pywhoami.lang.language import TAG_SEPARATOR, Language
from pywhoami.lang.region import Region

LOCALE_DELIMITER = ";"
POSIX_LOCALES = frozenset({"C", "POSIX"})


def _is_code(segment: str) -> bool:
    return len(segment) == 2 and segment.isascii() and segment.isalpha()


def normalize_token(token: str) -> Optional[str]:
    """
    Normalise one locale token to ``lang/REGION`` form.

    Returns None for empty tokens and for the POSIX pseudo-locales.
    """
    token = token.strip()
    for terminator in (".", "@"):
        token = token.split(terminator, 1)[0]
    token = token.replace("_", TAG_SEPARATOR).replace("-", TAG_SEPARATOR)

    if not token or token in POSIX_LOCALES:
        return None
    return token


def parse_token(token: str) -> Optional[Language]:
    """Parse a single locale token; None when it contributes no language."""
    tag = normalize_token(token)
    if tag is None:
        return None

    segments = tag.split(TAG_SEPARATOR)
    if not _is_code(segments[0]):
        return Language(code=tag, region=Region.ANY, tag=tag)

    segments[0] = segments[0].lower()
    region = Region.ANY
    for index, segment in enumerate(segments[1:], start=1):
        if _is_code(segment):
            segments[index] = segment.upper()
            region = Region.lookup(segments[index])
            break

    return Language(code=segments[0], region=region, tag=TAG_SEPARATOR.join(segments))


def parse_locale(raw: str) -> List[Language]:
    """
    Parse a ``;``-delimited locale preference string.

    Args:
        raw: e.g. ``"de_DE.UTF-8"`` or ``"en-US;fr-FR"``.

    Returns:
        List[Language]: Most preferred first; empty for an empty string.
    """
    languages = []
    for token in raw.split(LOCALE_DELIMITER):
        language = parse_token(token)
        if language is not None:
            languages.append(language)
    return languages
