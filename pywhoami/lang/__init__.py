from pywhoami.lang.language import ISO_639_1, Language
from pywhoami.lang.parser import parse_locale
from pywhoami.lang.region import ISO_3166_1, Region

__all__ = ["ISO_639_1", "Language", "parse_locale", "ISO_3166_1", "Region"]
