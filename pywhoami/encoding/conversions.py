"""
conversions.py

The boundary between operating-system native strings and validated text.

A native string is whatever the platform hands back:

- ``bytes`` on POSIX-like systems (passwd entries, hostnames, file contents,
  subprocess output). Decoding is strict UTF-8.
- ``str`` on UTF-16 systems (Windows). It is built from UTF-16 code units with
  ``surrogatepass``, so an unpaired surrogate survives as a lone surrogate code
  point. Strict decoding rejects such strings; ``decode_lossy`` replaces them
  with U+FFFD.

All functions here are pure.
"""

from typing import Iterable, Union

from pywhoami.exceptions.exceptions import InvalidDataError

NativeString = Union[bytes, str]

REPLACEMENT_CHARACTER = "�"


def decode(native: NativeString) -> str:
    """
    Convert a native string into validated text.

    Args:
        native: Native bytes (POSIX) or a UTF-16 derived ``str`` (Windows).

    Returns:
        str: The decoded text.

    Raises:
        InvalidDataError: If the bytes are not UTF-8, or the string holds unpaired
            surrogates. The original value is kept on the exception.
    """
    if isinstance(native, (bytes, bytearray)):
        try:
            return bytes(native).decode("utf-8")
        except UnicodeDecodeError as exc:
            raise InvalidDataError(
                message="Native string is not valid UTF-8",
                data=bytes(native),
                context={"position": exc.start},
            ) from exc

    try:
        native.encode("utf-8")
    except UnicodeEncodeError as exc:
        raise InvalidDataError(
            message="Native string is not valid unicode",
            data=native,
            context={"position": exc.start},
        ) from exc
    return native


def decode_lossy(native: NativeString) -> str:
    """Convert a native string into text, replacing anything undecodable with U+FFFD."""
    if isinstance(native, (bytes, bytearray)):
        return bytes(native).decode("utf-8", errors="replace")

    return "".join(
        REPLACEMENT_CHARACTER if 0xD800 <= ord(char) <= 0xDFFF else char
        for char in native
    )


def from_wide(units: Iterable[int]) -> str:
    """
    Build a native string from UTF-16 code units, stopping at the first NUL.

    Unpaired surrogates are preserved so that ``decode`` can report them.
    """
    data = bytearray()
    for unit in units:
        if unit == 0:
            break
        data += int(unit).to_bytes(2, "little")
    return bytes(data).decode("utf-16-le", errors="surrogatepass")


def encode_native(text: str, wide: bool = False) -> NativeString:
    """
    Convert text into the native form of a target.

    Args:
        text: Text to convert.
        wide: True for UTF-16 targets, whose native strings are ``str``.
    """
    if wide:
        return text
    return text.encode("utf-8")


def truncate_utf8(data: bytes, limit: int) -> bytes:
    """
    Cut ``data`` to at most ``limit`` bytes without splitting a UTF-8 sequence.

    >>> truncate_utf8("abé".encode("utf-8"), 3)
    b'ab'
    """
    if len(data) <= limit:
        return data
    cut = limit
    # A sequence is at most 4 bytes, so its lead byte is at most 3 bytes back.
    while cut > max(limit - 3, 0) and data[cut] & 0xC0 == 0x80:
        cut -= 1
    if data[cut] & 0xC0 == 0x80:
        return data[:limit]
    return data[:cut]
