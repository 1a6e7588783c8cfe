from pywhoami.encoding.conversions import (
    NativeString,
    decode,
    decode_lossy,
    encode_native,
    from_wide,
)

__all__ = ["NativeString", "decode", "decode_lossy", "encode_native", "from_wide"]
