"""utfconv: transcode text between UTF-8, UTF-16 and UTF-32.

Input and output are raw bytes holding code units in native width and
native byte order.  Conversion preserves the sequence of codepoints
exactly; nothing is normalized, detected or buffered across calls.

Quick start:
    >>> from utfconv import to_utf32_from8, to_utf8_from32
    >>> to_utf8_from32(to_utf32_from8("héllo".encode("utf-8"))).decode("utf-8")
    'héllo'

Every entry point is strict by default: ill-formed input raises UtfError
with code ERR_ILLEGAL_SEQUENCE.  Pass strict=False to get U+FFFD in
place of each bad sequence instead:
    >>> to_utf8_from16(to_utf16_from8(b"\\xffA", strict=False))
    b'\\xef\\xbf\\xbdA'
"""

from __future__ import annotations

from ._constants import MAX_CODEPOINT, REPLACEMENT_CHARACTER
from ._core import (
    ENCODINGS,
    UTF8,
    UTF16,
    UTF32,
    Encoding,
    Transcoded,
    convert,
    destination_capacity,
    get_encoding,
    transcode,
)
from ._decoders import decode_utf8, decode_utf16, decode_utf32
from ._encoders import encode_utf8, encode_utf16, encode_utf32
from ._errors import (
    ERR_DESTINATION_EXHAUSTED,
    ERR_ILLEGAL_SEQUENCE,
    Failure,
    UtfError,
)

__version__ = "1.0.0"

__all__ = [
    # Buffer-level conversions
    "to_utf16_from8",
    "to_utf32_from8",
    "to_utf8_from16",
    "to_utf32_from16",
    "to_utf8_from32",
    "to_utf16_from32",
    "convert",
    # Engine
    "transcode",
    "Transcoded",
    "destination_capacity",
    "decode_utf8",
    "decode_utf16",
    "decode_utf32",
    "encode_utf8",
    "encode_utf16",
    "encode_utf32",
    # Encoding forms
    "Encoding",
    "ENCODINGS",
    "UTF8",
    "UTF16",
    "UTF32",
    "get_encoding",
    # Errors
    "UtfError",
    "Failure",
    "ERR_ILLEGAL_SEQUENCE",
    "ERR_DESTINATION_EXHAUSTED",
    # Constants
    "MAX_CODEPOINT",
    "REPLACEMENT_CHARACTER",
]


# ── Widening: allocate one destination unit per source unit ──

def to_utf16_from8(data: bytes, strict: bool = True) -> bytes:
    """UTF-8 bytes -> native-endian UTF-16."""
    return convert(data, UTF8, UTF16, strict)


def to_utf32_from8(data: bytes, strict: bool = True) -> bytes:
    """UTF-8 bytes -> native-endian UTF-32."""
    return convert(data, UTF8, UTF32, strict)


def to_utf32_from16(data: bytes, strict: bool = True) -> bytes:
    """Native-endian UTF-16 -> native-endian UTF-32."""
    return convert(data, UTF16, UTF32, strict)


# ── Narrowing: allocate four destination units per source unit ──

def to_utf8_from16(data: bytes, strict: bool = True) -> bytes:
    """Native-endian UTF-16 -> UTF-8 bytes."""
    return convert(data, UTF16, UTF8, strict)


def to_utf8_from32(data: bytes, strict: bool = True) -> bytes:
    """Native-endian UTF-32 -> UTF-8 bytes."""
    return convert(data, UTF32, UTF8, strict)


def to_utf16_from32(data: bytes, strict: bool = True) -> bytes:
    """Native-endian UTF-32 -> native-endian UTF-16."""
    return convert(data, UTF32, UTF16, strict)
