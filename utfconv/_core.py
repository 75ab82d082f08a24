"""utfconv core: the sequence transcoder and the buffer-level layer.

``transcode()`` is the engine: it walks a source unit sequence with a
decoder and feeds each codepoint straight into an encoder, one at a time,
until either side runs out.  It never raises; problems come back as a
``Failure`` value.

``convert()`` is the buffer layer on top.  It views the caller's bytes as
native-endian code units, allocates one destination ``bytearray`` sized by
a fixed heuristic, runs the transcoder over both, and hands back exactly
the written prefix.  This is the only place a ``Failure`` is raised as a
``UtfError``.
"""

from __future__ import annotations

import logging
from typing import (
    Callable,
    Dict,
    MutableSequence,
    NamedTuple,
    NoReturn,
    Sequence,
    Union,
)

from ._constants import NARROW_FACTOR
from ._decoders import Decoded, decode_utf8, decode_utf16, decode_utf32
from ._encoders import Encoded, encode_utf8, encode_utf16, encode_utf32
from ._errors import (
    ERR_DESTINATION_EXHAUSTED,
    ERR_ILLEGAL_SEQUENCE,
    Failure,
    UtfError,
    illegal_sequence,
)

_LOGGER = logging.getLogger(__name__)

Decoder = Callable[[Sequence[int], int, int, bool], Decoded]
Encoder = Callable[[int, MutableSequence[int], int, int, bool], Encoded]


# ── Encoding forms ────────────────────────────────────────────

class Encoding(NamedTuple):
    """One Unicode encoding form in native byte order."""

    name: str
    width: int          # bytes per code unit
    unit_format: str    # memoryview.cast() format for one unit
    decode: Decoder
    encode: Encoder


UTF8 = Encoding("utf-8", 1, "B", decode_utf8, encode_utf8)
UTF16 = Encoding("utf-16", 2, "H", decode_utf16, encode_utf16)
UTF32 = Encoding("utf-32", 4, "I", decode_utf32, encode_utf32)

ENCODINGS = (UTF8, UTF16, UTF32)

_ALIASES: Dict[str, Encoding] = {
    "utf-8": UTF8, "utf8": UTF8, "utf_8": UTF8, "8": UTF8,
    "utf-16": UTF16, "utf16": UTF16, "utf_16": UTF16, "16": UTF16,
    "utf-32": UTF32, "utf32": UTF32, "utf_32": UTF32, "32": UTF32,
}


def get_encoding(encoding: Union[str, Encoding]) -> Encoding:
    """Resolve an Encoding or a name such as "utf-16", "utf16" or "16"."""
    if isinstance(encoding, Encoding):
        return encoding
    try:
        return _ALIASES[str(encoding).strip().lower()]
    except KeyError:
        raise ValueError("unknown encoding form: {!r}".format(encoding)) from None


# ── Sequence transcoder ───────────────────────────────────────

class Transcoded(NamedTuple):
    """Successful pass: units consumed from the source and written to dst."""

    read: int
    written: int


def transcode(decoder: Decoder,
              encoder: Encoder,
              src: Sequence[int],
              dst: MutableSequence[int],
              strict: bool = True) -> Union[Transcoded, Failure]:
    """Decode from ``src`` and encode into ``dst`` until either is used up.

    Running out of destination space between codepoints is not an error:
    the pass just ends, and ``read < len(src)`` tells the caller input is
    left over.  An encoder that cannot fit a whole codepoint into the space
    that remains reports ERR_DESTINATION_EXHAUSTED instead.
    """
    src_pos, src_end = 0, len(src)
    dst_pos, dst_end = 0, len(dst)

    while src_pos < src_end and dst_pos < dst_end:
        start = src_pos
        cp, src_pos = decoder(src, src_pos, src_end, strict)
        if isinstance(cp, Failure):
            return cp
        result = encoder(cp, dst, dst_pos, dst_end, strict)
        if isinstance(result, Failure):
            if result.code == ERR_ILLEGAL_SEQUENCE:
                # Encoders only know the destination cursor; report where
                # the offending codepoint came from instead.
                return result._replace(offset=start)
            return result
        dst_pos = result

    return Transcoded(src_pos, dst_pos)


# ── Buffer layer ──────────────────────────────────────────────

def destination_capacity(source: Encoding, target: Encoding, units: int) -> int:
    """Worst-case destination size, in target units, for ``units`` source units.

    Widening never produces more units than it consumes; narrowing
    produces at most four (a UTF-8 sequence) per source unit.
    """
    if target.width > source.width:
        return units
    return units * NARROW_FACTOR


def _raise_failure(failure: Failure, source: Encoding, target: Encoding) -> NoReturn:
    if failure.code == ERR_ILLEGAL_SEQUENCE:
        msg = "illegal {} sequence at unit {}".format(source.name, failure.offset)
    elif failure.code == ERR_DESTINATION_EXHAUSTED:
        msg = "{} destination exhausted at unit {}".format(target.name, failure.offset)
    else:
        msg = failure.code
    _LOGGER.debug("%s -> %s failed: %s", source.name, target.name, msg)
    raise UtfError(failure.code, msg, failure.offset)


def convert(data: bytes,
            source: Union[str, Encoding],
            target: Union[str, Encoding],
            strict: bool = True) -> bytes:
    """Convert ``data`` from one encoding form to another.

    ``data`` is read as native-endian code units of ``source``; the result
    is native-endian ``target`` units.  Strict mode (the default) raises
    UtfError on ill-formed input; lenient mode writes U+FFFD in its place.

    Trailing bytes that do not fill a whole source unit count as one
    ill-formed sequence.
    """
    src_enc = get_encoding(source)
    dst_enc = get_encoding(target)
    if src_enc is dst_enc:
        raise ValueError("source and target are both {}".format(src_enc.name))

    with memoryview(data) as view, view.cast("B") as octets:
        tail = len(octets) % src_enc.width
        whole = len(octets) - tail

        with octets[:whole] as body, body.cast(src_enc.unit_format) as src:
            units = len(src) + (1 if tail else 0)
            capacity = destination_capacity(src_enc, dst_enc, units)
            _LOGGER.debug("converting %d %s units to %s (capacity %d)",
                          units, src_enc.name, dst_enc.name, capacity)

            out = bytearray(capacity * dst_enc.width)
            with memoryview(out) as out_view, out_view.cast(dst_enc.unit_format) as dst:
                result = transcode(src_enc.decode, dst_enc.encode, src, dst, strict)
                if isinstance(result, Failure):
                    _raise_failure(result, src_enc, dst_enc)
                written = result.written

                if tail and result.read == len(src):
                    cp = illegal_sequence(len(src), strict)
                    if isinstance(cp, Failure):
                        _raise_failure(cp, src_enc, dst_enc)
                    pos = dst_enc.encode(cp, dst, written, len(dst), strict)
                    if isinstance(pos, Failure):
                        _raise_failure(pos, src_enc, dst_enc)
                    written = pos

    # Views are released; the buffer can shrink to what was written.
    del out[written * dst_enc.width:]
    _LOGGER.debug("wrote %d %s units", written, dst_enc.name)
    return bytes(out)
