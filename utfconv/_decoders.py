"""Codepoint decoders: one code-unit sequence in, one codepoint out.

Every decoder has the same shape:

    decode_X(src, pos, end, strict) -> (codepoint_or_failure, next_pos)

``src`` is any indexable sequence of unsigned code units (a memoryview cast
to B/H/I in practice, a plain list in tests).  ``pos`` is the first unit to
read and ``end`` is one past the last readable unit.  The returned cursor
is always greater than ``pos`` and never greater than ``end``, so a driver
loop cannot stall or run off the buffer.

Invalid input resolves through ``illegal_sequence()``: in strict mode the
first element of the pair is a ``Failure`` and the caller is expected to
stop; in lenient mode it is U+FFFD and decoding carries on from the
returned cursor.
"""

from __future__ import annotations

from typing import Sequence, Tuple, Union

from ._constants import (
    CONTINUATION_SHIFT,
    HIGH_SURROGATE_MAX,
    HIGH_SURROGATE_MIN,
    LOW_SURROGATE_MAX,
    LOW_SURROGATE_MIN,
    MAX_CODEPOINT,
    SURROGATE_BASE,
    SURROGATE_SHIFT,
    UTF8_MINIMUM,
    UTF8_OFFSETS,
    UTF8_TRAILING,
)
from ._errors import Failure, illegal_sequence

Decoded = Tuple[Union[int, Failure], int]


def _is_surrogate(cp: int) -> bool:
    return HIGH_SURROGATE_MIN <= cp <= LOW_SURROGATE_MAX


# ── UTF-8 ─────────────────────────────────────────────────────
# A leading byte announces 0–3 continuation bytes (10xxxxxx).  The value is
# built by shifting 6 bits per continuation byte and adding the raw byte,
# then one subtraction from UTF8_OFFSETS strips every marker bit at once.
#
# Resynchronisation in lenient mode:
#   - bad leading byte            -> consume 1 byte
#   - non-continuation mid-stream -> stop before it, it starts the next read
#   - runs past end of input      -> consume what is left
#   - overlong/surrogate/too big  -> consume the whole sequence

def decode_utf8(src: Sequence[int], pos: int, end: int, strict: bool = True) -> Decoded:
    lead = src[pos]
    if lead < 0x80:
        return lead, pos + 1

    trailing = UTF8_TRAILING[lead]
    # 0x80–0xBF cannot start a sequence; 0xF8–0xFF announce 4 or 5
    # continuation bytes, which no legal form has.
    if trailing == 0 or trailing > 3:
        return illegal_sequence(pos, strict), pos + 1

    last = pos + trailing
    if last >= end:
        # Not enough units left to finish the sequence.  Check what is there
        # so a valid byte after a cut-off sequence is not swallowed.
        cur = pos + 1
        while cur < end and src[cur] & 0xC0 == 0x80:
            cur += 1
        return illegal_sequence(pos, strict), cur

    cp = lead
    cur = pos + 1
    while cur <= last:
        unit = src[cur]
        if unit & 0xC0 != 0x80:
            return illegal_sequence(pos, strict), cur
        cp = (cp << CONTINUATION_SHIFT) + unit
        cur += 1
    cp -= UTF8_OFFSETS[trailing]

    if cp < UTF8_MINIMUM[trailing] or cp > MAX_CODEPOINT or _is_surrogate(cp):
        return illegal_sequence(pos, strict), cur
    return cp, cur


# ── UTF-16 ────────────────────────────────────────────────────
# An unmatched high surrogate consumes only itself.  The unit after it is
# left for the next call, since it may well start a valid sequence.

def decode_utf16(src: Sequence[int], pos: int, end: int, strict: bool = True) -> Decoded:
    high = src[pos]
    if HIGH_SURROGATE_MIN <= high <= HIGH_SURROGATE_MAX:
        if pos + 1 >= end:
            return illegal_sequence(pos, strict), pos + 1
        low = src[pos + 1]
        if LOW_SURROGATE_MIN <= low <= LOW_SURROGATE_MAX:
            cp = ((high - HIGH_SURROGATE_MIN) << SURROGATE_SHIFT) \
                + (low - LOW_SURROGATE_MIN) + SURROGATE_BASE
            return cp, pos + 2
        return illegal_sequence(pos, strict), pos + 1

    if LOW_SURROGATE_MIN <= high <= LOW_SURROGATE_MAX:
        return illegal_sequence(pos, strict), pos + 1
    return high, pos + 1


# ── UTF-32 ────────────────────────────────────────────────────

def decode_utf32(src: Sequence[int], pos: int, end: int, strict: bool = True) -> Decoded:
    """Return the unit itself, provided it is a Unicode scalar value.

    Units above U+10FFFF or inside the surrogate block are rejected (or
    replaced) here rather than trusted to be pre-validated.
    """
    cp = src[pos]
    if cp > MAX_CODEPOINT or _is_surrogate(cp):
        return illegal_sequence(pos, strict), pos + 1
    return cp, pos + 1
