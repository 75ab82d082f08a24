"""Codepoint encoders: one codepoint in, one code-unit sequence out.

    encode_X(cp, dst, pos, end, strict) -> next_pos_or_failure

``dst`` is any mutable sequence of unsigned code units; ``pos`` is where
writing starts and ``end`` is one past the last writable unit.  The full
sequence length is known before anything is written, so a capacity
failure leaves ``dst`` untouched from ``pos`` on.
"""

from __future__ import annotations

from typing import MutableSequence, Union

from ._constants import (
    CONTINUATION_MARK,
    CONTINUATION_MASK,
    CONTINUATION_SHIFT,
    FIRST_BYTE_MARK,
    HIGH_SURROGATE_MIN,
    LOW_SURROGATE_MAX,
    LOW_SURROGATE_MIN,
    MAX_BMP,
    MAX_CODEPOINT,
    REPLACEMENT_UTF8_LENGTH,
    SURROGATE_BASE,
    SURROGATE_MASK,
    SURROGATE_SHIFT,
)
from ._errors import Failure, destination_exhausted, illegal_sequence

Encoded = Union[int, Failure]


def _is_scalar(cp: int) -> bool:
    return 0 <= cp <= MAX_CODEPOINT and not (HIGH_SURROGATE_MIN <= cp <= LOW_SURROGATE_MAX)


# ── UTF-8 ─────────────────────────────────────────────────────

def encode_utf8(cp: int, dst: MutableSequence[int], pos: int, end: int,
                strict: bool = True) -> Encoded:
    """Write ``cp`` as 1–4 bytes.

    Continuation bytes go in last-to-first, each carrying the low 6 bits
    of what is left; the leading byte gets the remaining high bits plus the
    length marker.  Non-scalar input is written as the 3-byte U+FFFD in
    lenient mode.
    """
    if not _is_scalar(cp):
        cp = illegal_sequence(pos, strict)
        if isinstance(cp, Failure):
            return cp
        count = REPLACEMENT_UTF8_LENGTH
    elif cp < 0x80:
        count = 1
    elif cp < 0x800:
        count = 2
    elif cp < 0x10000:
        count = 3
    else:
        count = 4

    if pos + count > end:
        return destination_exhausted(pos)

    cur = pos + count - 1
    while cur > pos:
        dst[cur] = (cp | CONTINUATION_MARK) & CONTINUATION_MASK
        cp >>= CONTINUATION_SHIFT
        cur -= 1
    dst[pos] = cp | FIRST_BYTE_MARK[count]
    return pos + count


# ── UTF-16 ────────────────────────────────────────────────────

def encode_utf16(cp: int, dst: MutableSequence[int], pos: int, end: int,
                 strict: bool = True) -> Encoded:
    """Write ``cp`` as one unit, or as a surrogate pair above the BMP."""
    if not _is_scalar(cp):
        cp = illegal_sequence(pos, strict)
        if isinstance(cp, Failure):
            return cp

    if cp <= MAX_BMP:
        if pos >= end:
            return destination_exhausted(pos)
        dst[pos] = cp
        return pos + 1

    # Both halves or neither.
    if pos + 2 > end:
        return destination_exhausted(pos)
    cp -= SURROGATE_BASE
    dst[pos] = (cp >> SURROGATE_SHIFT) + HIGH_SURROGATE_MIN
    dst[pos + 1] = (cp & SURROGATE_MASK) + LOW_SURROGATE_MIN
    return pos + 2


# ── UTF-32 ────────────────────────────────────────────────────

def encode_utf32(cp: int, dst: MutableSequence[int], pos: int, end: int,
                 strict: bool = True) -> Encoded:
    if not _is_scalar(cp):
        cp = illegal_sequence(pos, strict)
        if isinstance(cp, Failure):
            return cp
    if pos >= end:
        return destination_exhausted(pos)
    dst[pos] = cp
    return pos + 1
