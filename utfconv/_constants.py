"""utfconv constants: code-point limits and the UTF-8 lookup tables.

The three UTF-8 tables are indexed either by the leading byte (how many
continuation bytes follow it) or by that continuation count (the bias to
subtract, the smallest legal value, the marker OR-ed into the leading
byte on encode).  They are plain tuples and never change.
"""

from __future__ import annotations

from typing import Tuple

# ── Code-point limits ─────────────────────────────────────────
MAX_CODEPOINT: int = 0x10FFFF
MAX_BMP: int = 0xFFFF

HIGH_SURROGATE_MIN: int = 0xD800
HIGH_SURROGATE_MAX: int = 0xDBFF
LOW_SURROGATE_MIN: int = 0xDC00
LOW_SURROGATE_MAX: int = 0xDFFF

# UTF-16 pair arithmetic.
SURROGATE_BASE: int = 0x10000
SURROGATE_SHIFT: int = 10
SURROGATE_MASK: int = 0x3FF

# Substituted for anything invalid in lenient mode.
REPLACEMENT_CHARACTER: int = 0xFFFD

# ── UTF-8 ─────────────────────────────────────────────────────
# Continuation bytes expected after each leading byte.  0x80–0xBF map to 0
# here and are rejected separately as stray continuation bytes.  Counts 4
# and 5 (0xF8–0xFF) are the old 5- and 6-byte forms, never legal.
UTF8_TRAILING: Tuple[int, ...] = tuple(
    [0] * 0xC0      # 0x00–0xBF
    + [1] * 0x20    # 0xC0–0xDF
    + [2] * 0x10    # 0xE0–0xEF
    + [3] * 0x08    # 0xF0–0xF7
    + [4] * 0x04    # 0xF8–0xFB
    + [5] * 0x04    # 0xFC–0xFF
)

# Subtracted once all units are accumulated, removing the marker bits of
# the leading and continuation bytes in one step.
UTF8_OFFSETS: Tuple[int, ...] = (
    0x00000000,
    0x00003080,
    0x000E2080,
    0x03C82080,
)

# Anything decoded below these is an overlong form.
UTF8_MINIMUM: Tuple[int, ...] = (0x00, 0x80, 0x800, 0x10000)

# OR-ed into the leading byte, indexed by the total byte count.
FIRST_BYTE_MARK: Tuple[int, ...] = (0x00, 0x00, 0xC0, 0xE0, 0xF0)

CONTINUATION_MARK: int = 0x80
CONTINUATION_MASK: int = 0xBF
CONTINUATION_SHIFT: int = 6

# Replacement character size in UTF-8, used for out-of-range input.
REPLACEMENT_UTF8_LENGTH: int = 3

# ── Destination sizing ────────────────────────────────────────
# Narrowing conversions allocate this many destination units per source
# unit; no single wide unit expands to more than four UTF-8 bytes.
NARROW_FACTOR: int = 4
