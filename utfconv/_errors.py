"""utfconv error codes, the Failure result value, and the UtfError exception.

Inside the engine nothing raises.  Decoders, encoders and the transcoder
hand back a ``Failure`` value in place of a codepoint, a cursor, or a
result, and every caller checks for it and returns it unchanged.  Only the
buffer-level entry points turn a ``Failure`` into a ``UtfError``.
"""

from __future__ import annotations

from typing import NamedTuple, Optional, Union

from ._constants import REPLACEMENT_CHARACTER

# ── Error codes ───────────────────────────────────────────────
# Grep-friendly, stable across releases.

ERR_ILLEGAL_SEQUENCE: str = "ERR_ILLEGAL_SEQUENCE"            # ill-formed source units
ERR_DESTINATION_EXHAUSTED: str = "ERR_DESTINATION_EXHAUSTED"  # no room for next codepoint


class Failure(NamedTuple):
    """Tagged error value returned through the decode/encode call chain.

    ``offset`` is a source unit index for ERR_ILLEGAL_SEQUENCE and a
    destination unit index for ERR_DESTINATION_EXHAUSTED.
    """

    code: str
    offset: int


class UtfError(ValueError):
    """Raised by the conversion entry points when a call cannot complete.

    The `.code` attribute is one of the ERR_* strings above; `.offset` is
    the unit index where the problem was found, when known.
    """

    def __init__(self, code: str, msg: str = "", offset: Optional[int] = None) -> None:
        super().__init__(msg or code)
        self.code = code
        self.offset = offset


def illegal_sequence(offset: int, strict: bool) -> Union[int, Failure]:
    """Resolve invalid input: a Failure in strict mode, U+FFFD otherwise."""
    if strict:
        return Failure(ERR_ILLEGAL_SEQUENCE, offset)
    return REPLACEMENT_CHARACTER


def destination_exhausted(offset: int) -> Failure:
    return Failure(ERR_DESTINATION_EXHAUSTED, offset)
