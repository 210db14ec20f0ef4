"""Pure nybble splitting and combining.

Every function in this module is a **pure**, deterministic transformation
with no I/O and no side effects.

Byte-level helpers always work high nybble first; the buffer-level
:func:`split` and :func:`combine` apply the requested
:class:`~nybble.core.models.NybbleOrder`.  The expanded form carries no
order marker, so the same order must be used in both directions.
"""

from __future__ import annotations

from collections.abc import Iterable

from nybble.core.models import NybbleOrder
from nybble.exceptions import InvalidLengthError, InvalidNybbleError

NYBBLE_MASK: int = 0x0F
"""Mask selecting the low four bits of a byte."""

NYBBLE_BITS: int = 4


# ---------------------------------------------------------------------------
# Byte-level helpers
# ---------------------------------------------------------------------------

def high_nybble(b: int) -> int:
    """Return the upper four bits of byte *b*."""
    return (b >> NYBBLE_BITS) & NYBBLE_MASK


def low_nybble(b: int) -> int:
    """Return the lower four bits of byte *b*."""
    return b & NYBBLE_MASK


def nybbles_from_byte(b: int) -> tuple[int, int]:
    """Return ``(high, low)`` for byte *b*, high nybble first."""
    return high_nybble(b), low_nybble(b)


def byte_from_nybbles(high: int, low: int) -> int:
    """Pack two nybbles into one byte, high nybble given first.

    Raises
    ------
    InvalidNybbleError
        When either value is outside ``0..15``.  Values are never
        masked, so malformed input is reported rather than folded into
        a different byte.
    """
    for value in (high, low):
        if not 0 <= value <= NYBBLE_MASK:
            raise InvalidNybbleError(
                f"Nybble value out of range 0-15: {value}",
            )
    return (high << NYBBLE_BITS) | low


# ---------------------------------------------------------------------------
# Buffer-level transforms
# ---------------------------------------------------------------------------

def _as_buffer(data: Iterable[int]) -> bytes:
    """Copy *data* into a new ``bytes`` object.

    A bare ``int`` is refused; ``bytes(n)`` would otherwise turn it into
    *n* zero bytes.
    """
    if isinstance(data, int):
        raise TypeError(
            f"Expected a bytes-like buffer, got {type(data).__name__}",
        )
    return bytes(data)


def split(data: Iterable[int], order: NybbleOrder) -> bytes:
    """Expand every byte of *data* into two nybble bytes.

    Each input byte yields ``(high, low)`` for
    :attr:`NybbleOrder.HIGH_FIRST` and ``(low, high)`` for
    :attr:`NybbleOrder.LOW_FIRST`.  The result is always twice as long
    as the input; an empty input gives ``b""``.

    Raises
    ------
    TypeError
        When *data* is an ``int`` rather than a buffer.
    """
    result = bytearray()
    for b in _as_buffer(data):
        high, low = nybbles_from_byte(b)
        if order is NybbleOrder.HIGH_FIRST:
            result.append(high)
            result.append(low)
        else:
            result.append(low)
            result.append(high)
    return bytes(result)


def combine(data: Iterable[int], order: NybbleOrder) -> bytes:
    """Pack adjacent nybble bytes of *data* back into whole bytes.

    The inverse of :func:`split` for the same *order*.  Pairs are read
    in sequence; for :attr:`NybbleOrder.HIGH_FIRST` the first element of
    a pair is the high nybble, for :attr:`NybbleOrder.LOW_FIRST` it is
    the low nybble.

    Raises
    ------
    InvalidLengthError
        When *data* has an odd number of elements.  No partial result
        is produced.
    InvalidNybbleError
        When any element is greater than ``15``.
    TypeError
        When *data* is an ``int`` rather than a buffer.
    """
    buf = _as_buffer(data)
    if len(buf) % 2 != 0:
        raise InvalidLengthError(
            f"Nybble buffer length must be even, got {len(buf)}",
            hint="The input is not a complete nybble expansion.",
        )

    result = bytearray()
    for offset in range(0, len(buf), 2):
        first, second = buf[offset], buf[offset + 1]
        if order is NybbleOrder.HIGH_FIRST:
            result.append(byte_from_nybbles(first, second))
        else:
            result.append(byte_from_nybbles(second, first))
    return bytes(result)
