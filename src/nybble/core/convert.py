"""Direction dispatch between :func:`split` and :func:`combine`.

Pure orchestration without I/O or console output.  The CLI layer reads
the input file, hands the bytes here, and writes whatever comes back.
"""

from __future__ import annotations

from collections.abc import Iterable

from nybble.core.codec import combine, split
from nybble.core.models import Direction, NybbleOrder


def convert_bytes(
    data: Iterable[int],
    order: NybbleOrder,
    direction: Direction = Direction.SPLIT,
) -> bytes:
    """Split or combine *data* according to *direction*.

    Raises
    ------
    InvalidLengthError
        Combining an odd-length buffer.
    InvalidNybbleError
        Combining a buffer containing a value above ``15``.
    """
    if direction is Direction.COMBINE:
        return combine(data, order)
    return split(data, order)
