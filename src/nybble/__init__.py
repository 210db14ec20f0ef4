"""nybble — split bytes into nybbles and combine them back.

Every input byte becomes two output bytes, each holding one 4-bit half
of the original.  The :mod:`nybble.core` layer holds the pure codec;
the ``nybblify`` console script wraps it for whole files.
"""

from nybble.core.codec import (
    byte_from_nybbles,
    combine,
    high_nybble,
    low_nybble,
    nybbles_from_byte,
    split,
)
from nybble.core.models import NybbleOrder
from nybble.version import __version__

__all__: list[str] = [
    "NybbleOrder",
    "__version__",
    "byte_from_nybbles",
    "combine",
    "high_nybble",
    "low_nybble",
    "nybbles_from_byte",
    "split",
]
