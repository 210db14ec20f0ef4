"""Core layer — the nybble codec and its value objects.

Rules
-----
* No ``print()`` calls.
* No filesystem I/O.
* No imports from ``cli`` or ``infra``.
* All functions must be fully typed and deterministic.
"""

from nybble.core.codec import (
    byte_from_nybbles,
    combine,
    high_nybble,
    low_nybble,
    nybbles_from_byte,
    split,
)
from nybble.core.convert import convert_bytes
from nybble.core.models import ConversionRequest, Direction, NybbleOrder

__all__: list[str] = [
    "ConversionRequest",
    "Direction",
    "NybbleOrder",
    "byte_from_nybbles",
    "combine",
    "convert_bytes",
    "high_nybble",
    "low_nybble",
    "nybbles_from_byte",
    "split",
]
