"""Domain models for nybble.

Immutable value objects with no I/O.  :class:`NybbleOrder` is the single
axis of variation in the codec; :class:`ConversionRequest` bundles the
parsed command-line configuration for one file conversion.
"""

from __future__ import annotations

import enum
from dataclasses import dataclass
from pathlib import Path

from nybble.exceptions import InvalidOrderSelectorError


# ---------------------------------------------------------------------------
# Nybble order
# ---------------------------------------------------------------------------

class NybbleOrder(enum.Enum):
    """Which half of a byte is emitted first when it is expanded."""

    HIGH_FIRST = "h"
    """The high nybble precedes the low nybble."""

    LOW_FIRST = "l"
    """The low nybble precedes the high nybble."""

    def __str__(self) -> str:
        return self.value

    @classmethod
    def from_selector(cls, selector: str) -> NybbleOrder:
        """Parse an order selector by its first character.

        ``"h"``, ``"high"``, ``"hi-first"`` … select :attr:`HIGH_FIRST`;
        ``"l"``, ``"low"`` … select :attr:`LOW_FIRST`.  Matching is
        case-sensitive.

        Raises
        ------
        InvalidOrderSelectorError
            When *selector* is empty or starts with any other character.
        """
        if selector.startswith("h"):
            return cls.HIGH_FIRST
        if selector.startswith("l"):
            return cls.LOW_FIRST
        raise InvalidOrderSelectorError(
            f"Invalid nybble order: {selector}",
            hint="Use a value starting with 'h' (high first) or 'l' (low first).",
        )


# ---------------------------------------------------------------------------
# Conversion direction
# ---------------------------------------------------------------------------

class Direction(enum.Enum):
    """Whether a conversion expands bytes or packs nybbles back."""

    SPLIT = "split"
    COMBINE = "combine"


# ---------------------------------------------------------------------------
# Conversion request
# ---------------------------------------------------------------------------

@dataclass(frozen=True, slots=True)
class ConversionRequest:
    """A single whole-file conversion as configured on the command line."""

    infile: Path
    """File to read in full."""

    outfile: Path
    """File to create or truncate with the converted bytes."""

    order: NybbleOrder = NybbleOrder.HIGH_FIRST
    """Nybble order used for both directions."""

    direction: Direction = Direction.SPLIT
    """:attr:`Direction.SPLIT` unless the inverse was requested."""
