"""Tests for the pure nybble codec (core/codec.py).

Every test is a pure function call with no I/O and no mocking.  These tests
exercise:

* Byte-level helpers over the full 0..255 range
* Known split/combine vectors for both orders
* Length invariants and the empty-buffer boundary
* Odd-length and out-of-range rejection
* The round-trip law, and its failure under mismatched orders
"""

from __future__ import annotations

import pytest

from nybble.core.codec import (
    byte_from_nybbles,
    combine,
    high_nybble,
    low_nybble,
    nybbles_from_byte,
    split,
)
from nybble.core.models import NybbleOrder
from nybble.exceptions import InvalidLengthError, InvalidNybbleError, NybbleError

BOTH_ORDERS = pytest.mark.parametrize(
    "order", [NybbleOrder.HIGH_FIRST, NybbleOrder.LOW_FIRST],
)


# ---------------------------------------------------------------------------
# Byte-level helpers
# ---------------------------------------------------------------------------

class TestByteHelpers:
    def test_high_nybble(self) -> None:
        assert high_nybble(0xA7) == 0x0A
        assert high_nybble(0x0F) == 0x00

    def test_low_nybble(self) -> None:
        assert low_nybble(0xA7) == 0x07
        assert low_nybble(0xF0) == 0x00

    def test_nybbles_from_byte_is_high_first(self) -> None:
        assert nybbles_from_byte(0x5C) == (0x05, 0x0C)

    def test_byte_from_nybbles(self) -> None:
        assert byte_from_nybbles(0x0F, 0x01) == 0xF1

    def test_every_byte_reassembles(self) -> None:
        for b in range(256):
            assert byte_from_nybbles(high_nybble(b), low_nybble(b)) == b

    def test_extracted_nybbles_stay_in_range(self) -> None:
        for b in range(256):
            high, low = nybbles_from_byte(b)
            assert 0 <= high <= 15
            assert 0 <= low <= 15

    @pytest.mark.parametrize("high, low", [(16, 0), (0, 16), (-1, 0), (0xFF, 0xFF)])
    def test_out_of_range_nybble_rejected(self, high: int, low: int) -> None:
        with pytest.raises(InvalidNybbleError):
            byte_from_nybbles(high, low)


# ---------------------------------------------------------------------------
# split
# ---------------------------------------------------------------------------

class TestSplit:
    def test_high_first(self) -> None:
        result = split(bytes([0x01, 0x23, 0x45]), NybbleOrder.HIGH_FIRST)
        assert result == bytes([0x00, 0x01, 0x02, 0x03, 0x04, 0x05])

    def test_low_first(self) -> None:
        result = split(bytes([0x57, 0x61, 0x76]), NybbleOrder.LOW_FIRST)
        assert result == bytes([0x07, 0x05, 0x01, 0x06, 0x06, 0x07])

    @BOTH_ORDERS
    def test_output_is_twice_as_long(self, order: NybbleOrder) -> None:
        data = bytes(range(0, 256, 7))
        assert len(split(data, order)) == 2 * len(data)

    @BOTH_ORDERS
    def test_empty(self, order: NybbleOrder) -> None:
        assert split(b"", order) == b""

    def test_returns_bytes(self) -> None:
        assert isinstance(split(bytearray(b"\x12"), NybbleOrder.HIGH_FIRST), bytes)

    def test_accepts_list_of_ints(self) -> None:
        assert split([0xAB], NybbleOrder.LOW_FIRST) == bytes([0x0B, 0x0A])

    def test_input_not_mutated(self) -> None:
        data = bytearray(b"\x9c\x3e")
        split(data, NybbleOrder.HIGH_FIRST)
        assert data == bytearray(b"\x9c\x3e")

    @BOTH_ORDERS
    def test_int_is_not_a_buffer(self, order: NybbleOrder) -> None:
        with pytest.raises(TypeError):
            split(3, order)  # type: ignore[arg-type]


# ---------------------------------------------------------------------------
# combine
# ---------------------------------------------------------------------------

class TestCombine:
    def test_high_first(self) -> None:
        result = combine(
            bytes([0x00, 0x01, 0x02, 0x03, 0x04, 0x05]), NybbleOrder.HIGH_FIRST,
        )
        assert result == bytes([0x01, 0x23, 0x45])

    def test_low_first(self) -> None:
        result = combine(
            bytes([0x07, 0x05, 0x01, 0x06, 0x06, 0x07]), NybbleOrder.LOW_FIRST,
        )
        assert result == bytes([0x57, 0x61, 0x76])

    @BOTH_ORDERS
    def test_output_is_half_as_long(self, order: NybbleOrder) -> None:
        assert len(combine(bytes(10), order)) == 5

    @BOTH_ORDERS
    def test_empty(self, order: NybbleOrder) -> None:
        assert combine(b"", order) == b""

    @BOTH_ORDERS
    def test_odd_length_rejected(self, order: NybbleOrder) -> None:
        with pytest.raises(InvalidLengthError):
            combine(bytes([0x01, 0x02, 0x03]), order)

    def test_odd_length_is_a_value_error(self) -> None:
        with pytest.raises(ValueError):
            combine(b"\x00", NybbleOrder.HIGH_FIRST)

    def test_odd_length_error_has_hint(self) -> None:
        with pytest.raises(NybbleError) as exc_info:
            combine(b"\x00", NybbleOrder.HIGH_FIRST)
        assert exc_info.value.hint is not None

    @BOTH_ORDERS
    def test_non_nybble_byte_rejected(self, order: NybbleOrder) -> None:
        with pytest.raises(InvalidNybbleError):
            combine(bytes([0x01, 0x10]), order)

    @BOTH_ORDERS
    def test_int_is_not_a_buffer(self, order: NybbleOrder) -> None:
        with pytest.raises(TypeError):
            combine(4, order)  # type: ignore[arg-type]


# ---------------------------------------------------------------------------
# Round trip
# ---------------------------------------------------------------------------

class TestRoundTrip:
    @BOTH_ORDERS
    @pytest.mark.parametrize(
        "data",
        [b"", b"\x00", b"\xff", bytes(range(256)), b"Hello, nybbles!\n"],
    )
    def test_combine_inverts_split(self, order: NybbleOrder, data: bytes) -> None:
        assert combine(split(data, order), order) == data

    def test_orders_differ_for_mixed_nybbles(self) -> None:
        data = b"\x12"
        assert split(data, NybbleOrder.HIGH_FIRST) != split(data, NybbleOrder.LOW_FIRST)

    def test_mismatched_order_does_not_round_trip(self) -> None:
        data = bytes([0x12, 0x34])
        expanded = split(data, NybbleOrder.HIGH_FIRST)
        assert combine(expanded, NybbleOrder.LOW_FIRST) == bytes([0x21, 0x43])
        assert combine(expanded, NybbleOrder.LOW_FIRST) != data

    def test_symmetric_bytes_survive_mismatched_order(self) -> None:
        data = bytes([0x00, 0x77, 0xFF])
        expanded = split(data, NybbleOrder.LOW_FIRST)
        assert combine(expanded, NybbleOrder.HIGH_FIRST) == data
