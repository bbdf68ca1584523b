import pytest

from globalcoin.bigint import (
    compact_from_int,
    int_from_compact,
    int_from_hash,
    squashed_to_float,
)
from globalcoin.hashing import Hash


def test_int_from_hash_is_little_endian():
    h = Hash.from_bytes(bytes([0x2A]) + bytes(31))
    assert int_from_hash(h) == 0x2A


def test_int_from_hash_round_trip():
    h = Hash.compute(b"target")
    assert int_from_hash(h).to_bytes(32, "little") == h.data


def test_zero_encodes_to_zero():
    assert compact_from_int(0) == 0
    assert int_from_compact(0) == 0


def test_three_byte_value():
    assert compact_from_int(0x123456) == 0x03123456
    assert int_from_compact(0x03123456) == 0x123456


def test_high_bit_shifts_coefficient_without_exponent_change():
    assert compact_from_int(0x800000) == 0x03008000


@pytest.mark.parametrize("shift", [0, 8, 80, 200])
def test_round_trip_for_exact_values(shift):
    value = 0x123456 << shift
    assert int_from_compact(compact_from_int(value)) == value


def test_zero_coefficient_decodes_to_zero():
    assert int_from_compact(0x05000000) == 0


def test_sign_bit_is_masked_on_decode():
    assert int_from_compact(0x03FFFFFF) == int_from_compact(0x037FFFFF)


def test_negative_rejected():
    with pytest.raises(ValueError):
        compact_from_int(-1)


def test_squashed_to_float():
    assert squashed_to_float(5 * 10**300) == 5.0
    assert squashed_to_float(10**299) == 0.0


def test_squashed_to_float_overflow_is_infinite():
    assert squashed_to_float(10**700) == float("inf")