import struct

import pytest

from d2shared.bitmuncher import BitMuncher, make_signed


def test_get_byte_reads_bytes_in_order():
    data = bytes([0x12, 0xAB])
    muncher = BitMuncher(data)
    assert muncher.get_byte() == data[0]
    assert muncher.get_byte() == data[1]


def test_bits_are_read_least_significant_first():
    muncher = BitMuncher(bytes([0b00000101]))
    assert [muncher.get_bit() for _ in range(8)] == [1, 0, 1, 0, 0, 0, 0, 0]


def test_uint32_round_trip():
    value = 0xDEADBEEF
    assert BitMuncher(struct.pack("<I", value)).get_uint32() == value


@pytest.mark.parametrize("value", [-12345, -1, 0, 7, 2**31 - 1, -(2**31)])
def test_int32_round_trip(value):
    assert BitMuncher(struct.pack("<i", value)).get_int32() == value


def test_start_offset_is_honoured():
    data = bytes([0x00, 0x7F])
    assert BitMuncher(data, 8).get_byte() == data[1]


def test_offset_and_bits_read_track_progress():
    muncher = BitMuncher(bytes(4), 4)
    muncher.get_bits(5)
    muncher.skip_bits(3)
    assert muncher.bits_read == 5 + 3
    assert muncher.offset == 4 + 5 + 3


def test_copy_keeps_offset_and_resets_count():
    muncher = BitMuncher(bytes([0x5A, 0xC3]))
    muncher.get_bits(4)
    clone = muncher.copy()
    assert clone.offset == muncher.offset
    assert clone.bits_read == 0
    assert clone.get_bits(8) == muncher.get_bits(8)


def test_zero_bits_reads_nothing():
    muncher = BitMuncher(b"\xff")
    assert muncher.get_bits(0) == 0
    assert muncher.offset == 0


def test_reading_past_end_raises():
    muncher = BitMuncher(b"\x01")
    muncher.get_byte()
    with pytest.raises(IndexError):
        muncher.get_bit()


@pytest.mark.parametrize("value", [-3, -128, 0, 127])
def test_get_signed_bits_round_trip(value):
    assert BitMuncher(struct.pack("<b", value)).get_signed_bits(8) == value


def test_single_bit_one_is_minus_one():
    assert make_signed(1, 1) == -1
    assert make_signed(0, 1) == 0


def test_zero_width_is_zero():
    assert make_signed(0xFFFF, 0) == 0


@pytest.mark.parametrize("bits", [2, 5, 8, 16, 31, 32])
def test_positive_values_unchanged(bits):
    value = (1 << (bits - 1)) - 1
    assert make_signed(value, bits) == value


@pytest.mark.parametrize("bits", [2, 5, 8, 16, 31, 32])
@pytest.mark.parametrize("k", [1, 2])
def test_negative_values_sign_extended(bits, k):
    assert make_signed((1 << bits) - k, bits) == -k