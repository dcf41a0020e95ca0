import struct

import pytest

from d2shared.stream_reader import StreamReader


def test_bytes_and_position():
    data = bytes([0x78, 0x56, 0x34, 0x12])
    reader = StreamReader(data)
    assert reader.position == 0
    assert reader.size == 4
    for index, expected in enumerate(data):
        assert reader.get_byte() == expected
        assert reader.position == index + 1


def test_words():
    reader = StreamReader(bytes([0x78, 0x56, 0x34, 0x12]))
    assert reader.get_uint16() == 0x5678
    assert reader.position == 2
    assert reader.get_uint16() == 0x1234
    assert reader.position == 4


def test_dword():
    reader = StreamReader(bytes([0x78, 0x56, 0x34, 0x12]))
    assert reader.get_uint32() == 0x12345678
    assert reader.position == 4


@pytest.mark.parametrize(
    "fmt, method, value",
    [
        ("<h", "get_int16", -2),
        ("<i", "get_int32", -123456),
        ("<Q", "get_uint64", 0x0123456789ABCDEF),
        ("<q", "get_int64", -9876543210),
    ],
)
def test_signed_and_wide_round_trips(fmt, method, value):
    reader = StreamReader(struct.pack(fmt, value))
    assert getattr(reader, method)() == value
    assert reader.eof()


def test_read_bytes_and_skip():
    reader = StreamReader(b"abcdef")
    reader.skip_bytes(1)
    assert reader.read_bytes(3) == b"bcd"
    assert reader.position == 4


def test_read_stops_at_end():
    reader = StreamReader(b"xyz")
    assert reader.read(2) == b"xy"
    assert reader.read(10) == b"z"
    assert reader.read(1) == b""
    assert reader.eof()


def test_read_all_remaining():
    reader = StreamReader(b"hello")
    reader.position = 1
    assert reader.read() == b"ello"


def test_reading_past_end_raises_without_moving():
    reader = StreamReader(b"\x01\x02\x03")
    reader.get_uint16()
    with pytest.raises(EOFError):
        reader.get_uint16()
    assert reader.position == 2


def test_eof_after_skip_past_end():
    reader = StreamReader(b"\x00")
    assert not reader.eof()
    reader.skip_bytes(5)
    assert reader.eof()