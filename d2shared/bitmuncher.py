"""Reading little-endian, LSB-first bit fields from a byte buffer."""

from __future__ import annotations

_UINT32_MASK = 0xFFFFFFFF


def _to_int32(value: int) -> int:
    value &= _UINT32_MASK
    return value - (1 << 32) if value & 0x80000000 else value


def make_signed(value: int, bits: int) -> int:
    """Interpret the low ``bits`` bits of ``value`` as a two's complement number."""
    value &= _UINT32_MASK
    if bits == 0:
        return 0
    if bits == 1:
        # A single set bit stands for -1.
        return _to_int32(-value)
    if bits > 32 or not value & (1 << (bits - 1)):
        return _to_int32(value)
    low_mask = (1 << bits) - 1
    return _to_int32((_UINT32_MASK & ~low_mask) | (value & low_mask))


class BitMuncher:
    """Cursor over a byte buffer that hands out bits, least significant first."""

    def __init__(self, data: bytes, offset: int = 0) -> None:
        self._data = bytes(data)
        self.offset = offset
        self.bits_read = 0

    def copy(self) -> BitMuncher:
        """Return a new cursor on the same data and offset, with a fresh bit count."""
        return BitMuncher(self._data, self.offset)

    def get_bit(self) -> int:
        if self.offset < 0:
            raise IndexError(f"negative bit offset {self.offset}")
        result = (self._data[self.offset // 8] >> (self.offset % 8)) & 0x01
        self.offset += 1
        self.bits_read += 1
        return result

    def skip_bits(self, bits: int) -> None:
        self.offset += bits
        self.bits_read += bits

    def get_byte(self) -> int:
        return self.get_bits(8) & 0xFF

    def get_int32(self) -> int:
        return make_signed(self.get_bits(32), 32)

    def get_uint32(self) -> int:
        return self.get_bits(32)

    def get_bits(self, bits: int) -> int:
        """Read ``bits`` bits as an unsigned value (truncated to 32 bits)."""
        result = 0
        for shift in range(bits):
            result |= self.get_bit() << shift
        return result & _UINT32_MASK

    def get_signed_bits(self, bits: int) -> int:
        return make_signed(self.get_bits(bits), bits)