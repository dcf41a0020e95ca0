"""Reading small groups of bits from a byte stream."""

from __future__ import annotations

MAX_BIT_COUNT = 16


class BitStream:
    """Reads groups of up to 16 bits, least significant first."""

    def __init__(self, data: bytes) -> None:
        self._data = bytes(data)
        self._position = 0
        self._current = 0
        self._bit_count = 0

    def read_bits(self, bit_count: int) -> int:
        """Read and consume ``bit_count`` bits; raise EOFError when none are left."""
        if bit_count > MAX_BIT_COUNT:
            raise ValueError(f"Maximum bit count is {MAX_BIT_COUNT}")
        if not self.ensure_bits(bit_count):
            raise EOFError("unexpected end of bit stream")
        result = self._current & (0xFFFF >> (MAX_BIT_COUNT - bit_count))
        self.waste_bits(bit_count)
        return result

    def peek_byte(self) -> int:
        """Return the next 8 bits without consuming them."""
        if not self.ensure_bits(8):
            raise EOFError("unexpected end of bit stream")
        return self._current & 0xFF

    def ensure_bits(self, bit_count: int) -> bool:
        """Buffer one more byte if fewer than ``bit_count`` bits are held."""
        if bit_count <= self._bit_count:
            return True
        if self._position >= len(self._data):
            return False
        self._current |= self._data[self._position] << self._bit_count
        self._position += 1
        self._bit_count += 8
        return True

    def waste_bits(self, bit_count: int) -> None:
        """Discard ``bit_count`` buffered bits."""
        self._current >>= bit_count
        self._bit_count -= bit_count