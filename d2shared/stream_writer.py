"""Little-endian writer that builds up a byte string."""

from __future__ import annotations


class StreamWriter:
    """Accumulates little-endian integers into a byte buffer."""

    def __init__(self) -> None:
        self._data = bytearray()

    def __len__(self) -> int:
        return len(self._data)

    def _push(self, value: int, size: int, signed: bool) -> None:
        self._data += value.to_bytes(size, "little", signed=signed)

    def push_byte(self, value: int) -> None:
        self._push(value, 1, False)

    def push_uint16(self, value: int) -> None:
        self._push(value, 2, False)

    def push_int16(self, value: int) -> None:
        self._push(value, 2, True)

    def push_uint32(self, value: int) -> None:
        self._push(value, 4, False)

    def push_uint64(self, value: int) -> None:
        self._push(value, 8, False)

    def push_int64(self, value: int) -> None:
        self._push(value, 8, True)

    def to_bytes(self) -> bytes:
        return bytes(self._data)