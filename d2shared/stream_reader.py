"""Little-endian reader over an in-memory byte buffer."""

from __future__ import annotations

import struct


class StreamReader:
    """Reads little-endian integers and raw bytes from a buffer."""

    def __init__(self, data: bytes) -> None:
        self._data = bytes(data)
        self.position = 0

    @property
    def size(self) -> int:
        return len(self._data)

    def __len__(self) -> int:
        return len(self._data)

    def _take(self, count: int) -> bytes:
        if count < 0:
            raise ValueError(f"cannot read a negative number of bytes: {count}")
        end = self.position + count
        if self.position < 0 or end > len(self._data):
            raise EOFError(
                f"cannot read {count} bytes at position {self.position} "
                f"of a {len(self._data)} byte stream"
            )
        chunk = self._data[self.position:end]
        self.position = end
        return chunk

    def _unpack(self, fmt: str) -> int:
        (value,) = struct.unpack(fmt, self._take(struct.calcsize(fmt)))
        return value

    def get_byte(self) -> int:
        return self._take(1)[0]

    def get_uint16(self) -> int:
        return self._unpack("<H")

    def get_int16(self) -> int:
        return self._unpack("<h")

    def get_uint32(self) -> int:
        return self._unpack("<I")

    def get_int32(self) -> int:
        return self._unpack("<i")

    def get_uint64(self) -> int:
        return self._unpack("<Q")

    def get_int64(self) -> int:
        return self._unpack("<q")

    def read_bytes(self, count: int) -> bytes:
        return self._take(count)

    def skip_bytes(self, count: int) -> None:
        self.position += count

    def read(self, size: int = -1) -> bytes:
        """Return up to ``size`` bytes (all remaining if negative); empty at end."""
        remaining = max(len(self._data) - self.position, 0)
        count = remaining if size < 0 else min(size, remaining)
        return self._take(count)

    def eof(self) -> bool:
        return self.position >= len(self._data)