"""Localised string tables (.tbl files)."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Iterator

from d2shared import resources
from d2shared.interfaces import FileProvider
from d2shared.stream_reader import StreamReader

_log = logging.getLogger(__name__)


@dataclass(frozen=True)
class _HashEntry:
    active: bool
    index: int
    hash_value: int
    index_string: int
    name_string: int
    name_length: int


def _read_hash_entry(reader: StreamReader) -> _HashEntry:
    return _HashEntry(
        active=reader.get_byte() == 1,
        index=reader.get_uint16(),
        hash_value=reader.get_uint32(),
        index_string=reader.get_uint32(),
        name_string=reader.get_uint32(),
        name_length=reader.get_uint16(),
    )


def _read_key(reader: StreamReader) -> str:
    chars = []
    while (byte := reader.get_byte()) != 0:
        chars.append(chr(byte))
    return "".join(chars)


def _iter_table(data: bytes) -> Iterator[tuple[str, str]]:
    reader = StreamReader(data)
    reader.read_bytes(2)  # CRC
    element_count = reader.get_uint16()
    hash_table_size = reader.get_uint32()
    reader.get_byte()  # version, always 0
    reader.get_uint32()  # string offset
    reader.get_uint32()  # misses allowed before a lookup gives up
    reader.get_uint32()  # file size
    reader.read_bytes(2 * element_count)  # element index
    entries = [_read_hash_entry(reader) for _ in range(hash_table_size)]

    for position, entry in enumerate(entries):
        if not entry.active:
            continue
        reader.position = entry.name_string
        value = reader.read_bytes((entry.name_length - 1) & 0xFFFF)
        reader.position = entry.index_string
        key = _read_key(reader)
        if key in ("x", "X"):
            key = f"#{position}"
        yield key, value.decode("utf-8", errors="replace")


@dataclass
class TextDictionary:
    """Maps string keys to localised text; the first table to define a key wins."""

    strings: dict[str, str] = field(default_factory=dict)

    def __len__(self) -> int:
        return len(self.strings)

    def __contains__(self, key: object) -> bool:
        return key in self.strings

    def load_table(self, data: bytes) -> int:
        """Add the entries of one .tbl file; return how many new keys it added."""
        added = 0
        for key, value in _iter_table(data):
            if key not in self.strings:
                self.strings[key] = value
                added += 1
        return added

    def translate(self, key: str) -> str:
        try:
            return self.strings[key]
        except KeyError:
            raise KeyError(f"Could not find a string for the key {key!r}") from None


def load_text_dictionary(file_provider: FileProvider) -> TextDictionary:
    """Load the patch, expansion and base string tables, in that order."""
    dictionary = TextDictionary()
    for table in (
        resources.PATCH_STRING_TABLE,
        resources.EXPANSION_STRING_TABLE,
        resources.STRING_TABLE,
    ):
        dictionary.load_table(file_provider.load_file(table))
    _log.info("Loaded %d entries from the string table", len(dictionary))
    return dictionary