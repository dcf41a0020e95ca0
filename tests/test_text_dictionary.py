import struct

import pytest

from d2shared import resources
from d2shared.text_dictionary import TextDictionary, load_text_dictionary

_HEADER_SIZE = 21
_ENTRY_SIZE = 17


def build_table(entries):
    """Build a .tbl image from (active, key, value) tuples."""
    element_count = len(entries)
    strings_start = _HEADER_SIZE + 2 * element_count + _ENTRY_SIZE * len(entries)
    strings = bytearray()
    hash_entries = bytearray()
    for index, (active, key, value) in enumerate(entries):
        key_bytes = key.encode("latin-1") + b"\x00"
        value_bytes = value.encode("utf-8") + b"\x00"
        key_offset = strings_start + len(strings)
        strings += key_bytes
        value_offset = strings_start + len(strings)
        strings += value_bytes
        hash_entries += struct.pack(
            "<BHIIIH",
            1 if active else 0,
            index,
            0,
            key_offset,
            value_offset,
            len(value_bytes),
        )
    header = b"\x00\x00" + struct.pack("<HIB", element_count, len(entries), 0)
    header += struct.pack("<III", strings_start, 0, strings_start + len(strings))
    elements = b"".join(struct.pack("<H", i) for i in range(element_count))
    return header + elements + bytes(hash_entries) + bytes(strings)


class _DictProvider:
    def __init__(self, files):
        self.files = files

    def load_file(self, file_name):
        return self.files[file_name]


def test_translate_returns_table_values():
    dictionary = TextDictionary()
    added = dictionary.load_table(
        build_table([(True, "strHello", "Hello"), (True, "strBye", "Goodbye")])
    )
    assert added == 2
    assert dictionary.translate("strHello") == "Hello"
    assert dictionary.translate("strBye") == "Goodbye"
    assert len(dictionary) == 2


def test_inactive_entries_are_skipped():
    dictionary = TextDictionary()
    dictionary.load_table(build_table([(False, "hidden", "Hidden"), (True, "shown", "Shown")]))
    assert "hidden" not in dictionary
    assert dictionary.translate("shown") == "Shown"


def test_placeholder_keys_are_replaced_by_position():
    dictionary = TextDictionary()
    dictionary.load_table(
        build_table([(True, "first", "A"), (True, "x", "Lower"), (True, "X", "Upper")])
    )
    assert dictionary.translate("#1") == "Lower"
    assert dictionary.translate("#2") == "Upper"
    assert "x" not in dictionary


def test_first_definition_wins():
    dictionary = TextDictionary()
    dictionary.load_table(build_table([(True, "key", "first"), (True, "key", "second")]))
    assert dictionary.translate("key") == "first"
    assert dictionary.load_table(build_table([(True, "key", "third")])) == 0
    assert dictionary.translate("key") == "first"


def test_empty_value():
    dictionary = TextDictionary()
    dictionary.load_table(build_table([(True, "blank", "")]))
    assert dictionary.translate("blank") == ""


def test_missing_key_raises():
    dictionary = TextDictionary()
    dictionary.load_table(build_table([(True, "a", "b")]))
    with pytest.raises(KeyError, match="Could not find a string"):
        dictionary.translate("missing")


def test_truncated_table_raises():
    dictionary = TextDictionary()
    with pytest.raises(EOFError):
        dictionary.load_table(b"\x00\x00\x01")


def test_load_text_dictionary_prefers_patch_table():
    provider = _DictProvider(
        {
            resources.PATCH_STRING_TABLE: build_table([(True, "shared", "patch")]),
            resources.EXPANSION_STRING_TABLE: build_table(
                [(True, "shared", "expansion"), (True, "exp", "only expansion")]
            ),
            resources.STRING_TABLE: build_table(
                [(True, "shared", "base"), (True, "base", "only base")]
            ),
        }
    )
    dictionary = load_text_dictionary(provider)
    assert dictionary.translate("shared") == "patch"
    assert dictionary.translate("exp") == "only expansion"
    assert dictionary.translate("base") == "only base"
    assert len(dictionary) == 3