import struct

from d2shared import resources
from d2shared.animation_data import load_animation_data
from d2shared.text_dictionary import load_text_dictionary


def _empty_table() -> bytes:
    return b"\x00\x00" + struct.pack("<HIB", 0, 0, 0) + struct.pack("<III", 0, 0, 0)


class _RecordingProvider:
    def __init__(self, payload: bytes) -> None:
        self.payload = payload
        self.requested: list[str] = []

    def load_file(self, file_name: str) -> bytes:
        self.requested.append(file_name)
        return self.payload


def test_string_tables_are_loaded_patch_first():
    provider = _RecordingProvider(_empty_table())
    load_text_dictionary(provider)
    assert provider.requested == [
        resources.PATCH_STRING_TABLE,
        resources.EXPANSION_STRING_TABLE,
        resources.STRING_TABLE,
    ]


def test_requested_string_tables_carry_language_placeholder():
    provider = _RecordingProvider(_empty_table())
    load_text_dictionary(provider)
    assert len(provider.requested) == 3
    for path in provider.requested:
        assert path.startswith("/data/local/lng/{LANG}/")
        assert path.endswith(".tbl")


def test_string_table_path_requested():
    provider = _RecordingProvider(_empty_table())
    load_text_dictionary(provider)
    assert provider.requested[-1] == "/data/local/lng/{LANG}/string.tbl"


def test_animation_data_path_requested():
    provider = _RecordingProvider(b"")
    load_animation_data(provider)
    assert provider.requested == ["/data/global/animdata.d2"]