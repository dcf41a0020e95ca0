"""Animation data table (animdata.d2): frame counts, speeds and keyframe flags."""

from __future__ import annotations

import logging
from dataclasses import dataclass

from d2shared import resources
from d2shared.interfaces import FileProvider
from d2shared.stream_reader import StreamReader

_log = logging.getLogger(__name__)

COF_NAME_LENGTH = 8
FLAGS_LENGTH = 144


@dataclass(frozen=True)
class AnimationDataRecord:
    """One entry of the animation data table."""

    cof_name: str
    frames_per_direction: int
    # The playback rate is animation_speed / 255 of 25 frames per second.
    animation_speed: int
    # Keyframe trigger flags, one byte per frame.
    flags: bytes


def _read_record(reader: StreamReader) -> AnimationDataRecord:
    name = reader.read_bytes(COF_NAME_LENGTH).replace(b"\x00", b"").decode("latin-1")
    frames_per_direction = reader.get_int32()
    animation_speed = reader.get_int32()
    flags = reader.read_bytes(FLAGS_LENGTH)
    return AnimationDataRecord(
        cof_name=name,
        frames_per_direction=frames_per_direction,
        animation_speed=animation_speed,
        flags=flags,
    )


def parse_animation_data(data: bytes) -> dict[str, list[AnimationDataRecord]]:
    """Parse the table into records grouped by lower-cased COF name, in file order."""
    records: dict[str, list[AnimationDataRecord]] = {}
    reader = StreamReader(data)
    while not reader.eof():
        for _ in range(reader.get_int32()):
            record = _read_record(reader)
            records.setdefault(record.cof_name.lower(), []).append(record)
    return records


def load_animation_data(file_provider: FileProvider) -> dict[str, list[AnimationDataRecord]]:
    """Load and parse the game's animation data table."""
    records = parse_animation_data(file_provider.load_file(resources.ANIMATION_DATA))
    _log.info("Loaded %d animation data records", len(records))
    return records