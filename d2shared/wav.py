"""Decompression of ADPCM-compressed WAVE data."""

from __future__ import annotations

from d2shared.stream_reader import StreamReader
from d2shared.stream_writer import StreamWriter

_STEP_SIZES = (
    0x0007, 0x0008, 0x0009, 0x000A, 0x000B, 0x000C, 0x000D, 0x000E,
    0x0010, 0x0011, 0x0013, 0x0015, 0x0017, 0x0019, 0x001C, 0x001F,
    0x0022, 0x0025, 0x0029, 0x002D, 0x0032, 0x0037, 0x003C, 0x0042,
    0x0049, 0x0050, 0x0058, 0x0061, 0x006B, 0x0076, 0x0082, 0x008F,
    0x009D, 0x00AD, 0x00BE, 0x00D1, 0x00E6, 0x00FD, 0x0117, 0x0133,
    0x0151, 0x0173, 0x0198, 0x01C1, 0x01EE, 0x0220, 0x0256, 0x0292,
    0x02D4, 0x031C, 0x036C, 0x03C3, 0x0424, 0x048E, 0x0502, 0x0583,
    0x0610, 0x06AB, 0x0756, 0x0812, 0x08E0, 0x09C3, 0x0ABD, 0x0BD0,
    0x0CFF, 0x0E4C, 0x0FBA, 0x114C, 0x1307, 0x14EE, 0x1706, 0x1954,
    0x1BDC, 0x1EA5, 0x21B6, 0x2515, 0x28CA, 0x2CDF, 0x315B, 0x364B,
    0x3BB9, 0x41B2, 0x4844, 0x4F7E, 0x5771, 0x602F, 0x69CE, 0x7462,
    0x7FFF,
)

_INDEX_ADJUST = (
    -1, 0, -1, 4, -1, 2, -1, 6,
    -1, 1, -1, 5, -1, 3, -1, 7,
    -1, 1, -1, 5, -1, 3, -1, 7,
    -1, 2, -1, 4, -1, 6, -1, 8,
)

_INITIAL_STEP_INDEX = 0x2C
_MAX_STEP_INDEX = 0x58
_MIN_SAMPLE = -32768
_MAX_SAMPLE = 32767


def _clamp_index(index: int) -> int:
    return min(max(index, 0), _MAX_STEP_INDEX)


def wav_decompress(data: bytes, channel_count: int) -> bytes:
    """Decode compressed sample data into 16-bit little-endian PCM."""
    if channel_count not in (1, 2):
        raise ValueError(f"channel count must be 1 or 2, got {channel_count}")

    reader = StreamReader(data)
    output = StreamWriter()
    reader.get_byte()
    shift = reader.get_byte()

    step_index = [_INITIAL_STEP_INDEX, _INITIAL_STEP_INDEX]
    samples = []
    for _ in range(channel_count):
        sample = reader.get_int16()
        samples.append(sample)
        output.push_int16(sample)

    stereo = channel_count == 2
    channel = channel_count - 1
    for value in data[reader.position:]:
        if stereo:
            channel = 1 - channel

        if value & 0x80:
            command = value & 0x7F
            if command == 0:
                if step_index[channel]:
                    step_index[channel] -= 1
                output.push_int16(samples[channel])
            elif command == 1:
                step_index[channel] = min(step_index[channel] + 8, _MAX_STEP_INDEX)
                if stereo:
                    channel = 1 - channel
            elif command != 2:
                step_index[channel] = max(step_index[channel] - 8, 0)
                if stereo:
                    channel = 1 - channel
            continue

        step = _STEP_SIZES[step_index[channel]]
        delta = step >> shift
        for bit in range(6):
            if value & (1 << bit):
                delta += step >> bit

        if value & 0x40:
            sample = max(samples[channel] - delta, _MIN_SAMPLE)
        else:
            sample = min(samples[channel] + delta, _MAX_SAMPLE)
        samples[channel] = sample
        output.push_int16(sample)
        step_index[channel] = _clamp_index(step_index[channel] + _INDEX_ADJUST[value & 0x1F])

    return output.to_bytes()