import struct

import pytest

from d2shared.wav import wav_decompress


def _header(shift: int, *samples: int) -> bytes:
    return bytes([0, shift]) + struct.pack(f"<{len(samples)}h", *samples)


def _samples(pcm: bytes) -> list[int]:
    return list(struct.unpack(f"<{len(pcm) // 2}h", pcm))


def test_header_only_returns_initial_samples():
    assert _samples(wav_decompress(_header(0, 1234), 1)) == [1234]
    assert _samples(wav_decompress(_header(0, 100, -200), 2)) == [100, -200]


def test_repeat_command_copies_last_sample():
    data = _header(0, -77) + bytes([0x80, 0x80])
    assert _samples(wav_decompress(data, 1)) == [-77, -77, -77]


def test_noop_command_outputs_nothing():
    data = _header(0, 5) + bytes([0x82, 0x82])
    assert _samples(wav_decompress(data, 1)) == [5]


def test_stereo_alternates_channels():
    data = _header(0, 100, -200) + bytes([0x80, 0x80])
    assert _samples(wav_decompress(data, 2)) == [100, -200, 100, -200]


def test_stereo_step_command_stays_on_channel():
    data = _header(0, 100, -200) + bytes([0x81, 0x80])
    assert _samples(wav_decompress(data, 2)) == [100, -200, 100]


def test_sign_bit_mirrors_delta():
    up = _samples(wav_decompress(_header(1, 0) + bytes([0x05]), 1))
    down = _samples(wav_decompress(_header(1, 0) + bytes([0x45]), 1))
    assert up[1] > 0
    assert down[1] == -up[1]


def test_samples_clamp_at_limits():
    high = wav_decompress(_header(0, 32767) + bytes([0x3F]), 1)
    low = wav_decompress(_header(0, -32768) + bytes([0x7F]), 1)
    assert _samples(high) == [32767, 32767]
    assert _samples(low) == [-32768, -32768]


def test_one_sample_per_data_byte():
    body = bytes([0x01, 0x12, 0x23, 0x34, 0x45, 0x56])
    pcm = wav_decompress(_header(2, 0) + body, 1)
    assert len(pcm) == 2 * (1 + len(body))


def test_invalid_channel_count_raises():
    with pytest.raises(ValueError):
        wav_decompress(_header(0, 0, 0, 0), 3)


def test_truncated_header_raises():
    with pytest.raises(EOFError):
        wav_decompress(bytes([0, 0, 1]), 1)