import pytest

from chip8emu.audio import BUFFER_SAMPLES, CHANNELS, sine_wave


def test_length_matches_request():
    assert len(sine_wave(BUFFER_SAMPLES * CHANNELS)) == BUFFER_SAMPLES * CHANNELS


def test_empty_buffer():
    assert sine_wave(0) == b""


def test_channels_carry_same_sample():
    data = sine_wave(512)
    assert all(data[i] == data[i + 1] for i in range(0, len(data), 2))


def test_full_range_is_reached():
    data = sine_wave(BUFFER_SAMPLES * CHANNELS)
    assert max(data) == 255
    assert min(data) == 0


def test_first_sample_is_above_midpoint():
    data = sine_wave(2)
    assert data[0] > 128


def test_output_is_deterministic_and_rises_first():
    first = sine_wave(64)
    second = sine_wave(64)
    assert first == second
    frames = first[0:32:2]
    assert all(a < b for a, b in zip(frames, frames[1:]))


def test_prefix_is_stable():
    assert sine_wave(200)[:100] == sine_wave(100)


@pytest.mark.parametrize("length", [1, 3, 4097])
def test_odd_length_rejected(length):
    with pytest.raises(ValueError):
        sine_wave(length)


def test_negative_length_rejected():
    with pytest.raises(ValueError):
        sine_wave(-2)