"""Tone generation for the sound timer beep."""

from __future__ import annotations

import math

TONE_HZ = 440
SAMPLE_RATE = 44100
CHANNELS = 2
BUFFER_SAMPLES = 4096

_PHASE_STEP = 2 * math.pi * TONE_HZ / SAMPLE_RATE


def sine_wave(length: int) -> bytes:
    """Return ``length`` bytes of unsigned 8-bit stereo sine samples.

    Each frame is two identical bytes (left and right). The phase starts at
    zero and advances one step before the first frame is written.
    """
    if length < 0:
        raise ValueError(f"buffer length must not be negative: {length}")
    if length % CHANNELS:
        raise ValueError(f"buffer length must be a multiple of {CHANNELS}: {length}")
    out = bytearray(length)
    phase = 0.0
    for frame in range(0, length, CHANNELS):
        phase += _PHASE_STEP
        sample = int((math.sin(phase) + 0.999999) * 128)
        out[frame:frame + CHANNELS] = bytes([max(0, min(sample, 0xFF))]) * CHANNELS
    return bytes(out)