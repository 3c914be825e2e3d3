"""The 64x32 monochrome frame buffer."""

from __future__ import annotations

from collections.abc import Iterator

WIDTH = 64
HEIGHT = 32
TOTAL = WIDTH * HEIGHT

PIXEL_OFF = 0x00000000
PIXEL_ON = 0xFFFFFFFF


class Screen:
    """Frame buffer of 32-bit ARGB pixels, stored row by row."""

    def __init__(self) -> None:
        self._pixels = [PIXEL_OFF] * TOTAL

    def clear(self) -> None:
        """Turn every pixel off."""
        self._pixels = [PIXEL_OFF] * TOTAL

    def __getitem__(self, index: int) -> int:
        return self._pixels[index]

    def __setitem__(self, index: int, value: int) -> None:
        if not 0 <= value <= 0xFFFFFFFF:
            raise ValueError(f"pixel value out of range: {value:#x}")
        self._pixels[index] = value

    def __len__(self) -> int:
        return TOTAL

    def __iter__(self) -> Iterator[int]:
        return iter(self._pixels)

    def rows(self) -> Iterator[list[int]]:
        """Yield the pixels one row at a time, top to bottom."""
        for start in range(0, TOTAL, WIDTH):
            yield self._pixels[start:start + WIDTH]