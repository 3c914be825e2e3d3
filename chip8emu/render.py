"""Window, keyboard and sound output built on pygame."""

from __future__ import annotations

from collections.abc import MutableSequence
from types import TracebackType

import pygame

from .audio import BUFFER_SAMPLES, CHANNELS, SAMPLE_RATE, sine_wave
from .screen import HEIGHT, WIDTH, Screen

SCALE_FACTOR = 15
TITLE = "CHIP-8 Emulator"

KEY_MAP: dict[int, int] = {
    pygame.K_1: 0x1,
    pygame.K_2: 0x2,
    pygame.K_3: 0x3,
    pygame.K_4: 0xC,
    pygame.K_q: 0x4,
    pygame.K_w: 0x5,
    pygame.K_e: 0x6,
    pygame.K_r: 0xD,
    pygame.K_a: 0x7,
    pygame.K_s: 0x8,
    pygame.K_d: 0x9,
    pygame.K_f: 0xE,
    pygame.K_z: 0xA,
    pygame.K_x: 0x0,
    pygame.K_c: 0xB,
    pygame.K_v: 0xF,
}


class Renderer:
    """Owns the display window, the input queue and the beep tone."""

    def __init__(self) -> None:
        pygame.display.init()
        pygame.mixer.init(
            frequency=SAMPLE_RATE,
            size=8,
            channels=CHANNELS,
            buffer=BUFFER_SAMPLES,
            allowedchanges=0,
        )
        pygame.display.set_caption(TITLE)
        self.window = pygame.display.set_mode((WIDTH * SCALE_FACTOR, HEIGHT * SCALE_FACTOR))
        self._tone = pygame.mixer.Sound(buffer=sine_wave(BUFFER_SAMPLES * CHANNELS))
        self._tone.play(loops=-1)
        pygame.mixer.pause()
        self.sounding = False

    def process_input(self, keypad: MutableSequence[bool]) -> bool:
        """Drain pending events into ``keypad``; return True when asked to quit."""
        quit_requested = False
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                quit_requested = True
            elif event.type in (pygame.KEYDOWN, pygame.KEYUP):
                if event.key == pygame.K_ESCAPE:
                    quit_requested = True
                elif event.key in KEY_MAP:
                    keypad[KEY_MAP[event.key]] = event.type == pygame.KEYDOWN
        return quit_requested

    def update(self, screen: Screen) -> None:
        """Draw the frame buffer scaled to the window."""
        data = b"".join(pixel.to_bytes(4, "big") for pixel in screen)
        frame = pygame.image.frombuffer(data, (WIDTH, HEIGHT), "ARGB")
        self.window.fill((0, 0, 0))
        self.window.blit(pygame.transform.scale(frame, self.window.get_size()), (0, 0))
        pygame.display.flip()

    def play_sound(self, timer: int) -> None:
        """Beep while the sound timer is non-zero, stay silent otherwise."""
        if timer > 0:
            pygame.mixer.unpause()
            self.sounding = True
        else:
            pygame.mixer.pause()
            self.sounding = False

    def close(self) -> None:
        """Release the audio device and the window."""
        pygame.mixer.quit()
        pygame.quit()

    def __enter__(self) -> Renderer:
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.close()