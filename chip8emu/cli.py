"""Command line entry point: load a ROM and run it in a window."""

from __future__ import annotations

import argparse
import time
from collections.abc import Sequence

from .cpu import CPU
from .render import Renderer
from .rom import Rom
from .screen import Screen

DEFAULT_ROM = "roms/pong.ch8"
DEFAULT_DELAY_MS = 2


def parse_args(argv: Sequence[str] | None = None) -> argparse.Namespace:
    """Parse the ROM path and the per-cycle delay in milliseconds."""
    parser = argparse.ArgumentParser(prog="chip8emu", description="Run a CHIP-8 program.")
    parser.add_argument("--rom", "-rom", default=DEFAULT_ROM, help="Path to the ROM file")
    parser.add_argument(
        "--delay",
        "-delay",
        type=int,
        default=DEFAULT_DELAY_MS,
        help="Delay between cycles in milliseconds",
    )
    return parser.parse_args(argv)


def main(argv: Sequence[str] | None = None) -> int:
    """Run the emulator until the window is closed or Escape is pressed."""
    args = parse_args(argv)
    cpu = CPU()
    screen = Screen()

    try:
        rom = Rom.load(args.rom)
        cpu.load_rom(rom.data)
    except (OSError, ValueError) as err:
        print("Error loading ROM:", err)
        return 1

    delay = max(args.delay, 0) / 1000
    with Renderer() as renderer:
        quit_requested = False
        while not quit_requested:
            quit_requested = renderer.process_input(cpu.keypad)
            cpu.cycle(screen)
            renderer.update(screen)
            renderer.play_sound(cpu.sound_timer)
            time.sleep(delay)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())