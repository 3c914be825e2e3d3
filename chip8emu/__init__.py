"""A CHIP-8 interpreter core with a pygame window, keypad and beeper."""

__version__ = "0.1.0"
__all__ = ["audio", "cli", "cpu", "render", "rom", "screen"]