# chip8emu

A CHIP-8 interpreter. It loads a ROM image, runs it one instruction at a
time, draws the 64×32 display in a window scaled up fifteen times, reads
the 16-key keypad from your keyboard and sounds a 440 Hz tone while the
sound timer is running.

## Installing

```
pip install .
```

This pulls in `pygame`, which is used for the window, the keyboard and
the sound.

## Running a ROM

```
chip8emu --rom path/to/game.ch8
```

Options (the single-dash forms `-rom` and `-delay` work too):

- `--rom PATH`: the ROM file to run (default `roms/pong.ch8`).
- `--delay MS`: milliseconds to wait between instruction cycles
  (default `2`; negative values are treated as `0`). Raise it if games
  run too fast.

If the ROM cannot be read, or is larger than the 3584 bytes of program
memory, `Error loading ROM:` and the reason are printed and the command
exits with status 1.

Close the window or press Escape to quit.

## Keys

The CHIP-8 hex keypad is mapped onto the left-hand block of a QWERTY
keyboard:

```
Keyboard        CHIP-8
1 2 3 4         1 2 3 C
Q W E R         4 5 6 D
A S D F         7 8 9 E
Z X C V         A 0 B F
```

## Using it as a library

The interpreter core does not depend on a window, so it can be driven
directly, for example in tests or tools:

```python
import random

from chip8emu.cpu import CPU
from chip8emu.rom import Rom
from chip8emu.screen import Screen

rom = Rom.load("roms/pong.ch8")
cpu = CPU(random.Random(0))
cpu.load_rom(rom.data)

screen = Screen()
for _ in range(1000):
    cpu.cycle(screen)

for row in screen.rows():
    print("".join("#" if pixel else " " for pixel in row))
```

- `chip8emu.rom.Rom.load(filename)` reads a file into a `Rom` whose
  `data` attribute holds the bytes; it raises `OSError` if the file
  cannot be read.
- `chip8emu.cpu.CPU` takes an optional `random.Random` used by the
  random-number instruction. `load_rom(data)` places the built-in hex
  font at `0x50` and the program at `0x200` (raising `ValueError` if it
  does not fit); `cycle(screen)` fetches and runs one instruction and
  then counts both timers down by one; `execute(screen)` runs the
  instruction already held in `opcode`; `reset()` zeroes everything.
  Registers, memory, `index`, `pc`, the stack, the timers and `keypad`
  are plain attributes. Unknown opcodes do nothing; a return with an
  empty stack or a call with a full one raises `IndexError`.
- `chip8emu.screen.Screen` holds one value per pixel (`0` for off,
  `0xFFFFFFFF` for on) and can be indexed, iterated, cleared and read
  row by row with `rows()`.
- `chip8emu.render.Renderer` opens the pygame window and sound output
  and is used as a context manager. `process_input(keypad)` updates a
  keypad list from pending events and returns `True` when quitting was
  requested, `update(screen)` draws a frame and `play_sound(timer)`
  sounds the tone while `timer` is above zero.
- `chip8emu.audio.sine_wave(length)` produces the unsigned 8-bit stereo
  tone buffer used for the beeper; `length` must be a non-negative even
  number.

## Behaviour to be aware of

- The `8XY4` addition wraps at 255 and always sets `VF` to `0`; no carry
  is reported.
- The `CXKK` random byte is drawn from 0 to 254 before masking.
- Both timers count down once per instruction cycle, not at a fixed
  60 Hz, so their speed follows `--delay`.

## Running the tests

```
pip install .[test]
pytest
```