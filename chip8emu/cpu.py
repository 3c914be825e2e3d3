"""The CHIP-8 interpreter core: memory, registers, timers and instructions."""

from __future__ import annotations

import random
from collections.abc import Callable

from .screen import HEIGHT, PIXEL_ON, TOTAL, WIDTH, Screen

MEMORY_SIZE = 4096
STACK_SIZE = 16
REGISTER_COUNT = 16
KEY_COUNT = 16
FONT_ADDRESS = 0x50
PROGRAM_START = 0x200

FONT = bytes([
    0xF0, 0x90, 0x90, 0x90, 0xF0,  # 0
    0x20, 0x60, 0x20, 0x20, 0x70,  # 1
    0xF0, 0x10, 0xF0, 0x80, 0xF0,  # 2
    0xF0, 0x10, 0xF0, 0x10, 0xF0,  # 3
    0x90, 0x90, 0xF0, 0x10, 0x10,  # 4
    0xF0, 0x80, 0xF0, 0x10, 0xF0,  # 5
    0xF0, 0x80, 0xF0, 0x90, 0xF0,  # 6
    0xF0, 0x10, 0x20, 0x40, 0x40,  # 7
    0xF0, 0x90, 0xF0, 0x90, 0xF0,  # 8
    0xF0, 0x90, 0xF0, 0x10, 0xF0,  # 9
    0xF0, 0x90, 0xF0, 0x90, 0x90,  # A
    0xE0, 0x90, 0xE0, 0x90, 0xE0,  # B
    0xF0, 0x80, 0x80, 0x80, 0xF0,  # C
    0xE0, 0x90, 0x90, 0x90, 0xE0,  # D
    0xF0, 0x80, 0xF0, 0x80, 0xF0,  # E
    0xF0, 0x80, 0xF0, 0x80, 0x80,  # F
])

_FONT_GLYPH_SIZE = 5


class CPU:
    """CHIP-8 processor state and instruction execution."""

    def __init__(self, rng: random.Random | None = None) -> None:
        self._rng = rng if rng is not None else random.Random()
        self._main_ops: dict[int, Callable[[], None]] = {
            0x1: self._jump,
            0x2: self._call,
            0x3: self._skip_eq_byte,
            0x4: self._skip_ne_byte,
            0x5: self._skip_eq_reg,
            0x6: self._load_byte,
            0x7: self._add_byte,
            0x9: self._skip_ne_reg,
            0xA: self._load_index,
            0xB: self._jump_offset,
            0xC: self._random,
        }
        self._alu_ops: dict[int, Callable[[], None]] = {
            0x0: self._move,
            0x1: self._or,
            0x2: self._and,
            0x3: self._xor,
            0x4: self._add_reg,
            0x5: self._sub,
            0x6: self._shift_right,
            0x7: self._sub_reversed,
            0xE: self._shift_left,
        }
        self._key_ops: dict[int, Callable[[], None]] = {
            0x9E: self._skip_key_pressed,
            0xA1: self._skip_key_released,
        }
        self._misc_ops: dict[int, Callable[[], None]] = {
            0x07: self._read_delay,
            0x0A: self._wait_key,
            0x15: self._set_delay,
            0x18: self._set_sound,
            0x1E: self._add_index,
            0x29: self._font_address,
            0x33: self._store_bcd,
            0x55: self._store_registers,
            0x65: self._load_registers,
        }
        self.reset()

    def reset(self) -> None:
        """Return every register, memory cell, timer and key to zero."""
        self.registers = bytearray(REGISTER_COUNT)
        self.memory = bytearray(MEMORY_SIZE)
        self.index = 0
        self.pc = 0
        self.stack = [0] * STACK_SIZE
        self.sp = 0
        self.delay_timer = 0
        self.sound_timer = 0
        self.opcode = 0
        self.keypad = [False] * KEY_COUNT

    def load_rom(self, data: bytes) -> None:
        """Copy the font and a program image into memory and point PC at it."""
        if len(data) > MEMORY_SIZE - PROGRAM_START:
            raise ValueError(
                f"ROM of {len(data)} bytes does not fit in "
                f"{MEMORY_SIZE - PROGRAM_START} bytes of program memory"
            )
        self.memory[FONT_ADDRESS:FONT_ADDRESS + len(FONT)] = FONT
        self.memory[PROGRAM_START:PROGRAM_START + len(data)] = data
        self.pc = PROGRAM_START

    def cycle(self, screen: Screen) -> None:
        """Fetch and run one instruction, then tick both timers."""
        self.opcode = (self.memory[self.pc] << 8) | self.memory[self.pc + 1]
        self.pc = (self.pc + 2) & 0xFFFF
        self.execute(screen)
        if self.delay_timer > 0:
            self.delay_timer -= 1
        if self.sound_timer > 0:
            self.sound_timer -= 1

    def execute(self, screen: Screen) -> None:
        """Run the instruction held in ``opcode``; unknown opcodes do nothing."""
        op = self.opcode
        if op == 0x00E0:
            screen.clear()
        elif op == 0x00EE:
            self._return()

        group = op >> 12
        handler: Callable[[], None] | None
        if group == 0xD:
            self._draw(screen)
            return
        if group == 0x8:
            handler = self._alu_ops.get(op & 0xF)
        elif group == 0xE:
            handler = self._key_ops.get(op & 0xFF)
        elif group == 0xF:
            handler = self._misc_ops.get(op & 0xFF)
        else:
            handler = self._main_ops.get(group)
        if handler is not None:
            handler()

    # operand fields

    @property
    def _x(self) -> int:
        return (self.opcode >> 8) & 0xF

    @property
    def _y(self) -> int:
        return (self.opcode >> 4) & 0xF

    @property
    def _kk(self) -> int:
        return self.opcode & 0xFF

    @property
    def _nnn(self) -> int:
        return self.opcode & 0x0FFF

    def _skip(self) -> None:
        self.pc = (self.pc + 2) & 0xFFFF

    # flow control

    def _return(self) -> None:
        if self.sp == 0:
            raise IndexError("stack underflow")
        self.sp -= 1
        self.pc = self.stack[self.sp]

    def _jump(self) -> None:
        self.pc = self._nnn

    def _call(self) -> None:
        if self.sp >= STACK_SIZE:
            raise IndexError("stack overflow")
        self.stack[self.sp] = self.pc
        self.sp += 1
        self.pc = self._nnn

    def _jump_offset(self) -> None:
        self.pc = self._nnn + self.registers[0]

    def _skip_eq_byte(self) -> None:
        if self.registers[self._x] == self._kk:
            self._skip()

    def _skip_ne_byte(self) -> None:
        if self.registers[self._x] != self._kk:
            self._skip()

    def _skip_eq_reg(self) -> None:
        if self.registers[self._x] == self.registers[self._y]:
            self._skip()

    def _skip_ne_reg(self) -> None:
        if self.registers[self._x] != self.registers[self._y]:
            self._skip()

    # register loads and arithmetic

    def _load_byte(self) -> None:
        self.registers[self._x] = self._kk

    def _add_byte(self) -> None:
        x = self._x
        self.registers[x] = (self.registers[x] + self._kk) & 0xFF

    def _move(self) -> None:
        self.registers[self._x] = self.registers[self._y]

    def _or(self) -> None:
        self.registers[self._x] |= self.registers[self._y]

    def _and(self) -> None:
        self.registers[self._x] &= self.registers[self._y]

    def _xor(self) -> None:
        self.registers[self._x] ^= self.registers[self._y]

    def _add_reg(self) -> None:
        x = self._x
        total = (self.registers[x] + self.registers[self._y]) & 0xFF
        # The sum is truncated to a byte before the carry test, so VF stays 0.
        self.registers[0xF] = 0
        self.registers[x] = total

    def _sub(self) -> None:
        x, y = self._x, self._y
        self.registers[0xF] = 1 if self.registers[x] > self.registers[y] else 0
        self.registers[x] = (self.registers[x] - self.registers[y]) & 0xFF

    def _sub_reversed(self) -> None:
        x, y = self._x, self._y
        self.registers[0xF] = 1 if self.registers[y] > self.registers[x] else 0
        self.registers[x] = (self.registers[y] - self.registers[x]) & 0xFF

    def _shift_right(self) -> None:
        x = self._x
        self.registers[0xF] = self.registers[x] & 0x1
        self.registers[x] >>= 1

    def _shift_left(self) -> None:
        x = self._x
        self.registers[0xF] = (self.registers[x] & 0x80) >> 7
        self.registers[x] = (self.registers[x] << 1) & 0xFF

    def _random(self) -> None:
        self.registers[self._x] = self._rng.randrange(0xFF) & self._kk

    # index register and memory

    def _load_index(self) -> None:
        self.index = self._nnn

    def _add_index(self) -> None:
        self.index = (self.index + self.registers[self._x]) & 0xFFFF

    def _font_address(self) -> None:
        self.index = (FONT_ADDRESS + self.registers[self._x] * _FONT_GLYPH_SIZE) & 0xFFFF

    def _store_bcd(self) -> None:
        value = self.registers[self._x]
        self.memory[self.index] = value // 100
        self.memory[(self.index + 1) & 0xFFFF] = (value // 10) % 10
        self.memory[(self.index + 2) & 0xFFFF] = value % 10

    def _store_registers(self) -> None:
        for offset in range(self._x + 1):
            self.memory[(self.index + offset) & 0xFFFF] = self.registers[offset]

    def _load_registers(self) -> None:
        for offset in range(self._x + 1):
            self.registers[offset] = self.memory[(self.index + offset) & 0xFFFF]

    # display

    def _draw(self, screen: Screen) -> None:
        x = self.registers[self._x] % WIDTH
        y = self.registers[self._y] % HEIGHT
        self.registers[0xF] = 0
        for row in range(self.opcode & 0xF):
            sprite = self.memory[(self.index + row) & 0xFFFF]
            for col in range(8):
                if not sprite & (0x80 >> col):
                    continue
                pos = ((y + row) * WIDTH + x + col) % TOTAL
                if screen[pos] == PIXEL_ON:
                    self.registers[0xF] = 1
                screen[pos] ^= PIXEL_ON

    # input and timers

    def _skip_key_pressed(self) -> None:
        if self.keypad[self.registers[self._x]]:
            self._skip()

    def _skip_key_released(self) -> None:
        if not self.keypad[self.registers[self._x]]:
            self._skip()

    def _wait_key(self) -> None:
        pressed = next((key for key, down in enumerate(self.keypad) if down), None)
        if pressed is None:
            self.pc = (self.pc - 2) & 0xFFFF
        else:
            self.registers[self._x] = pressed

    def _read_delay(self) -> None:
        self.registers[self._x] = self.delay_timer

    def _set_delay(self) -> None:
        self.delay_timer = self.registers[self._x]

    def _set_sound(self) -> None:
        self.sound_timer = self.registers[self._x]