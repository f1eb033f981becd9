"""Controller state: direction polling and button events."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import IntEnum, IntFlag

JOY_1 = 0
_SLOTS = 8
_DIRECTIONS = 4


class Button(IntEnum):
    """Slots in the input state."""

    UP = 0
    DOWN = 1
    LEFT = 2
    RIGHT = 3
    JUMP = 4
    START = 7


class JoypadButton(IntFlag):
    """Bits of a joypad reading."""

    UP = 0x0001
    DOWN = 0x0002
    LEFT = 0x0004
    RIGHT = 0x0008
    B = 0x0010
    C = 0x0020
    A = 0x0040
    START = 0x0080
    Z = 0x0100
    Y = 0x0200
    X = 0x0400
    MODE = 0x0800


_DIRECTION_BITS = (
    (JoypadButton.UP, Button.UP),
    (JoypadButton.DOWN, Button.DOWN),
    (JoypadButton.LEFT, Button.LEFT),
    (JoypadButton.RIGHT, Button.RIGHT),
)

_EVENT_BITS = (
    (JoypadButton.A, Button.JUMP),
    (JoypadButton.B, Button.JUMP),
    (JoypadButton.C, Button.JUMP),
    (JoypadButton.START, Button.START),
)


@dataclass
class InputState:
    """Pressed flags for each input slot."""

    values: list[bool] = field(default_factory=lambda: [False] * _SLOTS)

    def is_pressed(self, button: int) -> bool:
        return self.values[button]

    def reset(self, button: int) -> None:
        self.values[button] = False

    def press(self, button: int) -> None:
        self.values[button] = True

    def update(self, joypad: int) -> None:
        """Refresh the direction slots from a joypad reading."""
        for index in range(_DIRECTIONS):
            self.values[index] = False
        for bit, button in _DIRECTION_BITS:
            if joypad & bit:
                self.values[button] = True

    def handle_event(self, joy: int, changed: int, status: int) -> None:
        """Latch jump and start presses reported for the first joypad."""
        if joy != JOY_1:
            return
        for bit, button in _EVENT_BITS:
            if changed & bit and status & bit:
                self.values[button] = True