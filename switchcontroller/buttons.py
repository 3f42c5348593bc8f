"""Button and stick identifiers shared by every wire command.

The enum values are the wire names the firmware understands. The bit order
used by the STATE command is defined by BUTTON_ORDER below, never by the
declaration order of the enum members.
"""
from __future__ import annotations

from enum import Enum
from typing import Dict, Tuple, Union


class Button(Enum):
    """Nintendo Switch controller buttons, valued by wire name."""

    A = "a"
    B = "b"
    X = "x"
    Y = "y"
    L = "l"
    R = "r"
    ZL = "zl"
    ZR = "zr"
    PLUS = "plus"
    MINUS = "minus"
    HOME = "home"
    CAPTURE = "capture"
    L_STICK = "l_stick"
    R_STICK = "r_stick"
    DPAD_UP = "dpad_up"
    DPAD_DOWN = "dpad_down"
    DPAD_LEFT = "dpad_left"
    DPAD_RIGHT = "dpad_right"

    def __str__(self) -> str:
        return self.value


class Stick(Enum):
    """Analog sticks, valued by wire name."""

    LEFT = "l_stick"
    RIGHT = "r_stick"

    def __str__(self) -> str:
        return self.value


# Canonical STATE bit order (index 0..17). Devices depend on this order.
BUTTON_ORDER: Tuple[Button, ...] = (
    Button.A,
    Button.B,
    Button.X,
    Button.Y,
    Button.L,
    Button.R,
    Button.ZL,
    Button.ZR,
    Button.PLUS,
    Button.MINUS,
    Button.HOME,
    Button.CAPTURE,
    Button.L_STICK,
    Button.R_STICK,
    Button.DPAD_UP,
    Button.DPAD_DOWN,
    Button.DPAD_LEFT,
    Button.DPAD_RIGHT,
)

BUTTON_COUNT = len(BUTTON_ORDER)

_BIT_POSITIONS: Dict[Button, int] = {
    button: index for index, button in enumerate(BUTTON_ORDER)
}


def bit_position(button: Button) -> int:
    """Return the STATE bit index of a button.

    Raises:
        KeyError: if ``button`` is not a Button member
    """
    return _BIT_POSITIONS[button]


def wire_name(item: Union[Button, Stick]) -> str:
    """Return the lowercase token used for a button or stick on the wire."""
    return item.value
