"""Data models for controller state and wire commands.

ControllerState is a mutable builder for the STATE command. The command
classes are frozen dataclasses, one per wire command, so they can be queued,
compared and logged safely.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional, Tuple, Union

from .buttons import BUTTON_COUNT, BUTTON_ORDER, Button, Stick, bit_position
from .formatting import LEFT_STICK_PLACEHOLDER, format_number

StickPosition = Tuple[float, float]


class ControllerState:
    """Full controller snapshot for the STATE command.

    Starts with every button released and both sticks unset. Setters mutate
    the instance and return it so calls can be chained:

        >>> state = ControllerState().set_button(Button.A, True).set_left_stick(0.5, -1.0)
        >>> state.to_command()
        'STATE 100000000000000000 0.5 -1'

    Attributes:
        left_stick: (horizontal, vertical) in [-1.0, 1.0], or None if unset
        right_stick: (horizontal, vertical) in [-1.0, 1.0], or None if unset
    """

    def __init__(self):
        self._buttons: List[bool] = [False] * BUTTON_COUNT
        self.left_stick: Optional[StickPosition] = None
        self.right_stick: Optional[StickPosition] = None

    @property
    def buttons(self) -> Tuple[bool, ...]:
        """Button flags in canonical bit order."""
        return tuple(self._buttons)

    def set_button(self, button: Button, pressed: bool) -> ControllerState:
        """Set a button's pressed state."""
        self._buttons[bit_position(button)] = bool(pressed)
        return self

    def set_left_stick(self, horizontal: float, vertical: float) -> ControllerState:
        """Set the left stick position. Range is not checked."""
        self.left_stick = (horizontal, vertical)
        return self

    def set_right_stick(self, horizontal: float, vertical: float) -> ControllerState:
        """Set the right stick position. Range is not checked."""
        self.right_stick = (horizontal, vertical)
        return self

    def is_pressed(self, button: Button) -> bool:
        return self._buttons[bit_position(button)]

    def copy(self) -> ControllerState:
        """Return an independent copy of this state."""
        clone = ControllerState()
        clone._buttons = list(self._buttons)
        clone.left_stick = self.left_stick
        clone.right_stick = self.right_stick
        return clone

    def to_command(self) -> str:
        """Encode this state as a STATE command line (without terminator).

        The right stick can only be sent after a left stick pair, so an
        unset left stick is written as the literal ``0.0 0.0``.
        """
        bits = "".join("1" if pressed else "0" for pressed in self._buttons)
        parts = ["STATE", bits]

        if self.left_stick is not None:
            parts.extend(format_number(v) for v in self.left_stick)
            if self.right_stick is not None:
                parts.extend(format_number(v) for v in self.right_stick)
        elif self.right_stick is not None:
            parts.append(LEFT_STICK_PLACEHOLDER)
            parts.extend(format_number(v) for v in self.right_stick)

        return " ".join(parts)

    def __eq__(self, other) -> bool:
        if not isinstance(other, ControllerState):
            return NotImplemented
        return (
            self._buttons == other._buttons
            and self.left_stick == other.left_stick
            and self.right_stick == other.right_stick
        )

    def __repr__(self) -> str:
        pressed = [b.value for b in BUTTON_ORDER if self.is_pressed(b)]
        return (
            f"ControllerState(pressed={pressed}, "
            f"left_stick={self.left_stick}, right_stick={self.right_stick})"
        )


# ===== COMMANDS =====


@dataclass(frozen=True)
class PressCommand:
    """Press and immediately release buttons.

    Attributes:
        buttons: Buttons in the order they are written on the wire
    """
    buttons: Tuple[Button, ...]

    def __post_init__(self):
        object.__setattr__(self, "buttons", tuple(self.buttons))


@dataclass(frozen=True)
class HoldCommand:
    """Hold buttons down until a matching release."""
    buttons: Tuple[Button, ...]

    def __post_init__(self):
        object.__setattr__(self, "buttons", tuple(self.buttons))


@dataclass(frozen=True)
class ReleaseCommand:
    """Release held buttons."""
    buttons: Tuple[Button, ...]

    def __post_init__(self):
        object.__setattr__(self, "buttons", tuple(self.buttons))


@dataclass(frozen=True)
class StickCommand:
    """Move one analog stick to an absolute position.

    Attributes:
        stick: Which stick to move
        horizontal: -1.0 (left) to 1.0 (right)
        vertical: -1.0 (down) to 1.0 (up)
    """
    stick: Stick
    horizontal: float
    vertical: float


@dataclass(frozen=True)
class StateCommand:
    """Set the entire controller state at once.

    Holds its own copy of the state, so later changes to the caller's
    ControllerState do not leak into a queued command.
    """
    state: ControllerState

    def __post_init__(self):
        object.__setattr__(self, "state", self.state.copy())

    def __hash__(self) -> int:
        return hash(self.state.to_command())


@dataclass(frozen=True)
class SleepCommand:
    """Pause command processing on the device (not on the host).

    Attributes:
        seconds: Device-side delay
    """
    seconds: float


Command = Union[
    PressCommand,
    HoldCommand,
    ReleaseCommand,
    StickCommand,
    StateCommand,
    SleepCommand,
]
