"""Protocol serializer for controller commands.

Converts command objects to wire strings.
Pure functions with no side effects.
"""
from __future__ import annotations

from typing import Iterable

from ..buttons import Button, wire_name
from ..formatting import format_number
from ..models import (
    Command,
    PressCommand,
    HoldCommand,
    ReleaseCommand,
    StickCommand,
    StateCommand,
    SleepCommand,
)

LINE_TERMINATOR = "\n"


class ProtocolSerializer:
    """Serializer for the controller command protocol.

    Produces one command string per command object, without the line
    terminator. Framing is the sender's job.
    """

    @staticmethod
    def serialize_command(command: Command) -> str:
        """Convert a command object to a protocol string.

        Args:
            command: Command object to serialize

        Returns:
            Protocol string ready to be framed and sent

        Raises:
            ValueError: if the command type is unknown

        Examples:
            >>> ProtocolSerializer.serialize_command(PressCommand([Button.A, Button.B]))
            'PRESS a b'
            >>> ProtocolSerializer.serialize_command(SleepCommand(1.0))
            'SLEEP 1'
        """
        if isinstance(command, PressCommand):
            return ProtocolSerializer._serialize_buttons("PRESS", command.buttons)
        elif isinstance(command, HoldCommand):
            return ProtocolSerializer._serialize_buttons("HOLD", command.buttons)
        elif isinstance(command, ReleaseCommand):
            return ProtocolSerializer._serialize_buttons("RELEASE", command.buttons)
        elif isinstance(command, StickCommand):
            return ProtocolSerializer._serialize_stick(command)
        elif isinstance(command, StateCommand):
            return command.state.to_command()
        elif isinstance(command, SleepCommand):
            return f"SLEEP {format_number(command.seconds)}"
        else:
            raise ValueError(f"Unknown command type: {type(command)}")

    @staticmethod
    def _serialize_buttons(verb: str, buttons: Iterable[Button]) -> str:
        """Serialize a button list command.

        Protocol: <VERB> <name> <name> ...

        Names keep the caller's order. An empty list still yields "<VERB> ".
        """
        names = " ".join(wire_name(button) for button in buttons)
        return f"{verb} {names}"

    @staticmethod
    def _serialize_stick(cmd: StickCommand) -> str:
        """Serialize StickCommand.

        Protocol: STICK <l_stick|r_stick> <horizontal> <vertical>
        """
        return (
            f"STICK {wire_name(cmd.stick)} "
            f"{format_number(cmd.horizontal)} {format_number(cmd.vertical)}"
        )
