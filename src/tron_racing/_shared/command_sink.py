# Area: Shared
"""
tron_racing._shared.command_sink — Command sink implementations
===============================================================

Two ready-made CommandSinks:
- BufferedCommandSink queues commands until the caller drains them.
- JsonLinesCommandSink writes each command as one JSON line.
"""

from __future__ import annotations
import json
import logging
from typing import IO, List, Tuple

from ..callbacks import CommandSink

logger = logging.getLogger("tron_racing.commands")

Command = Tuple[str, ...]


class BufferedCommandSink(CommandSink):
    """
    Collects commands as tuples, e.g. ("KILL", "racer").

    Usage:
        sink = BufferedCommandSink()
        ...
        for command in sink.get_pending():
            host.send(command)
    """

    def __init__(self):
        self._pending: List[Command] = []

    def get_pending(self) -> List[Command]:
        """Return and clear the queued commands."""
        commands, self._pending = self._pending, []
        return commands

    def peek(self) -> List[Command]:
        return list(self._pending)

    def _push(self, *command: str) -> None:
        logger.debug(f"Command: {command[0]}")
        self._pending.append(tuple(command))

    def kill(self, player: str) -> None:
        self._push("KILL", player)

    def declare_round_winner(self, player: str) -> None:
        self._push("DECLARE_ROUND_WINNER", player)

    def center_message(self, text: str) -> None:
        self._push("CENTER_MESSAGE", text)

    def console_message(self, text: str) -> None:
        self._push("CONSOLE_MESSAGE", text)

    def player_message(self, player: str, text: str) -> None:
        self._push("PLAYER_MESSAGE", player, text)


class JsonLinesCommandSink(CommandSink):
    """Writes {"command": ..., "args": [...]} lines to a text stream."""

    def __init__(self, stream: IO[str]):
        self.stream = stream

    def _write(self, command: str, *args: str) -> None:
        self.stream.write(json.dumps({"command": command, "args": list(args)}) + "\n")
        self.stream.flush()

    def kill(self, player: str) -> None:
        self._write("KILL", player)

    def declare_round_winner(self, player: str) -> None:
        self._write("DECLARE_ROUND_WINNER", player)

    def center_message(self, text: str) -> None:
        self._write("CENTER_MESSAGE", text)

    def console_message(self, text: str) -> None:
        self._write("CONSOLE_MESSAGE", text)

    def player_message(self, player: str, text: str) -> None:
        self._write("PLAYER_MESSAGE", player, text)
