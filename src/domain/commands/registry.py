"""
Command Registry - Domain Layer

Owns the long-lived command instances and resolves them from a
symbolic selector, so callers never construct commands against the
receiver themselves.
"""

from __future__ import annotations

from typing import Dict, Mapping

from src.domain.entities.errors import UnknownCommandTypeError
from src.domain.ports.device_receiver import IDeviceReceiver

from .base import Command
from .command_type import CommandType
from .light_commands import ActivateCommand, DeactivateCommand, QueryStatusCommand


class CommandRegistry:
    """Maps each CommandType to the command instance that serves it."""

    def __init__(self, commands: Mapping[CommandType, Command]) -> None:
        self._commands: Dict[CommandType, Command] = dict(commands)

    @classmethod
    def for_receiver(cls, receiver: IDeviceReceiver) -> "CommandRegistry":
        """Build the standard light command set bound to one receiver."""
        return cls(
            {
                CommandType.LIGHT_ON: ActivateCommand(receiver),
                CommandType.LIGHT_OFF: DeactivateCommand(receiver),
                CommandType.GET_STATUS: QueryStatusCommand(receiver),
            }
        )

    def resolve(self, command_type: CommandType | str) -> Command:
        """
        Return the command registered for a selector.

        Args:
            command_type: A CommandType member or its string value

        Raises:
            UnknownCommandTypeError: If the selector is not registered
        """
        try:
            key = CommandType(command_type)
        except ValueError:
            raise UnknownCommandTypeError(command_type) from None

        command = self._commands.get(key)
        if command is None:
            raise UnknownCommandTypeError(
                key.value, details={"registered": [t.value for t in self._commands]}
            )
        return command

    def __contains__(self, command_type: object) -> bool:
        try:
            return CommandType(command_type) in self._commands
        except ValueError:
            return False

    def __len__(self) -> int:
        return len(self._commands)
