"""
Commands Package - Domain Layer

This package contains the command abstraction, the concrete light
commands and the registry resolving them from a selector.
"""

from .base import Command
from .command_type import CommandType
from .light_commands import ActivateCommand, DeactivateCommand, QueryStatusCommand
from .registry import CommandRegistry

__all__ = [
    "Command",
    "CommandType",
    "ActivateCommand",
    "DeactivateCommand",
    "QueryStatusCommand",
    "CommandRegistry",
]
