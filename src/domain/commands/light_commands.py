"""
Light Commands - Domain Layer

Concrete commands for switching the light and reading its status.

Activate and Deactivate report the state they just wrote rather than
re-reading the receiver, so a concurrent caller on the same device
cannot pair one command's message with another's flag.
"""

from src.domain.entities.device_state import DeviceState

from .base import Command


class ActivateCommand(Command):
    """Turn the device on."""

    __slots__ = ()

    def execute(self) -> DeviceState:
        message = self._receiver.activate()
        return DeviceState(is_on=True, status_message=message)


class DeactivateCommand(Command):
    """Turn the device off."""

    __slots__ = ()

    def execute(self) -> DeviceState:
        message = self._receiver.deactivate()
        return DeviceState(is_on=False, status_message=message)


class QueryStatusCommand(Command):
    """Read the current state without changing it."""

    __slots__ = ()

    def execute(self) -> DeviceState:
        return self._receiver.snapshot()
