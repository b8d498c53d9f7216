"""Domain abstraction for the device commands act upon."""

from __future__ import annotations

from typing import Protocol

from src.domain.entities.device_state import DeviceState


class IDeviceReceiver(Protocol):
    """
    Interface for a controllable binary device.

    The receiver is the only component allowed to change or truthfully
    report device state. Implementations backed by real hardware raise
    DeviceUnreachableError from activate/deactivate when the device
    cannot be reached.
    """

    def activate(self) -> str:
        """Switch the device on and return a confirmation message."""
        ...

    def deactivate(self) -> str:
        """Switch the device off and return a confirmation message."""
        ...

    def is_active(self) -> bool:
        """Return whether the device is currently on."""
        ...

    def describe(self) -> str:
        """Return a human readable description of the current state."""
        ...

    def snapshot(self) -> DeviceState:
        """Return the on flag and its description taken from one read."""
        ...
