"""
Command Interface - Domain Layer

This module defines the contract shared by every device command.
"""

from abc import ABC, abstractmethod

from src.domain.entities.device_state import DeviceState
from src.domain.ports.device_receiver import IDeviceReceiver


class Command(ABC):
    """
    A bound unit of work against a single device receiver.

    Commands hold nothing but their receiver reference, so one instance
    can be queued and executed any number of times.
    """

    __slots__ = ("_receiver",)

    def __init__(self, receiver: IDeviceReceiver):
        self._receiver = receiver

    @property
    def receiver(self) -> IDeviceReceiver:
        return self._receiver

    @abstractmethod
    def execute(self) -> DeviceState:
        """
        Perform one receiver operation and snapshot the result.

        Returns:
            DeviceState: State of the device right after the operation

        Raises:
            DeviceUnreachableError: Propagated untouched from the receiver
        """
        pass

    def __repr__(self) -> str:
        return f"{type(self).__name__}(receiver={self._receiver!r})"
