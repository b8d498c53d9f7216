"""
Simulated Light - Infrastructure Layer

In-memory stand-in for a smart light bulb. It implements the device
receiver port and logs the hardware signal a real bulb would receive.
"""

from __future__ import annotations

import threading

from src.domain.entities.device_state import DeviceState
from src.domain.ports.device_receiver import IDeviceReceiver
from src.shared import get_logger

logger = get_logger(__name__)

ON_MESSAGE = "Light is ON"
OFF_MESSAGE = "Light is OFF"
STATUS_ON_MESSAGE = "Light is currently ON"
STATUS_OFF_MESSAGE = "Light is currently OFF"


class SimulatedLight(IDeviceReceiver):
    """A light bulb whose only state is a guarded on/off flag."""

    def __init__(self, name: str = "light", initially_on: bool = False) -> None:
        self._name = name
        self._is_on = initially_on
        # Serializes writers when several invokers share this device
        self._lock = threading.Lock()

    @property
    def name(self) -> str:
        return self._name

    def activate(self) -> str:
        with self._lock:
            self._is_on = True
        logger.info("device.signal.sent", device=self._name, signal="TURN ON")
        return ON_MESSAGE

    def deactivate(self) -> str:
        with self._lock:
            self._is_on = False
        logger.info("device.signal.sent", device=self._name, signal="TURN OFF")
        return OFF_MESSAGE

    def is_active(self) -> bool:
        with self._lock:
            return self._is_on

    def describe(self) -> str:
        return self.snapshot().status_message

    def snapshot(self) -> DeviceState:
        with self._lock:
            is_on = self._is_on
        return DeviceState(
            is_on=is_on,
            status_message=STATUS_ON_MESSAGE if is_on else STATUS_OFF_MESSAGE,
        )

    def __repr__(self) -> str:
        return f"SimulatedLight(name={self._name!r})"
