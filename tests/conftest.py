from __future__ import annotations

import sys
from pathlib import Path
from typing import List

import pytest

from src.domain.commands import (
    ActivateCommand,
    CommandRegistry,
    DeactivateCommand,
    QueryStatusCommand,
)
from src.domain.entities.device_state import DeviceState
from src.domain.entities.errors import DeviceUnreachableError
from src.domain.services.command_invoker import CommandInvoker
from src.infrastructure.devices import SimulatedLight

ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))


class RecordingReceiver:
    """Receiver double that records every call made against it."""

    def __init__(self, initially_on: bool = False) -> None:
        self.on = initially_on
        self.calls: List[str] = []

    def activate(self) -> str:
        self.calls.append("activate")
        self.on = True
        return "activated"

    def deactivate(self) -> str:
        self.calls.append("deactivate")
        self.on = False
        return "deactivated"

    def is_active(self) -> bool:
        self.calls.append("is_active")
        return self.on

    def describe(self) -> str:
        self.calls.append("describe")
        return "on" if self.on else "off"

    def snapshot(self) -> DeviceState:
        self.calls.append("snapshot")
        return DeviceState(is_on=self.on, status_message="on" if self.on else "off")


class UnreachableReceiver(RecordingReceiver):
    """Receiver double whose device never answers mutations."""

    def activate(self) -> str:
        self.calls.append("activate")
        raise DeviceUnreachableError("porch-light")

    def deactivate(self) -> str:
        self.calls.append("deactivate")
        raise DeviceUnreachableError("porch-light")


@pytest.fixture()
def light() -> SimulatedLight:
    return SimulatedLight(name="test-light")


@pytest.fixture()
def recording_receiver() -> RecordingReceiver:
    return RecordingReceiver()


@pytest.fixture()
def unreachable_receiver() -> UnreachableReceiver:
    return UnreachableReceiver()


@pytest.fixture()
def activate_command(light: SimulatedLight) -> ActivateCommand:
    return ActivateCommand(light)


@pytest.fixture()
def deactivate_command(light: SimulatedLight) -> DeactivateCommand:
    return DeactivateCommand(light)


@pytest.fixture()
def query_status_command(light: SimulatedLight) -> QueryStatusCommand:
    return QueryStatusCommand(light)


@pytest.fixture()
def command_registry(light: SimulatedLight) -> CommandRegistry:
    return CommandRegistry.for_receiver(light)


@pytest.fixture()
def invoker() -> CommandInvoker:
    return CommandInvoker()
