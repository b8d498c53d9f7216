"""
Domain Entities Package

This package contains the core domain entities and business logic.
"""

from .device_state import DeviceState
from .errors import (
    DeviceUnreachableError,
    DomainError,
    NoStagedCommandError,
    UnknownCommandTypeError,
)
from .health import ComponentStatus, ServiceStatus, SystemHealth

__all__ = [
    "DeviceState",
    "SystemHealth",
    "ComponentStatus",
    "ServiceStatus",
    "DomainError",
    "NoStagedCommandError",
    "UnknownCommandTypeError",
    "DeviceUnreachableError",
]
