"""
DTOs Package - Application Layer

This package contains Data Transfer Objects (DTOs) used for data exchange
between the application layer and the presentation layer.
"""

from .device_state_dto import CommandBatchRequestDTO, DeviceStateDTO
from .health_dto import ComponentStatusDTO, SystemHealthDTO

__all__ = [
    "DeviceStateDTO",
    "CommandBatchRequestDTO",
    "SystemHealthDTO",
    "ComponentStatusDTO",
]
