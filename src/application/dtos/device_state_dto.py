"""
Device State DTOs - Application Layer

This module defines Data Transfer Objects (DTOs) for the device state
snapshots returned by the command pipeline, and for batched command
requests sent by API clients.
"""

from typing import List

from pydantic import BaseModel, Field

from src.domain.commands.command_type import CommandType
from src.domain.entities.device_state import DeviceState


class DeviceStateDTO(BaseModel):
    """DTO for a device state snapshot."""

    on: bool = Field(description="Whether the light is on")
    status_message: str = Field(
        alias="statusMessage", description="Human readable status message"
    )

    @classmethod
    def from_domain(cls, state: DeviceState) -> "DeviceStateDTO":
        return cls(on=state.is_on, statusMessage=state.status_message)

    model_config = {
        "populate_by_name": True,
        "json_schema_extra": {
            "example": {"on": True, "statusMessage": "Light is ON"}
        },
    }


class CommandBatchRequestDTO(BaseModel):
    """DTO for a batch of commands executed in the given order."""

    commands: List[CommandType] = Field(
        default_factory=list,
        description="Command selectors, queued in order and drained once",
    )

    model_config = {
        "json_schema_extra": {
            "example": {"commands": ["LIGHT_ON", "LIGHT_OFF", "GET_STATUS"]}
        }
    }
