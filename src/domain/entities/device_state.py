"""
Device State Entity - Domain Layer

This module defines the snapshot value object returned to callers
after a command runs against the device.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class DeviceState:
    """Immutable read of the device at the moment it was taken."""

    is_on: bool
    status_message: str
