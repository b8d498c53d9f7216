"""Domain ports package."""

from .device_receiver import IDeviceReceiver
from .health_check import IHealthCheckService

__all__ = ["IDeviceReceiver", "IHealthCheckService"]
