"""Infrastructure implementation for system health checks."""

from __future__ import annotations

from typing import Callable, Iterable, List

from src.domain.entities.health import ComponentStatus, ServiceStatus, SystemHealth
from src.domain.ports.device_receiver import IDeviceReceiver
from src.domain.ports.health_check import IHealthCheckService
from src.domain.services.command_invoker import CommandInvoker


class HealthCheckService(IHealthCheckService):
    """Collect health information for the device and the command queue."""

    def __init__(
        self,
        receiver: IDeviceReceiver,
        invoker: CommandInvoker,
        device_name: str,
        *,
        max_pending_commands: int = 100,
    ) -> None:
        self._receiver = receiver
        self._invoker = invoker
        self._device_name = device_name
        self._max_pending_commands = max_pending_commands

    def evaluate(self) -> SystemHealth:
        """Run every check and aggregate system health."""

        checks: List[Callable[[], ComponentStatus]] = [
            self._check_device,
            self._check_invoker,
        ]

        component_statuses: List[ComponentStatus] = []
        for check in checks:
            component_statuses.append(check())

        overall_status = self._aggregate_status(component_statuses)
        return SystemHealth(status=overall_status, components=component_statuses)

    def _aggregate_status(self, statuses: Iterable[ComponentStatus]) -> ServiceStatus:
        has_unknown = False
        has_degraded = False

        for status in statuses:
            if status.status == ServiceStatus.DOWN:
                return ServiceStatus.DOWN
            if status.status == ServiceStatus.DEGRADED:
                has_degraded = True
            if status.status == ServiceStatus.UNKNOWN:
                has_unknown = True

        if has_degraded:
            return ServiceStatus.DEGRADED
        if has_unknown:
            return ServiceStatus.UNKNOWN
        return ServiceStatus.UP

    def _check_device(self) -> ComponentStatus:
        try:
            state = self._receiver.snapshot()
        except Exception as exc:
            return ComponentStatus(
                name="device",
                status=ServiceStatus.DOWN,
                message=f"Device read failed: {exc}",
                details={"device": self._device_name},
            )

        return ComponentStatus(
            name="device",
            status=ServiceStatus.UP,
            message=state.status_message,
            details={"device": self._device_name, "on": state.is_on},
        )

    def _check_invoker(self) -> ComponentStatus:
        pending = self._invoker.size()
        if pending > self._max_pending_commands:
            return ComponentStatus(
                name="invoker",
                status=ServiceStatus.DEGRADED,
                message=f"{pending} commands waiting to be drained",
                details={"pending": pending, "limit": self._max_pending_commands},
            )

        return ComponentStatus(
            name="invoker",
            status=ServiceStatus.UP,
            message="idle" if pending == 0 else "pending",
            details={"pending": pending},
        )
