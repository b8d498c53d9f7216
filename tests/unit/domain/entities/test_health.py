from __future__ import annotations

from datetime import timezone

from src.domain.entities.health import ComponentStatus, ServiceStatus, SystemHealth


def test_component_status_defaults() -> None:
    status = ComponentStatus(name="device", status=ServiceStatus.UP)
    assert status.checked_at.tzinfo == timezone.utc
    assert status.details == {}
    assert status.message is None


def test_system_health_container() -> None:
    component = ComponentStatus(name="invoker", status=ServiceStatus.DEGRADED)
    health = SystemHealth(status=ServiceStatus.DEGRADED, components=[component])
    assert health.components[0] is component
    assert health.status is ServiceStatus.DEGRADED
