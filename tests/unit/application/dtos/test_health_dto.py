from __future__ import annotations

from src.application.dtos.health_dto import SystemHealthDTO
from src.domain.entities.health import ComponentStatus, ServiceStatus, SystemHealth


def test_system_health_dto_from_domain() -> None:
    health = SystemHealth(
        status=ServiceStatus.UP,
        components=[
            ComponentStatus(
                name="device",
                status=ServiceStatus.UP,
                message="Light is currently OFF",
                details={"on": False},
            )
        ],
    )

    dto = SystemHealthDTO.from_domain(health)

    assert dto.status is ServiceStatus.UP
    assert dto.components[0].name == "device"
    assert dto.components[0].details == {"on": False}
    assert dto.model_dump(mode="json")["components"][0]["status"] == "up"
