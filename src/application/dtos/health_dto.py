"""DTOs for system health responses."""

from __future__ import annotations

from datetime import datetime
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, Field

from src.domain.entities.health import ComponentStatus, ServiceStatus, SystemHealth


class ComponentStatusDTO(BaseModel):
    """Serializable representation of a component health check."""

    name: str = Field(description="Component identifier")
    status: ServiceStatus = Field(description="Status for the component")
    message: Optional[str] = Field(
        default=None, description="Human readable status note"
    )
    checked_at: datetime = Field(description="Timestamp of the check")
    details: Dict[str, Any] = Field(
        default_factory=dict, description="Additional component data"
    )

    @classmethod
    def from_domain(cls, status: ComponentStatus) -> "ComponentStatusDTO":
        return cls(
            name=status.name,
            status=status.status,
            message=status.message,
            checked_at=status.checked_at,
            details=status.details,
        )


class SystemHealthDTO(BaseModel):
    """DTO representing the /health response payload."""

    status: ServiceStatus = Field(description="Overall system status")
    components: List[ComponentStatusDTO] = Field(
        default_factory=list, description="Detailed component information"
    )

    @classmethod
    def from_domain(cls, health: SystemHealth) -> "SystemHealthDTO":
        return cls(
            status=health.status,
            components=[
                ComponentStatusDTO.from_domain(component)
                for component in health.components
            ],
        )

    model_config = {
        "json_schema_extra": {
            "example": {
                "status": "up",
                "components": [
                    {
                        "name": "device",
                        "status": "up",
                        "message": "Light is currently OFF",
                        "checked_at": "2024-09-09T12:00:00Z",
                        "details": {"device": "living-room", "on": False},
                    },
                    {
                        "name": "invoker",
                        "status": "up",
                        "message": "idle",
                        "checked_at": "2024-09-09T12:00:00Z",
                        "details": {"pending": 0},
                    },
                ],
            }
        }
    }
