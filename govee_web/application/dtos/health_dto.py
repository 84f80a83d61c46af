"""DTOs for the health endpoint response."""

from __future__ import annotations

from pydantic import BaseModel, Field

from govee_web.domain.entities.health import HealthStatus, ServiceHealth


class HealthDTO(BaseModel):
    """DTO representing the /health response payload."""

    version: str = Field(description="Service version")
    status: HealthStatus = Field(description="Overall service status")

    @classmethod
    def from_domain(cls, health: ServiceHealth) -> "HealthDTO":
        return cls(version=health.version, status=health.status)

    model_config = {
        "json_schema_extra": {"example": {"version": "0.3.0", "status": "ok"}}
    }
