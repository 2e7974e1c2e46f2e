"""API response models."""

from typing import Literal, Optional

from pydantic import BaseModel


class HealthDependency(BaseModel):
    """Status of one configured file the gates depend on."""

    status: Literal["healthy", "unhealthy"]
    path: str
    message: Optional[str] = None


class HealthResponse(BaseModel):
    """Overall service health."""

    status: Literal["healthy", "degraded"]
    version: str
    uptime_seconds: float
    dependencies: dict[str, HealthDependency] = {}
