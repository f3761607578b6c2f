"""Health check schemas."""

from typing import Literal

from pydantic import BaseModel


class ComponentStatus(BaseModel):
    """Reachability of a single backing component."""

    status: Literal["healthy", "unhealthy"]
    message: str


class HealthResponse(BaseModel):
    """Health check response."""

    status: Literal["ok", "degraded"]
    version: str
    database: ComponentStatus
    timestamp: str
