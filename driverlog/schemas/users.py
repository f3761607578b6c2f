"""User schemas."""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, ConfigDict


class VehicleInfo(BaseModel):
    """Vehicle details stored on the profile."""

    model: str | None = None
    plate: str | None = None
    year: int | None = None


class UserProfileResponse(BaseModel):
    """Response for /users/me endpoint."""

    model_config = ConfigDict(from_attributes=True)

    id: UUID
    email: str | None = None
    display_name: str | None = None
    company_name: str | None = None
    vehicle_info: VehicleInfo | None = None
    created_at: datetime | None = None
