"""Users router -- /me endpoint for the driver's profile."""

from fastapi import APIRouter

from driverlog.dependencies import CurrentSession
from driverlog.schemas.users import UserProfileResponse

router = APIRouter(prefix="/users", tags=["Users"])


@router.get("/me", response_model=UserProfileResponse)
async def get_me(session: CurrentSession) -> UserProfileResponse:
    """Get the current driver's profile."""
    return UserProfileResponse.model_validate(session.profile)
