"""Repository for UserProfile model operations."""

from typing import Optional
from uuid import UUID

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from driverlog.models.user import UserProfile
from driverlog.utils.logger import get_logger

log = get_logger(__name__)


class UserRepository:
    """Repository for UserProfile reads and first-login creation."""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def get_by_id(self, user_id: UUID) -> Optional[UserProfile]:
        """Get profile by auth user id."""
        log.debug("query user by id", user_id=str(user_id))
        result = await self.session.execute(select(UserProfile).where(UserProfile.id == user_id))
        user = result.scalar_one_or_none()
        log.debug("query result", found=user is not None)
        return user

    async def create(
        self,
        user_id: UUID,
        email: Optional[str] = None,
        display_name: Optional[str] = None,
    ) -> UserProfile:
        """
        Create a basic profile for a user seen for the first time.

        Caller is responsible for committing the transaction.
        """
        user = UserProfile(id=user_id, email=email, display_name=display_name)
        self.session.add(user)
        await self.session.flush()
        await self.session.refresh(user)
        log.info("user profile created", user_id=str(user_id), email=email)
        return user

    async def get_or_create(
        self,
        user_id: UUID,
        email: Optional[str] = None,
        display_name: Optional[str] = None,
    ) -> tuple[UserProfile, bool]:
        """
        Get existing profile or create a basic one.

        Existing profiles are returned untouched; company and vehicle details
        are owned by the auth provider's profile flow.

        Returns:
            Tuple of (profile, created)
        """
        user = await self.get_by_id(user_id)
        if user is not None:
            return user, False

        user = await self.create(user_id=user_id, email=email, display_name=display_name)
        return user, True
