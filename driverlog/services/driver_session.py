"""Per-request driver session.

A session is opened from a verified access token, carries the user id and
profile explicitly into every service call, and is closed when the request
ends. There is no process-wide current user; a renewed token simply opens a
new session on the next request.
"""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Optional
from uuid import UUID

from sqlalchemy.ext.asyncio import AsyncSession

from driverlog.models.user import UserProfile
from driverlog.repositories.user_repository import UserRepository
from driverlog.services.auth_service import AuthService
from driverlog.utils.logger import get_logger

log = get_logger(__name__)


@dataclass
class DriverSession:
    """Authenticated driver context for one request."""

    user_id: UUID
    profile: UserProfile
    opened_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    closed_at: Optional[datetime] = None

    @property
    def is_open(self) -> bool:
        return self.closed_at is None

    def close(self) -> None:
        """Tear down the session; further use is a programming error."""
        if self.closed_at is None:
            self.closed_at = datetime.now(timezone.utc)
            log.debug("driver session closed", user_id=str(self.user_id))


async def open_driver_session(
    authorization: Optional[str],
    db: AsyncSession,
    auth_service: AuthService,
) -> DriverSession:
    """
    Verify the token and load (or create) the driver's profile.

    Raises:
        MissingTokenError: If no token is provided
        InvalidTokenError: If token is invalid or expired
    """
    auth_user = await auth_service.verify_token(authorization)
    user_repo = UserRepository(db)
    profile, created = await user_repo.get_or_create(
        user_id=auth_user.user_id,
        email=auth_user.email,
        display_name=auth_user.display_name,
    )
    if created:
        await db.commit()

    log.debug("driver session opened", user_id=str(auth_user.user_id), new_profile=created)
    return DriverSession(user_id=auth_user.user_id, profile=profile)
