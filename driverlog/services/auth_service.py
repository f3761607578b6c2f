"""Authentication service for auth-provider JWT verification."""

from dataclasses import dataclass
from typing import Optional
from uuid import UUID

import jwt

from driverlog.exceptions import InvalidTokenError, MissingTokenError
from driverlog.utils.logger import get_logger

log = get_logger(__name__)


@dataclass
class AuthenticatedUser:
    """Represents an authenticated user from a verified access token."""

    user_id: UUID
    email: Optional[str] = None
    display_name: Optional[str] = None


class AuthService:
    """Verifies HS256 access tokens issued by the backend auth provider."""

    ALGORITHMS = ["HS256"]

    def __init__(self, jwt_secret: str, audience: str = "authenticated") -> None:
        self._jwt_secret = jwt_secret
        self._audience = audience

    async def verify_token(self, authorization_header: Optional[str]) -> AuthenticatedUser:
        """
        Verify the bearer token and extract user information.

        Args:
            authorization_header: The Authorization header value (Bearer <token>)

        Returns:
            AuthenticatedUser with details from the token claims

        Raises:
            MissingTokenError: If no token is provided
            InvalidTokenError: If token is invalid or expired
        """
        if not authorization_header:
            raise MissingTokenError()

        parts = authorization_header.split()
        if len(parts) != 2 or parts[0].lower() != "bearer":
            raise InvalidTokenError("Invalid authorization header format")

        if not self._jwt_secret:
            log.error("jwt secret not configured")
            raise InvalidTokenError("Token verification is not configured")

        try:
            payload = jwt.decode(
                parts[1],
                self._jwt_secret,
                algorithms=self.ALGORITHMS,
                audience=self._audience,
                options={"verify_exp": True, "require": ["sub", "exp"]},
            )
        except jwt.ExpiredSignatureError:
            log.warning("token expired")
            raise InvalidTokenError("Token has expired")
        except jwt.InvalidTokenError as e:
            log.warning("token invalid", error=str(e))
            raise InvalidTokenError(f"Token validation failed: {str(e)}")

        try:
            user_id = UUID(str(payload["sub"]))
        except ValueError:
            raise InvalidTokenError("Token subject is not a user id")

        metadata = payload.get("user_metadata") or {}
        email = payload.get("email")

        log.debug("token verified", user_id=str(user_id), email=email)

        return AuthenticatedUser(
            user_id=user_id,
            email=email,
            display_name=metadata.get("display_name"),
        )


# Singleton instance
_auth_service: Optional[AuthService] = None


def get_auth_service() -> AuthService:
    """Get singleton auth service instance."""
    global _auth_service
    if _auth_service is None:
        from driverlog.config import get_settings

        settings = get_settings()
        _auth_service = AuthService(
            jwt_secret=settings.supabase_jwt_secret,
            audience=settings.jwt_audience,
        )
    return _auth_service
