"""JWT token domain service."""

from uuid import UUID

import logfire

from lounge.config import AuthSettings
from lounge.domain.error import UnauthorizedError
from lounge.domain.value import UserId
from lounge.util.jwt import JWTError, TokenPayload, create_token, verify_token

from .base import Service


class JWTService(Service):
    """Domain service for JWT token operations.

    Tokens are minted by the authentication service; this API verifies them
    to identify the caller.
    """

    def __init__(self, auth_settings: AuthSettings) -> None:
        """Initialize JWT service.

        Args:
            auth_settings: Authentication settings
        """
        self.auth_settings = auth_settings

    def create_token(self, user_id: str, nickname: str | None = None) -> str:
        """Create JWT token for user.

        Args:
            user_id: User ID
            nickname: Optional display nickname

        Returns:
            JWT token string
        """
        with logfire.span("jwt_service.create_token", user_id=user_id):
            return create_token(user_id, self.auth_settings, nickname=nickname)

    def verify_token(self, token: str) -> TokenPayload:
        """Verify JWT token and extract payload.

        Args:
            token: JWT token string

        Returns:
            Token payload

        Raises:
            JWTError: If token is invalid or expired
        """
        with logfire.span("jwt_service.verify_token"):
            try:
                return verify_token(token, self.auth_settings)
            except JWTError as e:
                logfire.warn("JWT token verification failed", error=str(e))
                raise

    def get_user_id_from_token(self, token: str | None) -> UserId | None:
        """Extract user ID from JWT token without raising exceptions.

        Args:
            token: JWT token string (optional)

        Returns:
            User ID if token is valid, None if token is missing or invalid
        """
        if not token:
            return None

        try:
            payload = self.verify_token(token)
            return UserId(UUID(payload.user_id))
        except (JWTError, ValueError) as e:
            logfire.debug(
                "JWT verification failed, treating as unauthenticated", error=str(e)
            )
            return None

    def require_user_id(self, token: str | None) -> UserId:
        """Extract user ID from JWT token, rejecting anonymous callers.

        Args:
            token: JWT token string (optional)

        Returns:
            User ID of the authenticated caller

        Raises:
            UnauthorizedError: If token is missing or invalid
        """
        user_id = self.get_user_id_from_token(token)
        if user_id is None:
            raise UnauthorizedError()
        return user_id
