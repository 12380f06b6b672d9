"""Access token domain service."""

import logfire

from blog.config import JWTSettings
from blog.domain.error import InvalidArgumentError
from blog.domain.value import UserId
from blog.util.jwt import (
    AccessTokenClaims,
    JWTError,
    create_refresh_secret,
    create_token,
    verify_token,
)

from .base import Service


class TokenService(Service):
    """Issues and validates signed access tokens and refresh secrets."""

    def __init__(self, jwt_settings: JWTSettings) -> None:
        """Initialize token service.

        Args:
            jwt_settings: JWT settings
        """
        self.jwt_settings = jwt_settings

    def create_access_token(self, user_id: UserId, username: str, role: str) -> str:
        """Create a signed access token for a user.

        Args:
            user_id: User ID
            username: Username
            role: User role

        Returns:
            JWT token string

        Raises:
            InvalidArgumentError: If username or role is empty
            ConfigurationError: If no secret key is configured
        """
        if not username:
            raise InvalidArgumentError("Username is required to issue a token")
        if not role:
            raise InvalidArgumentError("Role is required to issue a token")

        with logfire.span(
            "token_service.create_access_token", user_id=str(user_id), role=role
        ):
            token = create_token(user_id, username, role, self.jwt_settings)
            logfire.info("Access token created", user_id=str(user_id), role=role)
            return token

    def validate_token(
        self, token: str | None, ignore_expiry: bool = False
    ) -> AccessTokenClaims | None:
        """Validate an access token and extract its claims.

        Expected failures (malformed, forged, wrong algorithm, expired) map to
        None rather than an exception.

        Args:
            token: JWT token string
            ignore_expiry: Accept expired tokens (used when refreshing)

        Returns:
            Claims if the token is acceptable, None otherwise

        Raises:
            InvalidArgumentError: If token is None
            ConfigurationError: If no secret key is configured
        """
        if token is None:
            raise InvalidArgumentError("Token is required")
        if not token:
            return None

        with logfire.span(
            "token_service.validate_token", ignore_expiry=ignore_expiry
        ):
            try:
                claims = verify_token(
                    token, self.jwt_settings, ignore_expiry=ignore_expiry
                )
            except JWTError as e:
                logfire.debug("Access token rejected", error=str(e))
                return None

            logfire.info("Access token validated", user_id=str(claims.user_id))
            return claims

    def create_refresh_secret(self) -> str:
        """Generate a new opaque refresh secret."""
        return create_refresh_secret()
