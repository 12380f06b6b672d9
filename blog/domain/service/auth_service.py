"""Authentication domain service."""

from datetime import timedelta
from uuid import uuid4

import logfire
from pydantic import ValidationError

from blog.config import AuthSettings
from blog.domain.error import (
    ConflictError,
    InactiveAccountError,
    InvalidArgumentError,
    UnauthorizedError,
)
from blog.domain.model import RefreshToken, User
from blog.domain.model.common import utc_now
from blog.domain.repository import RefreshTokenRepository, UserRepository
from blog.domain.value import AuthTokens, RefreshTokenId, UserId, UserRole
from blog.domain.value.types import Username
from blog.util.password import (
    MAX_PASSWORD_BYTES,
    dummy_password_hash,
    hash_password,
    verify_password,
)

from .base import Service
from .token_service import TokenService

INVALID_CREDENTIALS_MESSAGE = "Invalid username or password."
INVALID_REFRESH_TOKEN_MESSAGE = "Invalid or expired refresh token."

MIN_PASSWORD_LENGTH = 6


class AuthService(Service):
    """Registration, login and the refresh token lifecycle.

    Sessions move from anonymous to authenticated (access and refresh
    issued), may be refreshed any number of times, and end when the client
    revokes its refresh token. Refreshing never revokes the old record.
    """

    def __init__(
        self,
        user_repository: UserRepository,
        refresh_token_repository: RefreshTokenRepository,
        token_service: TokenService,
        auth_settings: AuthSettings,
    ) -> None:
        """Initialize auth service.

        Args:
            user_repository: User repository
            refresh_token_repository: Refresh token repository
            token_service: Access token service
            auth_settings: Authentication settings
        """
        self.user_repository = user_repository
        self.refresh_token_repository = refresh_token_repository
        self.token_service = token_service
        self.auth_settings = auth_settings

    async def register(
        self, username: str, email: str, name: str, password: str
    ) -> AuthTokens:
        """Create an account and sign it in.

        Args:
            username: Desired login name
            email: Email address
            name: Display name
            password: Plaintext password (hashed before storage)

        Returns:
            Access token, refresh token and user summary

        Raises:
            InvalidArgumentError: If any field is malformed
            ConflictError: If the username or email is taken (username wins)
        """
        with logfire.span("auth_service.register", username=username):
            validated_username = self._validate_registration(
                username, email, name, password
            )

            if await self.user_repository.find_by_username(username):
                logfire.warn("Registration rejected: username taken", username=username)
                raise ConflictError("Username already exists.")
            if await self.user_repository.find_by_email(email):
                logfire.warn("Registration rejected: email taken", username=username)
                raise ConflictError("Email already exists.")

            now = utc_now()
            user = User(
                id=UserId(uuid4()),
                username=validated_username,
                email=email,
                name=name,
                password_hash=hash_password(
                    password, rounds=self.auth_settings.password_hash_rounds
                ),
                role=UserRole.USER,
                is_active=True,
                created_at=now,
                updated_at=now,
            )
            saved = await self.user_repository.save(user)
            logfire.info("User registered", user_id=str(saved.id), username=username)

            return await self._issue_tokens(saved)

    async def login(self, username: str, password: str) -> AuthTokens:
        """Authenticate with username and password.

        Unknown usernames and wrong passwords fail with the same message, and
        both pay for one bcrypt check. The inactive-account check only runs
        once the password verified.

        Raises:
            UnauthorizedError: If the credentials do not match
            InactiveAccountError: If the account is deactivated
        """
        with logfire.span("auth_service.login", username=username):
            user = await self.user_repository.find_by_username(username)
            if user is None:
                # Same bcrypt cost as a real check
                verify_password(
                    password,
                    dummy_password_hash(self.auth_settings.password_hash_rounds),
                )
            if user is None or not verify_password(password, user.password_hash):
                logfire.warn("Login failed", username=username)
                raise UnauthorizedError(INVALID_CREDENTIALS_MESSAGE)

            if not user.is_active:
                logfire.warn("Login rejected: account inactive", user_id=str(user.id))
                raise InactiveAccountError()

            logfire.info("User logged in", user_id=str(user.id))
            return await self._issue_tokens(user)

    async def refresh(
        self, refresh_token: str, access_token: str | None = None
    ) -> AuthTokens:
        """Exchange a valid refresh token for a new token pair.

        Args:
            refresh_token: Refresh secret previously issued
            access_token: Optional previous access token; may be expired but
                must belong to the refresh token's owner

        Returns:
            New access token, new refresh token and user summary

        Raises:
            UnauthorizedError: If the refresh token is unknown, expired or
                revoked, the owner is missing or inactive, or the access
                token belongs to someone else
        """
        with logfire.span("auth_service.refresh"):
            record = await self.refresh_token_repository.find_by_token(refresh_token)
            if record is None or not record.is_valid:
                logfire.warn(
                    "Refresh rejected: token unknown, expired or revoked",
                    found=record is not None,
                )
                raise UnauthorizedError(INVALID_REFRESH_TOKEN_MESSAGE)

            user = record.user
            if user is None or not user.is_active:
                logfire.warn(
                    "Refresh rejected: owner missing or inactive",
                    user_id=str(record.user_id),
                )
                raise UnauthorizedError(INVALID_REFRESH_TOKEN_MESSAGE)

            if access_token is not None:
                claims = self.token_service.validate_token(
                    access_token, ignore_expiry=True
                )
                if claims is None or claims.user_id != user.id:
                    logfire.warn(
                        "Refresh rejected: access token does not match owner",
                        user_id=str(user.id),
                    )
                    raise UnauthorizedError(INVALID_REFRESH_TOKEN_MESSAGE)

            logfire.info("Tokens refreshed", user_id=str(user.id))
            return await self._issue_tokens(user)

    async def revoke(self, refresh_token: str) -> None:
        """Revoke a refresh token. Unknown or already revoked tokens are ignored."""
        with logfire.span("auth_service.revoke"):
            if not refresh_token:
                return
            found = await self.refresh_token_repository.mark_revoked(
                refresh_token, utc_now()
            )
            logfire.info("Refresh token revocation processed", found=found)

    async def _issue_tokens(self, user: User) -> AuthTokens:
        access_token = self.token_service.create_access_token(
            user.id, str(user.username), user.role.value
        )

        now = utc_now()
        record = RefreshToken(
            id=RefreshTokenId(uuid4()),
            token=self.token_service.create_refresh_secret(),
            user_id=user.id,
            created_at=now,
            expires_at=now + timedelta(days=self.auth_settings.refresh_token_days),
        )
        saved = await self.refresh_token_repository.save(record)

        return AuthTokens(
            access_token=access_token,
            refresh_token=saved.token,
            refresh_token_expires_at=saved.expires_at,
            user=user.to_summary(),
        )

    @staticmethod
    def _validate_registration(
        username: str, email: str, name: str, password: str
    ) -> Username:
        try:
            validated = Username(username)
        except ValidationError:
            raise InvalidArgumentError(
                "Username must be 3-100 characters of letters, digits, "
                "underscores or hyphens"
            )
        if not email or "@" not in email or len(email) > 255:
            raise InvalidArgumentError("A valid email address is required")
        if not name or not name.strip() or len(name) > 200:
            raise InvalidArgumentError("Name must be 1-200 characters")
        if not password or len(password) < MIN_PASSWORD_LENGTH:
            raise InvalidArgumentError(
                f"Password must be at least {MIN_PASSWORD_LENGTH} characters"
            )
        if len(password.encode("utf-8")) > MAX_PASSWORD_BYTES:
            raise InvalidArgumentError(
                f"Password must not exceed {MAX_PASSWORD_BYTES} bytes"
            )
        return validated
