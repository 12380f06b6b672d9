"""Login use case."""

from datetime import datetime

from pydantic import BaseModel

from blog.application.usecase.base import BaseUseCase
from blog.domain.service import AuthService
from blog.domain.value import AuthTokens, UserSummary


class LoginRequest(BaseModel):
    """Login request."""

    username: str
    password: str


class TokenResponse(BaseModel):
    """Token pair issued by login, registration and refresh."""

    access_token: str
    refresh_token: str
    refresh_token_expires_at: datetime
    token_type: str = "Bearer"
    user: UserSummary

    @classmethod
    def from_tokens(cls, tokens: AuthTokens) -> "TokenResponse":
        return cls(
            access_token=tokens.access_token,
            refresh_token=tokens.refresh_token,
            refresh_token_expires_at=tokens.refresh_token_expires_at,
            user=tokens.user,
        )


class LoginUseCase(BaseUseCase):
    """Use case for signing in with username and password."""

    def __init__(self, auth_service: AuthService) -> None:
        """Initialize login use case.

        Args:
            auth_service: Authentication domain service
        """
        self.auth_service = auth_service

    async def execute(self, request: LoginRequest) -> TokenResponse:
        """Execute login flow.

        Raises:
            UnauthorizedError: If the credentials do not match
            InactiveAccountError: If the account is deactivated
        """
        tokens = await self.auth_service.login(request.username, request.password)
        return TokenResponse.from_tokens(tokens)
