"""Refresh token use case."""

from pydantic import BaseModel

from blog.application.usecase.auth.login import TokenResponse
from blog.application.usecase.base import BaseUseCase
from blog.domain.service import AuthService


class RefreshTokenRequest(BaseModel):
    """Refresh token request."""

    refresh_token: str
    access_token: str | None = None  # Previous access token, may be expired


class RefreshTokenUseCase(BaseUseCase):
    """Use case for exchanging a refresh token for a new token pair."""

    def __init__(self, auth_service: AuthService) -> None:
        self.auth_service = auth_service

    async def execute(self, request: RefreshTokenRequest) -> TokenResponse:
        """Execute refresh flow.

        Raises:
            UnauthorizedError: If the refresh token cannot be used
        """
        tokens = await self.auth_service.refresh(
            request.refresh_token, access_token=request.access_token
        )
        return TokenResponse.from_tokens(tokens)
