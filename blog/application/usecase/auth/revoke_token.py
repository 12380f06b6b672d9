"""Revoke token use case."""

from pydantic import BaseModel

from blog.application.usecase.base import BaseUseCase
from blog.domain.service import AuthService


class RevokeTokenRequest(BaseModel):
    """Revoke token request."""

    refresh_token: str


class RevokeTokenUseCase(BaseUseCase):
    """Use case for signing out a refresh token. Unknown tokens are ignored."""

    def __init__(self, auth_service: AuthService) -> None:
        self.auth_service = auth_service

    async def execute(self, request: RevokeTokenRequest) -> None:
        await self.auth_service.revoke(request.refresh_token)
