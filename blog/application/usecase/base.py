"""Base use case."""

from abc import ABC, abstractmethod
from typing import Any

import logfire

from blog.domain.error import UnauthorizedError
from blog.domain.service import TokenService
from blog.util.jwt import AccessTokenClaims

INVALID_ACCESS_TOKEN_MESSAGE = "Invalid or expired access token."


class BaseUseCase(ABC):
    """Base use case for orchestrating domain services."""

    @abstractmethod
    async def execute(self, request: Any) -> Any:
        pass


def authenticate(token_service: TokenService, access_token: str) -> AccessTokenClaims:
    """Resolve the caller of an authenticated use case.

    Raises:
        UnauthorizedError: If the access token is missing, invalid or expired
    """
    claims = token_service.validate_token(access_token)
    if claims is None:
        logfire.warn("Rejected request with unusable access token")
        raise UnauthorizedError(INVALID_ACCESS_TOKEN_MESSAGE)
    return claims
