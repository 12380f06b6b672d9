"""Get current user use case."""

from pydantic import BaseModel

from blog.application.usecase.base import BaseUseCase, authenticate
from blog.domain.service import TokenService, UserService
from blog.domain.value import UserId


class GetCurrentUserRequest(BaseModel):
    """Get current user request."""

    token: str  # JWT access token


class GetCurrentUserResponse(BaseModel):
    """Get current user response."""

    user_id: str
    username: str
    email: str
    name: str
    role: str


class GetCurrentUserUseCase(BaseUseCase):
    """Use case for getting the current authenticated user."""

    def __init__(self, token_service: TokenService, user_service: UserService) -> None:
        """Initialize get current user use case.

        Args:
            token_service: Access token domain service
            user_service: User domain service
        """
        self.token_service = token_service
        self.user_service = user_service

    async def execute(self, request: GetCurrentUserRequest) -> GetCurrentUserResponse:
        """Execute get current user flow.

        Steps:
        1. Validate the access token
        2. Load the user summary (read through the cache)

        Raises:
            UnauthorizedError: If token is invalid or expired
            NotFoundError: If user not found
        """
        claims = authenticate(self.token_service, request.token)
        user = await self.user_service.get_user(UserId(claims.user_id))

        return GetCurrentUserResponse(
            user_id=str(user.id),
            username=user.username,
            email=user.email,
            name=user.name,
            role=user.role,
        )
