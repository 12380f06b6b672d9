"""Register use case."""

from pydantic import BaseModel

from blog.application.usecase.auth.login import TokenResponse
from blog.application.usecase.base import BaseUseCase
from blog.domain.service import AuthService


class RegisterRequest(BaseModel):
    """Register request."""

    username: str
    email: str
    name: str
    password: str


class RegisterUseCase(BaseUseCase):
    """Use case for creating an account and signing it in."""

    def __init__(self, auth_service: AuthService) -> None:
        """Initialize register use case.

        Args:
            auth_service: Authentication domain service
        """
        self.auth_service = auth_service

    async def execute(self, request: RegisterRequest) -> TokenResponse:
        """Execute registration flow.

        Raises:
            InvalidArgumentError: If a field is malformed
            ConflictError: If the username or email is already taken
        """
        tokens = await self.auth_service.register(
            username=request.username,
            email=request.email,
            name=request.name,
            password=request.password,
        )
        return TokenResponse.from_tokens(tokens)
