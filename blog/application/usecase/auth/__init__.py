"""Authentication use cases."""

from .get_current_user import (
    GetCurrentUserRequest,
    GetCurrentUserResponse,
    GetCurrentUserUseCase,
)
from .login import LoginRequest, LoginUseCase, TokenResponse
from .refresh_token import RefreshTokenRequest, RefreshTokenUseCase
from .register import RegisterRequest, RegisterUseCase
from .revoke_token import RevokeTokenRequest, RevokeTokenUseCase

__all__ = [
    "GetCurrentUserRequest",
    "GetCurrentUserResponse",
    "GetCurrentUserUseCase",
    "LoginRequest",
    "LoginUseCase",
    "RefreshTokenRequest",
    "RefreshTokenUseCase",
    "RegisterRequest",
    "RegisterUseCase",
    "RevokeTokenRequest",
    "RevokeTokenUseCase",
    "TokenResponse",
]
