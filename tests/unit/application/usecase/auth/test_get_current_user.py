"""Unit tests for GetCurrentUserUseCase."""

import pytest

from blog.application.usecase.auth import (
    GetCurrentUserRequest,
    GetCurrentUserUseCase,
    RegisterRequest,
    RegisterUseCase,
)
from blog.domain.error import UnauthorizedError
from tests.harness import create_env_fixture

unit_env = create_env_fixture()


class TestGetCurrentUserUseCase:
    """Tests for GetCurrentUserUseCase."""

    @pytest.mark.asyncio
    async def test_returns_user_for_valid_token(self, unit_env):
        # Arrange
        register = await unit_env.get(RegisterUseCase)
        use_case = await unit_env.get(GetCurrentUserUseCase)
        tokens = await register.execute(
            RegisterRequest(
                username="alice",
                email="alice@example.com",
                name="Alice",
                password="s3cret!",
            )
        )

        # Act
        response = await use_case.execute(
            GetCurrentUserRequest(token=tokens.access_token)
        )

        # Assert
        assert response.user_id == str(tokens.user.id)
        assert response.username == "alice"
        assert response.name == "Alice"
        assert response.role == "User"

    @pytest.mark.asyncio
    async def test_invalid_token_unauthorized(self, unit_env):
        use_case = await unit_env.get(GetCurrentUserUseCase)

        with pytest.raises(UnauthorizedError):
            await use_case.execute(GetCurrentUserRequest(token="garbage"))
