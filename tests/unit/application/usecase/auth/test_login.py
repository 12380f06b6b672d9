"""Unit tests for LoginUseCase, RegisterUseCase and RefreshTokenUseCase."""

from dishka import AsyncContainer
import pytest

from blog.application.usecase.auth import (
    LoginRequest,
    LoginUseCase,
    RefreshTokenRequest,
    RefreshTokenUseCase,
    RegisterRequest,
    RegisterUseCase,
)
from blog.domain.error import (
    ConflictError,
    InactiveAccountError,
    InvalidArgumentError,
    UnauthorizedError,
)
from blog.domain.repository import UserRepository
from blog.domain.service import TokenService
from tests.factories import make_user
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()


def _register_request(username: str = "alice", email: str | None = None):
    return RegisterRequest(
        username=username,
        email=email or f"{username}@example.com",
        name=username.title(),
        password="s3cret!",
    )


class TestLoginUseCase:
    """Tests for LoginUseCase."""

    @pytest.mark.asyncio
    async def test_login_returns_token_for_stored_user(self, unit_env: AsyncContainer):
        """Login should issue an access token naming the user."""
        # Arrange
        user_repo = await unit_env.get(UserRepository)
        token_service = await unit_env.get(TokenService)
        login = await unit_env.get(LoginUseCase)
        user = await user_repo.save(make_user("alice", password="s3cret!"))

        # Act
        response = await login.execute(
            LoginRequest(username="alice", password="s3cret!")
        )

        # Assert
        claims = token_service.validate_token(response.access_token)
        assert claims is not None
        assert claims.user_id == user.id
        assert claims.username == "alice"
        assert claims.role == "User"
        assert response.user.email == "alice@example.com"

    @pytest.mark.asyncio
    async def test_inactive_user_with_correct_password(self, unit_env: AsyncContainer):
        """A deactivated account is reported only after the password matched."""
        # Arrange
        user_repo = await unit_env.get(UserRepository)
        login = await unit_env.get(LoginUseCase)
        await user_repo.save(make_user("dormant", password="s3cret!", is_active=False))

        # Act & Assert
        with pytest.raises(InactiveAccountError):
            await login.execute(LoginRequest(username="dormant", password="s3cret!"))

    @pytest.mark.asyncio
    async def test_inactive_user_with_wrong_password(self, unit_env: AsyncContainer):
        """A wrong password on a deactivated account looks like any bad login."""
        user_repo = await unit_env.get(UserRepository)
        login = await unit_env.get(LoginUseCase)
        await user_repo.save(make_user("dormant", password="s3cret!", is_active=False))

        with pytest.raises(UnauthorizedError):
            await login.execute(LoginRequest(username="dormant", password="wrong!!"))


class TestRegisterUseCase:
    """Tests for RegisterUseCase."""

    @pytest.mark.asyncio
    async def test_duplicate_username_rejected(self, unit_env: AsyncContainer):
        register = await unit_env.get(RegisterUseCase)
        await register.execute(_register_request("alice"))

        with pytest.raises(ConflictError, match="Username"):
            await register.execute(
                _register_request("alice", email="other@example.com")
            )

    @pytest.mark.asyncio
    async def test_duplicate_email_rejected(self, unit_env: AsyncContainer):
        register = await unit_env.get(RegisterUseCase)
        await register.execute(_register_request("alice"))

        with pytest.raises(ConflictError, match="Email"):
            await register.execute(
                _register_request("alicia", email="alice@example.com")
            )

    @pytest.mark.asyncio
    async def test_username_conflict_reported_before_email(
        self, unit_env: AsyncContainer
    ):
        register = await unit_env.get(RegisterUseCase)
        await register.execute(_register_request("alice"))

        with pytest.raises(ConflictError, match="Username"):
            await register.execute(_register_request("alice"))

    @pytest.mark.asyncio
    async def test_malformed_username_rejected(self, unit_env: AsyncContainer):
        register = await unit_env.get(RegisterUseCase)

        with pytest.raises(InvalidArgumentError):
            await register.execute(_register_request("a b"))

    @pytest.mark.asyncio
    async def test_password_is_stored_hashed(self, unit_env: AsyncContainer):
        # Arrange
        register = await unit_env.get(RegisterUseCase)
        user_repo = await unit_env.get(UserRepository)

        # Act
        await register.execute(_register_request("alice"))

        # Assert
        stored = await user_repo.find_by_username("alice")
        assert stored is not None
        assert stored.password_hash != "s3cret!"
        assert stored.password_hash.startswith("$2")


class TestRefreshTokenUseCase:
    """Tests for RefreshTokenUseCase with a previous access token."""

    @pytest.mark.asyncio
    async def test_refresh_with_own_access_token(self, unit_env: AsyncContainer):
        register = await unit_env.get(RegisterUseCase)
        refresh = await unit_env.get(RefreshTokenUseCase)
        session = await register.execute(_register_request("alice"))

        response = await refresh.execute(
            RefreshTokenRequest(
                refresh_token=session.refresh_token,
                access_token=session.access_token,
            )
        )

        assert response.user.id == session.user.id

    @pytest.mark.asyncio
    async def test_refresh_with_someone_elses_access_token(
        self, unit_env: AsyncContainer
    ):
        # Arrange
        register = await unit_env.get(RegisterUseCase)
        refresh = await unit_env.get(RefreshTokenUseCase)
        alice = await register.execute(_register_request("alice"))
        bob = await register.execute(_register_request("bob"))

        # Act & Assert
        with pytest.raises(UnauthorizedError):
            await refresh.execute(
                RefreshTokenRequest(
                    refresh_token=alice.refresh_token,
                    access_token=bob.access_token,
                )
            )

    @pytest.mark.asyncio
    async def test_refresh_for_deactivated_owner(self, unit_env: AsyncContainer):
        # Arrange
        register = await unit_env.get(RegisterUseCase)
        refresh = await unit_env.get(RefreshTokenUseCase)
        user_repo = await unit_env.get(UserRepository)
        session = await register.execute(_register_request("alice"))
        user = await user_repo.find_by_username("alice")
        await user_repo.save(user.model_copy(update={"is_active": False}))

        # Act & Assert
        with pytest.raises(UnauthorizedError):
            await refresh.execute(
                RefreshTokenRequest(refresh_token=session.refresh_token)
            )
