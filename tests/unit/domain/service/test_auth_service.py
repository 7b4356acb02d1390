"""Unit tests for AuthService."""

import pytest

from acadly.domain.error import AuthenticationError, ConflictError
from acadly.domain.service import AuthService
from acadly.domain.value import Role
from tests.conftest import make_profile
from tests.harness import create_env_fixture

# Unit test fixture - everything mocked, no docker needed
unit_env = create_env_fixture()


class TestRegister:
    """Tests for AuthService.register."""

    @pytest.mark.asyncio
    async def test_register_hashes_password_and_starts_at_zero(self, unit_env):
        # Arrange
        auth_service = await unit_env.get(AuthService)

        # Act
        profile = await auth_service.register(
            "Dr. New", "new@acadly.edu", "s3cret-pass", Role.FACULTY
        )

        # Assert
        assert profile.points == 0
        assert profile.password_hash != "s3cret-pass"
        assert profile.role == Role.FACULTY

    @pytest.mark.asyncio
    async def test_register_duplicate_email_conflicts(self, unit_env):
        """A second registration with the same email is rejected."""
        # Arrange
        auth_service = await unit_env.get(AuthService)
        await auth_service.register("Dr. One", "dup@acadly.edu", "password1", Role.HOD)

        # Act & Assert
        with pytest.raises(ConflictError):
            await auth_service.register(
                "Dr. Two", "dup@acadly.edu", "password2", Role.FACULTY
            )


class TestAuthenticate:
    """Tests for credential checks."""

    @pytest.mark.asyncio
    async def test_correct_password_returns_profile(self, unit_env):
        auth_service = await unit_env.get(AuthService)
        registered = await auth_service.register(
            "Dr. Login", "login@acadly.edu", "right-password", Role.DEAN
        )

        profile = await auth_service.authenticate("login@acadly.edu", "right-password")

        assert profile.id == registered.id

    @pytest.mark.asyncio
    async def test_wrong_password_and_unknown_email_look_the_same(self, unit_env):
        """Both failures raise the same generic error."""
        # Arrange
        auth_service = await unit_env.get(AuthService)
        await auth_service.register(
            "Dr. Login", "login@acadly.edu", "right-password", Role.FACULTY
        )

        # Act
        with pytest.raises(AuthenticationError) as wrong_password:
            await auth_service.authenticate("login@acadly.edu", "wrong-password")
        with pytest.raises(AuthenticationError) as unknown_email:
            await auth_service.authenticate("nobody@acadly.edu", "right-password")

        # Assert
        assert str(wrong_password.value) == "Invalid email or password"
        assert str(unknown_email.value) == str(wrong_password.value)


class TestResolveSession:
    """Tests for turning a session token back into a profile."""

    @pytest.mark.asyncio
    async def test_issued_token_resolves_to_stored_profile(self, unit_env):
        auth_service = await unit_env.get(AuthService)
        registered = await auth_service.register(
            "Dr. Session", "session@acadly.edu", "password", Role.FACULTY
        )

        profile = await auth_service.resolve_session(
            auth_service.issue_token(registered)
        )

        assert profile.id == registered.id

    @pytest.mark.asyncio
    @pytest.mark.parametrize("token", [None, "", "not-a-jwt"])
    async def test_missing_or_garbage_token_is_rejected(self, unit_env, token):
        auth_service = await unit_env.get(AuthService)

        with pytest.raises(AuthenticationError):
            await auth_service.resolve_session(token)

    @pytest.mark.asyncio
    async def test_token_for_deleted_profile_is_rejected(self, unit_env):
        """A valid token whose profile is gone no longer authenticates."""
        auth_service = await unit_env.get(AuthService)
        never_saved = make_profile()

        with pytest.raises(AuthenticationError) as exc_info:
            await auth_service.resolve_session(auth_service.issue_token(never_saved))

        assert str(exc_info.value) == "Profile no longer exists"
