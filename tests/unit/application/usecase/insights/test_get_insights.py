"""Unit tests for GetInsightsUseCase."""

import pytest

from acadly.application.usecase.insights.get_insights import (
    GetInsightsRequest,
    GetInsightsUseCase,
)
from acadly.domain.error import NotAuthorizedError
from acadly.domain.repository import ProfileRepository
from acadly.domain.value import Role
from tests.conftest import make_profile
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()


class TestGetInsightsUseCase:
    """Tests for GetInsightsUseCase."""

    @pytest.mark.asyncio
    @pytest.mark.parametrize("role", [Role.FACULTY, Role.HOD])
    async def test_faculty_and_hod_are_rejected(self, unit_env, role):
        # Arrange
        profile = await (await unit_env.get(ProfileRepository)).save(
            make_profile(role=role)
        )
        get_insights = await unit_env.get(GetInsightsUseCase)

        # Act & Assert
        with pytest.raises(NotAuthorizedError):
            await get_insights.execute(GetInsightsRequest(user_id=str(profile.id)))

    @pytest.mark.asyncio
    async def test_dean_gets_fallback_without_api_key(self, unit_env):
        """The mock generator is unconfigured, so the fallback comes back."""
        # Arrange
        dean = await (await unit_env.get(ProfileRepository)).save(
            make_profile("Dr. Dean", role=Role.DEAN, points=8)
        )
        get_insights = await unit_env.get(GetInsightsUseCase)

        # Act
        result = await get_insights.execute(GetInsightsRequest(user_id=str(dean.id)))

        # Assert
        assert result.available is False
        assert result.insights is None
        assert result.fallback["stats"]["total_users"] == 1
        assert result.fallback["top_faculty"] == [
            {"full_name": "Dr. Dean", "points": 8}
        ]
