"""Unit tests for ProfileService (points ledger)."""

from uuid import uuid4

import pytest

from acadly.domain.error import NotFoundError
from acadly.domain.repository import ProfileRepository
from acadly.domain.service import ProfileService
from acadly.domain.value import ProfileId
from tests.conftest import make_profile
from tests.harness import create_env_fixture

# Unit test fixture - everything mocked, no docker needed
unit_env = create_env_fixture()


class TestPointsLedger:
    """Tests for award_points and retract_points."""

    @pytest.mark.asyncio
    async def test_award_points_adds_to_balance(self, unit_env):
        """Awarding points should add to the existing balance."""
        # Arrange
        profile_service = await unit_env.get(ProfileService)
        profile = await profile_service.save(make_profile(points=4))

        # Act
        await profile_service.award_points(profile.id, 5)
        await profile_service.award_points(profile.id, 3)

        # Assert
        updated = await profile_service.get_by_id(profile.id)
        assert updated.points == 12

    @pytest.mark.asyncio
    async def test_retract_points_floors_at_zero(self, unit_env):
        """Retracting more than the balance should leave zero, not a negative."""
        # Arrange
        profile_service = await unit_env.get(ProfileService)
        profile = await profile_service.save(make_profile(points=0))

        # Act
        await profile_service.retract_points(profile.id, 1)

        # Assert
        updated = await profile_service.get_by_id(profile.id)
        assert updated.points == 0

    @pytest.mark.asyncio
    async def test_retract_points_subtracts_when_balance_allows(self, unit_env):
        """Retracting within the balance should subtract exactly."""
        # Arrange
        profile_service = await unit_env.get(ProfileService)
        profile = await profile_service.save(make_profile(points=6))

        # Act
        await profile_service.retract_points(profile.id, 1)

        # Assert
        updated = await profile_service.get_by_id(profile.id)
        assert updated.points == 5

    @pytest.mark.asyncio
    async def test_award_points_to_unknown_profile_changes_nothing(self, unit_env):
        """Awarding points to a missing profile should not create one."""
        # Arrange
        profile_service = await unit_env.get(ProfileService)
        profile_repo = await unit_env.get(ProfileRepository)

        # Act
        await profile_service.award_points(ProfileId(uuid4()), 5)

        # Assert
        assert await profile_repo.count() == 0


class TestLookup:
    """Tests for profile lookups."""

    @pytest.mark.asyncio
    async def test_get_by_id_raises_for_missing_profile(self, unit_env):
        """get_by_id should raise NotFoundError for unknown IDs."""
        profile_service = await unit_env.get(ProfileService)

        with pytest.raises(NotFoundError):
            await profile_service.get_by_id(ProfileId(uuid4()))

    @pytest.mark.asyncio
    async def test_leaderboard_orders_by_points(self, unit_env):
        """Leaderboard should list profiles by points, highest first."""
        # Arrange
        profile_service = await unit_env.get(ProfileService)
        low = await profile_service.save(make_profile("Low", points=3))
        high = await profile_service.save(make_profile("High", points=40))
        mid = await profile_service.save(make_profile("Mid", points=12))

        # Act
        leaders = await profile_service.get_leaderboard(2)

        # Assert
        assert [p.id for p in leaders] == [high.id, mid.id]
        assert low.id not in [p.id for p in leaders]

    @pytest.mark.asyncio
    async def test_get_names_skips_unknown_ids(self, unit_env):
        """get_names should resolve known IDs and ignore the rest."""
        profile_service = await unit_env.get(ProfileService)
        alice = await profile_service.save(make_profile("Alice"))

        names = await profile_service.get_names([alice.id, ProfileId(uuid4())])

        assert names == {alice.id: "Alice"}
