"""Unit tests for AcademicEventService."""

from datetime import date

import pytest

from acadly.domain.error import ValidationError
from acadly.domain.repository import NotificationRepository, ProfileRepository
from acadly.domain.service import AcademicEventService
from acadly.domain.service.academic_event_service import month_bounds
from acadly.domain.value import AcademicEventCategory, Role
from tests.conftest import make_profile
from tests.harness import create_env_fixture

# Unit test fixture - everything mocked, no docker needed
unit_env = create_env_fixture()


class TestMonthBounds:
    """Tests for month filter parsing."""

    def test_month_bounds_covers_whole_month(self):
        assert month_bounds("2024-02") == (date(2024, 2, 1), date(2024, 2, 29))

    def test_month_bounds_handles_december(self):
        assert month_bounds("2025-12") == (date(2025, 12, 1), date(2025, 12, 31))

    @pytest.mark.parametrize("month", ["2025-13", "March", "2025/03", ""])
    def test_month_bounds_rejects_bad_format(self, month):
        with pytest.raises(ValidationError):
            month_bounds(month)


class TestCreateEvent:
    """Tests for publishing academic events."""

    @pytest.mark.asyncio
    async def test_fan_out_notifies_everyone_except_creator(self, unit_env):
        """Every profile except the creator gets exactly one notification."""
        # Arrange
        service = await unit_env.get(AcademicEventService)
        profile_repo = await unit_env.get(ProfileRepository)
        notification_repo = await unit_env.get(NotificationRepository)
        admin = await profile_repo.save(make_profile("Admin", role=Role.SUPERADMIN))
        others = [
            await profile_repo.save(make_profile(f"Faculty {i}")) for i in range(3)
        ]

        # Act
        event = await service.create_event(
            admin,
            "Mid-term exams",
            date(2025, 3, 10),
            AcademicEventCategory.EXAM,
            end_date=date(2025, 3, 15),
        )

        # Assert
        assert event.created_by == admin.id
        assert await notification_repo.count_unread(admin.id) == 0
        for profile in others:
            notifications = await notification_repo.find_by_user(profile.id, 50)
            assert len(notifications) == 1
            assert notifications[0].title == "New Academic Event"
            assert notifications[0].message == (
                'A new academic event "Mid-term exams" has been added.'
            )


class TestSearch:
    """Tests for month and title filtering."""

    @pytest.mark.asyncio
    async def test_search_filters_by_month_and_title(self, unit_env):
        """Month and title filters combine; results are ordered by start date."""
        # Arrange
        service = await unit_env.get(AcademicEventService)
        admin = await (await unit_env.get(ProfileRepository)).save(
            make_profile(role=Role.SUPERADMIN)
        )
        late = await service.create_event(
            admin, "Annual Sports Meet", date(2025, 3, 28), AcademicEventCategory.SPORTS
        )
        early = await service.create_event(
            admin, "Sports trials", date(2025, 3, 2), AcademicEventCategory.SPORTS
        )
        await service.create_event(
            admin, "Sports day", date(2025, 4, 1), AcademicEventCategory.SPORTS
        )
        await service.create_event(
            admin, "Faculty meeting", date(2025, 3, 5), AcademicEventCategory.MEETING
        )

        # Act
        events = await service.search(month="2025-03", search="sports")

        # Assert
        assert [e.id for e in events] == [early.id, late.id]

    @pytest.mark.asyncio
    async def test_search_rejects_malformed_month(self, unit_env):
        service = await unit_env.get(AcademicEventService)

        with pytest.raises(ValidationError):
            await service.search(month="03-2025")
