"""Unit tests for the personal calendar use cases."""

from datetime import date

import pytest

from acadly.application.usecase.calendar.faculty_calendar import (
    CreateFacultyEventRequest,
    CreateFacultyEventUseCase,
    DeleteCalendarUseCase,
    DeleteFacultyEventUseCase,
    DeleteOwnedItemRequest,
    GetFacultyCalendarUseCase,
    UploadCalendarRequest,
    UploadCalendarUseCase,
)
from acadly.domain.error import ValidationError
from acadly.domain.repository import ProfileRepository
from tests.conftest import make_profile
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()


class TestUploadCalendar:
    """Tests for calendar image uploads."""

    @pytest.mark.asyncio
    @pytest.mark.parametrize("image", [None, ""])
    async def test_missing_image_is_rejected(self, unit_env, image):
        owner = await (await unit_env.get(ProfileRepository)).save(make_profile())
        upload = await unit_env.get(UploadCalendarUseCase)

        with pytest.raises(ValidationError):
            await upload.execute(
                UploadCalendarRequest(image=image, faculty_id=str(owner.id))
            )

    @pytest.mark.asyncio
    async def test_uploaded_image_is_visible_only_to_owner(self, unit_env):
        # Arrange
        profile_repo = await unit_env.get(ProfileRepository)
        owner = await profile_repo.save(make_profile("Owner"))
        other = await profile_repo.save(make_profile("Other"))
        upload = await unit_env.get(UploadCalendarUseCase)
        get_calendar = await unit_env.get(GetFacultyCalendarUseCase)

        # Act
        calendar = await upload.execute(
            UploadCalendarRequest(
                image="data:image/png;base64,iVBORw0KGgo=", faculty_id=str(owner.id)
            )
        )

        # Assert
        mine = await get_calendar.execute(str(owner.id))
        theirs = await get_calendar.execute(str(other.id))
        assert [c.id for c in mine.calendars] == [calendar.id]
        assert theirs.calendars == []

    @pytest.mark.asyncio
    async def test_delete_by_non_owner_leaves_calendar(self, unit_env):
        """Deleting someone else's calendar succeeds quietly but removes nothing."""
        # Arrange
        profile_repo = await unit_env.get(ProfileRepository)
        owner = await profile_repo.save(make_profile("Owner"))
        other = await profile_repo.save(make_profile("Other"))
        calendar = await (await unit_env.get(UploadCalendarUseCase)).execute(
            UploadCalendarRequest(image="data:image/png;base64,AA==", faculty_id=str(owner.id))
        )
        delete_calendar = await unit_env.get(DeleteCalendarUseCase)

        # Act
        result = await delete_calendar.execute(
            DeleteOwnedItemRequest(item_id=calendar.id, faculty_id=str(other.id))
        )

        # Assert
        assert result.message == "Calendar deleted"
        remaining = await (await unit_env.get(GetFacultyCalendarUseCase)).execute(
            str(owner.id)
        )
        assert len(remaining.calendars) == 1


class TestFacultyEvents:
    """Tests for personal events."""

    @pytest.mark.asyncio
    async def test_events_are_listed_by_date_and_owner_can_delete(self, unit_env):
        # Arrange
        owner = await (await unit_env.get(ProfileRepository)).save(make_profile())
        create_event = await unit_env.get(CreateFacultyEventUseCase)
        later = await create_event.execute(
            CreateFacultyEventRequest(
                title="Thesis defence",
                event_date=date(2025, 5, 20),
                reminder_date=date(2025, 5, 18),
                faculty_id=str(owner.id),
            )
        )
        sooner = await create_event.execute(
            CreateFacultyEventRequest(
                title="Grant deadline",
                event_date=date(2025, 5, 2),
                faculty_id=str(owner.id),
            )
        )
        get_calendar = await unit_env.get(GetFacultyCalendarUseCase)

        # Act
        before = await get_calendar.execute(str(owner.id))
        await (await unit_env.get(DeleteFacultyEventUseCase)).execute(
            DeleteOwnedItemRequest(item_id=sooner.id, faculty_id=str(owner.id))
        )
        after = await get_calendar.execute(str(owner.id))

        # Assert
        assert [e.id for e in before.events] == [sooner.id, later.id]
        assert [e.id for e in after.events] == [later.id]
