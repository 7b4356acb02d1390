"""Unit tests for the academic calendar use cases."""

from datetime import date

import pytest

from acadly.application.usecase.academic_event.academic_events import (
    CreateAcademicEventRequest,
    CreateAcademicEventUseCase,
    DeleteAcademicEventRequest,
    DeleteAcademicEventUseCase,
    ListAcademicEventsRequest,
    ListAcademicEventsUseCase,
)
from acadly.domain.error import NotAuthorizedError
from acadly.domain.repository import AcademicEventRepository, ProfileRepository
from acadly.domain.value import AcademicEventCategory, Role
from tests.conftest import make_profile
from tests.harness import create_env_fixture

# Unit test fixture
unit_env = create_env_fixture()


def _request(creator_id: str) -> CreateAcademicEventRequest:
    return CreateAcademicEventRequest(
        title="Convocation",
        start_date=date(2025, 6, 20),
        category=AcademicEventCategory.CULTURAL,
        creator_id=creator_id,
    )


class TestCreateAcademicEventUseCase:
    """Tests for publishing academic events."""

    @pytest.mark.asyncio
    @pytest.mark.parametrize("role", [Role.FACULTY, Role.HOD, Role.DEAN])
    async def test_non_superadmin_is_rejected(self, unit_env, role):
        """Only superadmins may publish; nothing is stored otherwise."""
        # Arrange
        actor = await (await unit_env.get(ProfileRepository)).save(
            make_profile(role=role)
        )
        create_event = await unit_env.get(CreateAcademicEventUseCase)
        event_repo = await unit_env.get(AcademicEventRepository)

        # Act & Assert
        with pytest.raises(NotAuthorizedError):
            await create_event.execute(_request(str(actor.id)))

        assert await event_repo.search() == []

    @pytest.mark.asyncio
    async def test_superadmin_event_is_listed_with_creator_name(self, unit_env):
        # Arrange
        admin = await (await unit_env.get(ProfileRepository)).save(
            make_profile("Registrar", role=Role.SUPERADMIN)
        )
        create_event = await unit_env.get(CreateAcademicEventUseCase)
        list_events = await unit_env.get(ListAcademicEventsUseCase)

        # Act
        created = await create_event.execute(_request(str(admin.id)))
        listed = await list_events.execute(ListAcademicEventsRequest(month="2025-06"))

        # Assert
        assert created.creator_name == "Registrar"
        assert [e.id for e in listed] == [created.id]
        assert listed[0].creator_name == "Registrar"


class TestDeleteAcademicEventUseCase:
    """Tests for removing academic events."""

    @pytest.mark.asyncio
    async def test_dean_cannot_delete(self, unit_env):
        # Arrange
        profile_repo = await unit_env.get(ProfileRepository)
        admin = await profile_repo.save(make_profile(role=Role.SUPERADMIN))
        dean = await profile_repo.save(make_profile(role=Role.DEAN))
        created = await (await unit_env.get(CreateAcademicEventUseCase)).execute(
            _request(str(admin.id))
        )
        delete_event = await unit_env.get(DeleteAcademicEventUseCase)

        # Act & Assert
        with pytest.raises(NotAuthorizedError):
            await delete_event.execute(
                DeleteAcademicEventRequest(event_id=created.id, actor_id=str(dean.id))
            )

        assert len(await (await unit_env.get(AcademicEventRepository)).search()) == 1

    @pytest.mark.asyncio
    async def test_superadmin_deletes_event(self, unit_env):
        # Arrange
        admin = await (await unit_env.get(ProfileRepository)).save(
            make_profile(role=Role.SUPERADMIN)
        )
        created = await (await unit_env.get(CreateAcademicEventUseCase)).execute(
            _request(str(admin.id))
        )
        delete_event = await unit_env.get(DeleteAcademicEventUseCase)

        # Act
        result = await delete_event.execute(
            DeleteAcademicEventRequest(event_id=created.id, actor_id=str(admin.id))
        )

        # Assert
        assert result.message == "Event deleted"
        assert await (await unit_env.get(AcademicEventRepository)).search() == []
