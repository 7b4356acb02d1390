"""Profile domain service and points ledger."""

from typing import Sequence

import logfire

from acadly.domain.error import NotFoundError
from acadly.domain.model import Profile
from acadly.domain.repository import ProfileRepository
from acadly.domain.value import ProfileId

from .base import Service


class ProfileService(Service):
    """Domain service for profile operations.

    Owns the points ledger: every change to a profile's points goes through
    award_points or retract_points.
    """

    def __init__(self, profile_repository: ProfileRepository) -> None:
        """Initialize profile service.

        Args:
            profile_repository: Profile repository
        """
        self.profile_repository = profile_repository

    async def get_by_id(self, profile_id: ProfileId) -> Profile:
        """Get profile by ID.

        Args:
            profile_id: Profile ID

        Returns:
            Profile entity

        Raises:
            NotFoundError: If profile not found
        """
        with logfire.span("profile_service.get_by_id", profile_id=str(profile_id)):
            profile = await self.profile_repository.find_by_id(profile_id)
            if not profile:
                logfire.warn("Profile not found", profile_id=str(profile_id))
                raise NotFoundError("Profile", str(profile_id))
            return profile

    async def find_by_id(self, profile_id: ProfileId) -> Profile | None:
        return await self.profile_repository.find_by_id(profile_id)

    async def get_by_email(self, email: str) -> Profile | None:
        """Get profile by email.

        Args:
            email: Profile email

        Returns:
            Profile if found, None otherwise
        """
        with logfire.span("profile_service.get_by_email", email=email):
            return await self.profile_repository.find_by_email(email)

    async def get_names(self, profile_ids: Sequence[ProfileId]) -> dict[ProfileId, str]:
        """Map profile IDs to full names (batch query).

        Args:
            profile_ids: IDs to resolve; duplicates are fine

        Returns:
            Mapping of profile ID to full name for profiles that exist
        """
        unique_ids = list(dict.fromkeys(profile_ids))
        if not unique_ids:
            return {}
        profiles = await self.profile_repository.find_by_ids(unique_ids)
        return {profile.id: profile.full_name for profile in profiles}

    async def save(self, profile: Profile) -> Profile:
        """Save a new profile.

        Args:
            profile: Profile to save

        Returns:
            Saved profile
        """
        with logfire.span("profile_service.save", profile_id=str(profile.id)):
            saved = await self.profile_repository.save(profile)
            logfire.info("Profile saved", profile_id=str(saved.id))
            return saved

    async def award_points(self, profile_id: ProfileId, amount: int) -> None:
        """Atomically add points to a profile.

        Applied as a relative update so concurrent awards never overwrite
        each other.

        Args:
            profile_id: Beneficiary profile
            amount: Points to add
        """
        with logfire.span(
            "profile_service.award_points", profile_id=str(profile_id), amount=amount
        ):
            await self.profile_repository.add_points(profile_id, amount)
            logfire.info("Points awarded", profile_id=str(profile_id), amount=amount)

    async def retract_points(self, profile_id: ProfileId, amount: int) -> None:
        """Atomically remove points from a profile, flooring at zero.

        Args:
            profile_id: Profile to debit
            amount: Points to remove
        """
        with logfire.span(
            "profile_service.retract_points", profile_id=str(profile_id), amount=amount
        ):
            await self.profile_repository.subtract_points(profile_id, amount)
            logfire.info("Points retracted", profile_id=str(profile_id), amount=amount)

    async def get_leaderboard(self, limit: int) -> list[Profile]:
        """Get the highest-scoring profiles.

        Args:
            limit: Maximum number of entries

        Returns:
            Profiles ordered by points descending
        """
        with logfire.span("profile_service.get_leaderboard", limit=limit):
            return await self.profile_repository.find_top_by_points(limit)

    async def get_all_ids(self) -> list[ProfileId]:
        return await self.profile_repository.find_all_ids()

    async def count(self) -> int:
        return await self.profile_repository.count()
