"""Profile repository interface."""

from abc import ABC, abstractmethod
from typing import List, Optional, Sequence

from acadly.domain.model import Profile
from acadly.domain.value import ProfileId


class ProfileRepository(ABC):
    """Repository for Profile aggregate.

    Defines the contract for profile persistence and the points ledger's
    storage-level delta operations.
    """

    @abstractmethod
    async def find_by_id(self, profile_id: ProfileId) -> Optional[Profile]:
        """Find a profile by ID.

        Args:
            profile_id: The profile's unique identifier

        Returns:
            The profile if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_email(self, email: str) -> Optional[Profile]:
        """Find a profile by email address.

        Args:
            email: Email to search for

        Returns:
            The profile if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_by_ids(self, profile_ids: Sequence[ProfileId]) -> List[Profile]:
        """Find several profiles at once (batch query).

        Args:
            profile_ids: IDs to look up; unknown IDs are ignored

        Returns:
            Profiles found, in no particular order
        """
        pass

    @abstractmethod
    async def find_top_by_points(self, limit: int) -> List[Profile]:
        """Find the highest-scoring profiles.

        Args:
            limit: Maximum number of profiles to return

        Returns:
            Profiles ordered by points descending
        """
        pass

    @abstractmethod
    async def find_all_ids(self) -> List[ProfileId]:
        """Return the IDs of every profile."""
        pass

    @abstractmethod
    async def count(self) -> int:
        """Count all profiles."""
        pass

    @abstractmethod
    async def save(self, profile: Profile) -> Profile:
        """Save a new profile.

        Args:
            profile: Profile to insert

        Returns:
            The saved profile

        Raises:
            IntegrityError: If the email is already registered
        """
        pass

    @abstractmethod
    async def add_points(self, profile_id: ProfileId, amount: int) -> None:
        """Atomically add points to a profile.

        Unknown profiles are ignored.

        Args:
            profile_id: Profile to credit
            amount: Points to add (positive)
        """
        pass

    @abstractmethod
    async def subtract_points(self, profile_id: ProfileId, amount: int) -> None:
        """Atomically subtract points from a profile, never going below zero.

        Unknown profiles are ignored.

        Args:
            profile_id: Profile to debit
            amount: Points to subtract (positive)
        """
        pass
