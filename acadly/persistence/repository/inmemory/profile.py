"""In-memory profile repository for testing."""

from typing import List, Optional, Sequence

from sqlalchemy.exc import IntegrityError

from acadly.domain.model import Profile
from acadly.domain.repository import ProfileRepository
from acadly.domain.value import ProfileId

from .store import InMemoryStore


class InMemoryProfileRepository(ProfileRepository):
    """In-memory implementation of ProfileRepository for testing."""

    def __init__(self, store: InMemoryStore | None = None) -> None:
        self._store = store or InMemoryStore()

    @property
    def _profiles(self) -> dict[ProfileId, Profile]:
        return self._store.profiles

    async def find_by_id(self, profile_id: ProfileId) -> Optional[Profile]:
        return self._profiles.get(profile_id)

    async def find_by_email(self, email: str) -> Optional[Profile]:
        for profile in self._profiles.values():
            if profile.email == email:
                return profile
        return None

    async def find_by_ids(self, profile_ids: Sequence[ProfileId]) -> List[Profile]:
        return [
            self._profiles[pid] for pid in set(profile_ids) if pid in self._profiles
        ]

    async def find_top_by_points(self, limit: int) -> List[Profile]:
        ranked = sorted(
            self._profiles.values(), key=lambda p: (-p.points, p.created_at)
        )
        return ranked[:limit]

    async def find_all_ids(self) -> List[ProfileId]:
        return list(self._profiles.keys())

    async def count(self) -> int:
        return len(self._profiles)

    async def save(self, profile: Profile) -> Profile:
        """Save a profile.

        Raises:
            IntegrityError: If the email is already taken
        """
        existing = await self.find_by_email(profile.email)
        if existing and existing.id != profile.id:
            raise IntegrityError("Duplicate email", None, Exception())
        self._profiles[profile.id] = profile
        return profile

    async def add_points(self, profile_id: ProfileId, amount: int) -> None:
        profile = self._profiles.get(profile_id)
        if profile:
            self._profiles[profile_id] = profile.model_copy(
                update={"points": profile.points + amount}
            )

    async def subtract_points(self, profile_id: ProfileId, amount: int) -> None:
        """Subtract points, flooring at zero."""
        profile = self._profiles.get(profile_id)
        if profile:
            self._profiles[profile_id] = profile.model_copy(
                update={"points": max(profile.points - amount, 0)}
            )
