"""Leaderboard use case."""

from pydantic import BaseModel

from acadly.domain.service import ProfileService
from acadly.domain.value import Role

LEADERBOARD_SIZE = 50


class LeaderboardEntry(BaseModel):
    """One ranked profile."""

    id: str
    full_name: str
    role: Role
    points: int


class GetLeaderboardUseCase:
    """Use case for ranking profiles by points."""

    def __init__(self, profile_service: ProfileService) -> None:
        self.profile_service = profile_service

    async def execute(self) -> list[LeaderboardEntry]:
        profiles = await self.profile_service.get_leaderboard(LEADERBOARD_SIZE)
        return [
            LeaderboardEntry(
                id=str(p.id), full_name=p.full_name, role=p.role, points=p.points
            )
            for p in profiles
        ]
