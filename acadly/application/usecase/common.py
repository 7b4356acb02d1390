"""Response models shared across use cases."""

from datetime import datetime

from pydantic import BaseModel

from acadly.domain.model import Profile
from acadly.domain.value import Role


class MessageResponse(BaseModel):
    """Plain acknowledgement."""

    message: str


class ProfileInfo(BaseModel):
    """Public view of a profile (never includes the password hash)."""

    id: str
    full_name: str
    email: str
    role: Role
    points: int
    created_at: datetime

    @classmethod
    def from_profile(cls, profile: Profile) -> "ProfileInfo":
        return cls(
            id=str(profile.id),
            full_name=profile.full_name,
            email=profile.email,
            role=profile.role,
            points=profile.points,
            created_at=profile.created_at,
        )
