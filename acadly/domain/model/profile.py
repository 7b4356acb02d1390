"""Profile aggregate root.

Profiles are the accounts of the portal. They carry a role, which gates
capabilities, and a points balance earned through engagement.
"""

from datetime import datetime

from pydantic import Field

from acadly.domain.model.common import DomainModel
from acadly.domain.value import ProfileId, Role


class Profile(DomainModel):
    """Profile aggregate root.

    Business rules:
    - Email is unique across profiles
    - Points never drop below zero; they change only through the points ledger
    """

    id: ProfileId
    full_name: str = Field(min_length=1, max_length=255)
    email: str = Field(max_length=255)
    password_hash: str
    role: Role = Role.FACULTY
    points: int = Field(default=0, ge=0)
    created_at: datetime = Field(default_factory=datetime.now)
