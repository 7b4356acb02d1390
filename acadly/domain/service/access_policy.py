"""Role-based capability checks.

Capabilities are named permissions, each granted to a fixed set of roles.
Use cases ask the policy before acting; the interface layer never inspects
roles itself.
"""

from enum import Enum

import logfire

from acadly.domain.error import NotAuthorizedError
from acadly.domain.model import Profile
from acadly.domain.value import Role



class Capability(str, Enum):
    """Permissions gated by role."""

    RESPOND_TO_QUERY = "respond to queries"
    MANAGE_ACADEMIC_EVENTS = "manage academic events"
    VIEW_INSIGHTS = "view insights"


CAPABILITY_ROLES: dict[Capability, frozenset[Role]] = {
    Capability.RESPOND_TO_QUERY: frozenset({Role.HOD, Role.DEAN, Role.SUPERADMIN}),
    Capability.MANAGE_ACADEMIC_EVENTS: frozenset({Role.SUPERADMIN}),
    Capability.VIEW_INSIGHTS: frozenset({Role.DEAN, Role.SUPERADMIN}),
}


class AccessPolicy:
    """Decides whether a profile holds a capability."""

    def allows(self, role: Role, capability: Capability) -> bool:
        return role in CAPABILITY_ROLES[capability]

    def require(self, profile: Profile, capability: Capability) -> None:
        """Ensure a profile holds a capability.

        Args:
            profile: Acting profile
            capability: Capability being exercised

        Raises:
            NotAuthorizedError: If the profile's role does not grant it
        """
        if not self.allows(profile.role, capability):
            logfire.warn(
                "Capability denied",
                profile_id=str(profile.id),
                role=profile.role.value,
                capability=capability.value,
            )
            raise NotAuthorizedError(
                capability.value, str(profile.id), profile.role.value
            )
