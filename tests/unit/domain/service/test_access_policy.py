"""Unit tests for AccessPolicy."""

import pytest

from acadly.domain.error import NotAuthorizedError
from acadly.domain.service import AccessPolicy, Capability
from acadly.domain.value import Role
from tests.conftest import make_profile


class TestAccessPolicy:
    """Tests for capability checks."""

    @pytest.mark.parametrize(
        ("role", "allowed"),
        [
            (Role.FACULTY, False),
            (Role.HOD, True),
            (Role.DEAN, True),
            (Role.SUPERADMIN, True),
        ],
    )
    def test_respond_to_query(self, role, allowed):
        assert AccessPolicy().allows(role, Capability.RESPOND_TO_QUERY) is allowed

    def test_only_superadmin_manages_academic_events(self):
        policy = AccessPolicy()

        allowed = {
            role
            for role in Role
            if policy.allows(role, Capability.MANAGE_ACADEMIC_EVENTS)
        }

        assert allowed == {Role.SUPERADMIN}

    def test_insights_limited_to_dean_and_superadmin(self):
        policy = AccessPolicy()

        allowed = {role for role in Role if policy.allows(role, Capability.VIEW_INSIGHTS)}

        assert allowed == {Role.DEAN, Role.SUPERADMIN}

    def test_require_raises_for_missing_capability(self):
        """require should raise NotAuthorizedError naming the role."""
        faculty = make_profile(role=Role.FACULTY)

        with pytest.raises(NotAuthorizedError) as exc_info:
            AccessPolicy().require(faculty, Capability.VIEW_INSIGHTS)

        assert exc_info.value.role == "faculty"
        assert exc_info.value.capability == Capability.VIEW_INSIGHTS.value
