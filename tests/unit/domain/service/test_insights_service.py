"""Unit tests for InsightsService."""

import pytest

from acadly.adapter.gemini import MockGeminiInsightsClient
from acadly.domain.repository import ProfileRepository
from acadly.domain.service import (
    InsightsService,
    ProfileService,
    QueryService,
    RecommendationService,
)
from acadly.domain.service.insights_service import parse_insights
from acadly.domain.value import QueryType
from tests.conftest import make_profile
from tests.harness import create_env_fixture

# Unit test fixture - everything mocked, no docker needed
unit_env = create_env_fixture()


async def _insights_with(unit_env, client: MockGeminiInsightsClient) -> InsightsService:
    """Build an InsightsService around a specific mock client."""
    return InsightsService(
        generator=client,
        profile_service=await unit_env.get(ProfileService),
        recommendation_service=await unit_env.get(RecommendationService),
        query_service=await unit_env.get(QueryService),
    )


class TestParseInsights:
    """Tests for extracting JSON from generated text."""

    def test_extracts_object_wrapped_in_prose(self):
        text = 'Here you go:\n```json\n{"executive_summary": "Busy month"}\n```'

        assert parse_insights(text) == {"executive_summary": "Busy month"}

    def test_unparseable_reply_is_returned_raw(self):
        text = "Engagement is high {but this is not json}"

        assert parse_insights(text) == {"raw": text}

    def test_reply_without_braces_is_returned_raw(self):
        assert parse_insights("No insights today.") == {"raw": "No insights today."}


class TestGetInsights:
    """Tests for InsightsService.get_insights."""

    @pytest.mark.asyncio
    async def test_unconfigured_generator_returns_fallback(self, unit_env):
        """Without an API key, deterministic stats are returned instead."""
        # Arrange
        profile_repo = await unit_env.get(ProfileRepository)
        query_service = await unit_env.get(QueryService)
        top = await profile_repo.save(make_profile("Dr. Top", points=40))
        await profile_repo.save(make_profile("Dr. Second", points=10))
        await query_service.create_query(
            top.id, "Wifi outage", "Wifi in block A drops daily.", QueryType.IT_SUPPORT
        )
        insights_service = await unit_env.get(InsightsService)

        # Act
        result = await insights_service.get_insights()

        # Assert
        assert result["available"] is False
        assert "GEMINI_API_KEY" in result["message"]
        fallback = result["fallback"]
        assert fallback["stats"] == {
            "total_users": 2,
            "total_recommendations": 0,
            "total_queries": 1,
            "open_queries": 1,
            "resolved_queries": 0,
        }
        assert fallback["top_faculty"][0] == {"full_name": "Dr. Top", "points": 43}
        assert fallback["executive_summary"].startswith("The platform has 2 users")

    @pytest.mark.asyncio
    async def test_configured_generator_returns_parsed_insights(self, unit_env):
        """A successful reply is parsed and the prompt carries platform stats."""
        # Arrange
        await (await unit_env.get(ProfileRepository)).save(
            make_profile("Dr. Active", points=12)
        )
        client = MockGeminiInsightsClient(
            reply='{"executive_summary": "Healthy", "concerns": []}'
        )
        insights_service = await _insights_with(unit_env, client)

        # Act
        result = await insights_service.get_insights()

        # Assert
        assert result == {
            "available": True,
            "insights": {"executive_summary": "Healthy", "concerns": []},
        }
        assert len(client.prompts) == 1
        assert "Total Users: 1" in client.prompts[0]
        assert "Dr. Active" in client.prompts[0]

    @pytest.mark.asyncio
    async def test_generator_failure_returns_fallback(self, unit_env):
        """A failing generator degrades to the fallback, never an error."""
        # Arrange
        client = MockGeminiInsightsClient(reply="{}", fail=True)
        insights_service = await _insights_with(unit_env, client)

        # Act
        result = await insights_service.get_insights()

        # Assert
        assert result["available"] is False
        assert result["message"] == "AI insights temporarily unavailable."
        assert result["fallback"]["stats"]["total_users"] == 0
