"""AI insights domain service.

Summarises platform activity through an external text generator, falling
back to deterministic statistics when the generator is unavailable.
"""

import json
import re
from typing import Any

import logfire

from acadly.domain.value import QueryStatus

from .base import Service
from .profile_service import ProfileService
from .query_service import QueryService
from .recommendation_service import RecommendationService

SAMPLE_SIZE = 100
PROMPT_TOP_FACULTY = 10
FALLBACK_TOP_FACULTY = 5

_JSON_OBJECT = re.compile(r"\{.*\}", re.DOTALL)


class InsightsGenerator:
    """Generic text generation interface for insight providers."""

    @property
    def available(self) -> bool:
        """Whether the generator is configured and may be called."""
        raise NotImplementedError

    async def generate(self, prompt: str) -> str:
        """Generate a text reply for a prompt.

        Args:
            prompt: Prompt text

        Returns:
            Generated text
        """
        raise NotImplementedError


def parse_insights(text: str) -> dict[str, Any]:
    """Extract the JSON object embedded in a generated reply.

    Args:
        text: Raw generated text

    Returns:
        The parsed object, or {"raw": text} if none can be parsed
    """
    match = _JSON_OBJECT.search(text)
    if not match:
        return {"raw": text}
    try:
        parsed = json.loads(match.group(0))
    except json.JSONDecodeError:
        return {"raw": text}
    if not isinstance(parsed, dict):
        return {"raw": text}
    return parsed


class InsightsService(Service):
    """Domain service for AI-generated platform insights."""

    def __init__(
        self,
        generator: InsightsGenerator,
        profile_service: ProfileService,
        recommendation_service: RecommendationService,
        query_service: QueryService,
    ) -> None:
        """Initialize insights service.

        Args:
            generator: Text generator used for insights
            profile_service: Profile domain service
            recommendation_service: Recommendation domain service
            query_service: Query domain service
        """
        self.generator = generator
        self.profile_service = profile_service
        self.recommendation_service = recommendation_service
        self.query_service = query_service

    async def get_insights(self) -> dict[str, Any]:
        """Produce the insights payload.

        Returns:
            {"available": True, "insights": ...} on success, otherwise
            {"available": False, "message": ..., "fallback": ...}
        """
        with logfire.span("insights_service.get_insights"):
            if not self.generator.available:
                logfire.info("Insights generator not configured, using fallback")
                return {
                    "available": False,
                    "message": "AI insights are unavailable. GEMINI_API_KEY not configured.",
                    "fallback": await self.build_fallback(),
                }

            try:
                prompt = await self.build_prompt()
                reply = await self.generator.generate(prompt)
            except Exception as e:
                logfire.error("Insights generation failed", error=str(e))
                return {
                    "available": False,
                    "message": "AI insights temporarily unavailable.",
                    "fallback": await self.build_fallback(),
                }

            logfire.info("Insights generated", reply_length=len(reply))
            return {"available": True, "insights": parse_insights(reply)}

    async def build_prompt(self) -> str:
        """Assemble the analysis prompt from current platform data."""
        total_users = await self.profile_service.count()
        total_recommendations = await self.recommendation_service.count()
        total_queries = await self.query_service.count()

        queries = [
            {
                "title": query.title,
                "type": query.type.value,
                "status": query.status.value,
                "created_at": query.created_at.isoformat(),
            }
            for query in await self.query_service.list_recent(SAMPLE_SIZE)
        ]
        recommendations = [
            {
                "title": rec.title,
                "category": rec.category.value,
                "rating": rec.rating,
                "created_at": rec.created_at.isoformat(),
            }
            for rec in await self.recommendation_service.list_recent(SAMPLE_SIZE)
        ]
        top_faculty = [
            {
                "full_name": profile.full_name,
                "points": profile.points,
                "role": profile.role.value,
            }
            for profile in await self.profile_service.get_leaderboard(
                PROMPT_TOP_FACULTY
            )
        ]

        return f"""You are an analytics expert for a university faculty engagement platform called ACADLY. Analyze the following data and provide insights:

PLATFORM STATISTICS:
- Total Users: {total_users}
- Total Recommendations: {total_recommendations}
- Total Queries: {total_queries}

RECENT QUERIES (last {SAMPLE_SIZE}):
{json.dumps(queries, indent=2)}

RECENT RECOMMENDATIONS (last {SAMPLE_SIZE}):
{json.dumps(recommendations, indent=2)}

TOP FACULTY:
{json.dumps(top_faculty, indent=2)}

Provide the response in this JSON format:
{{
  "executive_summary": "2-3 sentence overview",
  "query_themes": ["theme1", "theme2", "theme3"],
  "engagement_level": "high/medium/low with brief explanation",
  "most_active_areas": ["area1", "area2"],
  "monthly_trends": "brief trend analysis",
  "recommendation_insights": "key patterns in recommendations",
  "actionable_insights": ["insight1", "insight2", "insight3"],
  "concerns": ["concern1 if any"]
}}"""

    async def build_fallback(self) -> dict[str, Any]:
        """Deterministic summary computed straight from storage."""
        total_users = await self.profile_service.count()
        total_recommendations = await self.recommendation_service.count()
        total_queries = await self.query_service.count()
        open_queries = await self.query_service.count_by_status(QueryStatus.OPEN)
        resolved_queries = await self.query_service.count_by_status(
            QueryStatus.RESOLVED
        )
        top_faculty = await self.profile_service.get_leaderboard(FALLBACK_TOP_FACULTY)

        return {
            "executive_summary": (
                f"The platform has {total_users} users with "
                f"{total_recommendations} recommendations and "
                f"{total_queries} queries submitted."
            ),
            "stats": {
                "total_users": total_users,
                "total_recommendations": total_recommendations,
                "total_queries": total_queries,
                "open_queries": open_queries,
                "resolved_queries": resolved_queries,
            },
            "top_faculty": [
                {"full_name": profile.full_name, "points": profile.points}
                for profile in top_faculty
            ],
        }
