"""AI insights use cases."""

from .get_insights import GetInsightsRequest, GetInsightsUseCase, InsightsResponse

__all__ = ["GetInsightsRequest", "GetInsightsUseCase", "InsightsResponse"]
