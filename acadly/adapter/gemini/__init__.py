"""Google Gemini adapter."""

from .client import (
    GeminiError,
    GeminiInsightsClient,
    MockGeminiInsightsClient,
    RealGeminiInsightsClient,
)

__all__ = [
    "GeminiError",
    "GeminiInsightsClient",
    "MockGeminiInsightsClient",
    "RealGeminiInsightsClient",
]
