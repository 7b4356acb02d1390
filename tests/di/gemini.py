"""Mock Gemini providers for testing."""

from dishka import Scope, provide

from acadly.adapter.gemini import GeminiInsightsClient, MockGeminiInsightsClient
from acadly.util.di.infrastructure.gemini import GeminiProvider


class MockGeminiProvider(GeminiProvider):
    """Mock Gemini provider.

    The mock client has no canned reply, so it reports itself unavailable
    just like a deployment without GEMINI_API_KEY.
    """

    __is_mock__ = True

    @provide(scope=Scope.APP)
    def get_gemini_client(self) -> GeminiInsightsClient:
        """Provide mock Gemini client."""
        return MockGeminiInsightsClient()
