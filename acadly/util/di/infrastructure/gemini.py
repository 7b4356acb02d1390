"""Gemini infrastructure providers."""

from dishka import Scope, provide

from acadly.adapter.gemini import GeminiInsightsClient, RealGeminiInsightsClient
from acadly.config import AISettings
from acadly.util.di.base import ProviderBase


class GeminiProvider(ProviderBase):
    """Gemini component base."""

    __mock_component__ = "gemini"


class ProdGeminiProvider(GeminiProvider):
    """Production Gemini provider."""

    __is_mock__ = False

    @provide(scope=Scope.APP)
    def get_gemini_client(self, ai_settings: AISettings) -> GeminiInsightsClient:
        """Provide Gemini insights client.

        Without an API key the client reports itself unavailable and the
        insights service serves statistics instead.
        """
        return RealGeminiInsightsClient(
            api_key=ai_settings.gemini_api_key,
            model=ai_settings.gemini_model,
            base_url=ai_settings.gemini_base_url,
            timeout=ai_settings.timeout_seconds,
        )
