"""Google Gemini client for AI insights.

Calls the Gemini generateContent REST endpoint directly over httpx.
"""

import httpx
import logfire

from acadly.domain.service.insights_service import InsightsGenerator


class GeminiError(Exception):
    """Raised when the Gemini API cannot produce a reply."""

    pass


class GeminiInsightsClient(InsightsGenerator):
    """Base class for Gemini clients.

    Provides type distinction for dependency injection.
    """

    pass


class RealGeminiInsightsClient(GeminiInsightsClient):
    """Gemini client backed by the public REST API."""

    def __init__(
        self,
        api_key: str | None,
        model: str,
        base_url: str,
        timeout: float = 30.0,
    ) -> None:
        """Initialize Gemini client.

        Args:
            api_key: Gemini API key (None disables the client)
            model: Model name, e.g. gemini-1.5-flash
            base_url: API base URL
            timeout: Request timeout in seconds
        """
        self.api_key = api_key
        self.model = model
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout

    @property
    def available(self) -> bool:
        return bool(self.api_key)

    async def generate(self, prompt: str) -> str:
        """Generate text for a prompt.

        Args:
            prompt: Prompt text

        Returns:
            Text of the first candidate

        Raises:
            GeminiError: If the client is unconfigured or the request fails
        """
        if not self.api_key:
            raise GeminiError("Gemini API key not configured")

        url = f"{self.base_url}/models/{self.model}:generateContent"
        body = {"contents": [{"parts": [{"text": prompt}]}]}

        try:
            async with httpx.AsyncClient() as client:
                response = await client.post(
                    url,
                    json=body,
                    headers={"x-goog-api-key": self.api_key},
                    timeout=self.timeout,
                )

                if response.status_code != 200:
                    logfire.error(
                        "Gemini request failed",
                        status_code=response.status_code,
                        error=response.text,
                    )
                    raise GeminiError(
                        f"Gemini request failed: {response.status_code}"
                    )

                result = response.json()
        except httpx.HTTPError as e:
            logfire.error("Gemini HTTP error", error=str(e))
            raise GeminiError(f"HTTP error calling Gemini: {e}")

        try:
            parts = result["candidates"][0]["content"]["parts"]
        except (KeyError, IndexError, TypeError):
            raise GeminiError("Gemini response contained no candidates")

        text = "".join(part.get("text", "") for part in parts)
        logfire.info("Gemini reply received", model=self.model, length=len(text))
        return text


class MockGeminiInsightsClient(GeminiInsightsClient):
    """Mock Gemini client for testing.

    Unavailable unless given a canned reply; can be told to fail.
    """

    def __init__(self, reply: str | None = None, fail: bool = False):
        """Initialize mock client.

        Args:
            reply: Text returned by generate (None makes the client unavailable)
            fail: Raise GeminiError from generate instead of replying
        """
        self.reply = reply
        self.fail = fail
        self.prompts: list[str] = []

    @property
    def available(self) -> bool:
        return self.reply is not None

    async def generate(self, prompt: str) -> str:
        self.prompts.append(prompt)
        if self.fail:
            raise GeminiError("Mock Gemini failure")
        return self.reply or ""
