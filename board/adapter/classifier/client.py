"""Text classifier client.

Talks to any OpenAI-compatible chat completions endpoint (OpenAI, a local
Ollama or vLLM server, ...). The model's answer is returned verbatim; turning
it into a verdict is the moderation service's job.
"""

import httpx
import logfire

from board.adapter.error import ProviderError
from board.domain.service.moderation_service import TextClassifier


class ClassifierError(ProviderError):
    """Text classifier request failed or returned garbage."""

    pass


class OpenAICompatibleClassifier(TextClassifier):
    """Classifier backed by a chat completions API."""

    def __init__(
        self,
        base_url: str,
        model: str,
        api_key: str | None = None,
        timeout: float = 10.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        """Initialize classifier client.

        Args:
            base_url: API base URL, e.g. https://api.openai.com/v1
            model: Model name
            api_key: Bearer token (optional for local servers)
            timeout: Request timeout in seconds
            transport: Custom httpx transport (tests)
        """
        self.base_url = base_url.rstrip("/")
        self.model = model
        self.api_key = api_key
        self.timeout = timeout
        self._transport = transport

    async def classify(self, prompt: str) -> str:
        """Send the prompt and return the model's answer.

        Args:
            prompt: Instruction template followed by the content

        Returns:
            Answer text

        Raises:
            ClassifierError: On transport errors, timeouts, non-200 responses
                or responses without a message
        """
        headers = {"Content-Type": "application/json"}
        if self.api_key:
            headers["Authorization"] = f"Bearer {self.api_key}"

        payload = {
            "model": self.model,
            "messages": [{"role": "user", "content": prompt}],
            "temperature": 0,
            "max_tokens": 4,
        }

        try:
            async with httpx.AsyncClient(
                transport=self._transport, timeout=self.timeout
            ) as client:
                response = await client.post(
                    f"{self.base_url}/chat/completions",
                    json=payload,
                    headers=headers,
                )
        except httpx.HTTPError as e:
            logfire.error(
                "Classifier HTTP error", error=str(e), error_type=type(e).__name__
            )
            raise ClassifierError(f"HTTP error calling classifier: {e}") from e

        if response.status_code != 200:
            logfire.error(
                "Classifier request failed",
                status_code=response.status_code,
                error=response.text[:200],
            )
            raise ClassifierError(
                f"Classifier request failed: {response.status_code}"
            )

        try:
            content = response.json()["choices"][0]["message"]["content"]
        except (ValueError, KeyError, IndexError, TypeError) as e:
            logfire.error("Malformed classifier response", error=str(e))
            raise ClassifierError("Malformed classifier response") from e

        if not isinstance(content, str):
            raise ClassifierError("Malformed classifier response")

        return content.strip()


class MockTextClassifier(TextClassifier):
    """Mock classifier for testing.

    Answers with a fixed verdict and records every prompt. Set fail=True to
    simulate an outage.
    """

    def __init__(self, verdict: str = "0", fail: bool = False) -> None:
        """Initialize mock classifier.

        Args:
            verdict: Answer returned for every prompt
            fail: Raise ClassifierError instead of answering
        """
        self.verdict = verdict
        self.fail = fail
        self.prompts: list[str] = []

    async def classify(self, prompt: str) -> str:
        """Record the prompt and return the configured verdict."""
        self.prompts.append(prompt)
        if self.fail:
            raise ClassifierError("Classifier unavailable (mock)")
        return self.verdict
