"""Unit tests for the OpenAI-compatible classifier client."""

import json

import httpx
import pytest

from board.adapter.classifier import (
    ClassifierError,
    MockTextClassifier,
    OpenAICompatibleClassifier,
)


def _completion(content) -> dict:
    return {"choices": [{"message": {"role": "assistant", "content": content}}]}


def _classifier(handler, api_key: str | None = "sk-test") -> OpenAICompatibleClassifier:
    return OpenAICompatibleClassifier(
        base_url="https://llm.example.com/v1/",
        model="tiny-moderator",
        api_key=api_key,
        transport=httpx.MockTransport(handler),
    )


class TestClassify:
    """Tests for classify method."""

    @pytest.mark.asyncio
    async def test_sends_chat_completion_request(self):
        """Should POST the prompt as a single user message."""
        # Arrange
        captured = {}

        def handler(request: httpx.Request) -> httpx.Response:
            captured["url"] = str(request.url)
            captured["auth"] = request.headers.get("authorization")
            captured["body"] = json.loads(request.content)
            return httpx.Response(200, json=_completion(" 0 \n"))

        classifier = _classifier(handler)

        # Act
        answer = await classifier.classify("Is this fine? Opinion: hello")

        # Assert
        assert answer == "0"
        assert captured["url"] == "https://llm.example.com/v1/chat/completions"
        assert captured["auth"] == "Bearer sk-test"
        assert captured["body"]["model"] == "tiny-moderator"
        assert captured["body"]["messages"] == [
            {"role": "user", "content": "Is this fine? Opinion: hello"}
        ]

    @pytest.mark.asyncio
    async def test_omits_authorization_without_api_key(self):
        """Local servers are called without a bearer token."""
        captured = {}

        def handler(request: httpx.Request) -> httpx.Response:
            captured["auth"] = request.headers.get("authorization")
            return httpx.Response(200, json=_completion("1"))

        classifier = _classifier(handler, api_key=None)

        assert await classifier.classify("prompt") == "1"
        assert captured["auth"] is None

    @pytest.mark.asyncio
    async def test_non_200_raises(self):
        """Error statuses surface as ClassifierError."""
        classifier = _classifier(lambda request: httpx.Response(503, text="busy"))

        with pytest.raises(ClassifierError, match="503"):
            await classifier.classify("prompt")

    @pytest.mark.asyncio
    async def test_transport_error_raises(self):
        """Connection failures surface as ClassifierError."""

        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ConnectError("connection refused", request=request)

        classifier = _classifier(handler)

        with pytest.raises(ClassifierError):
            await classifier.classify("prompt")

    @pytest.mark.asyncio
    async def test_timeout_raises(self):
        """Timeouts surface as ClassifierError."""

        def handler(request: httpx.Request) -> httpx.Response:
            raise httpx.ReadTimeout("timed out", request=request)

        classifier = _classifier(handler)

        with pytest.raises(ClassifierError):
            await classifier.classify("prompt")

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "response",
        [
            httpx.Response(200, text="not json"),
            httpx.Response(200, json={"choices": []}),
            httpx.Response(200, json={"unexpected": True}),
            httpx.Response(200, json=_completion(None)),
        ],
    )
    async def test_malformed_response_raises(self, response):
        """Responses without an answer surface as ClassifierError."""
        classifier = _classifier(lambda request: response)

        with pytest.raises(ClassifierError):
            await classifier.classify("prompt")


class TestMockTextClassifier:
    """Tests for MockTextClassifier."""

    @pytest.mark.asyncio
    async def test_records_prompts_and_answers(self):
        """The mock answers with its verdict and remembers prompts."""
        classifier = MockTextClassifier(verdict="1")

        assert await classifier.classify("first") == "1"
        assert classifier.prompts == ["first"]

    @pytest.mark.asyncio
    async def test_fail_raises(self):
        """A failing mock raises ClassifierError."""
        classifier = MockTextClassifier(fail=True)

        with pytest.raises(ClassifierError):
            await classifier.classify("prompt")
