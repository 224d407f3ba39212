"""Tests for provider dispatch and the generation service."""

from __future__ import annotations

import httpx
import pytest

from app.core.config import Settings
from app.core.errors import ProviderError
from app.core.providers import ProviderIdentity
from app.llms import router
from app.llms.gemini_client import GeminiClient
from app.llms.openai_client import OpenAIChatClient
from app.schemas.outcome import ChatResult, Failure, ImageResult
from app.services import generation_service
from app.services.normalizer import normalize_request
from payloads import completion_response, gemini_response


def test_every_provider_has_a_chat_client() -> None:
    assert set(router.CHAT_CLIENTS) == set(ProviderIdentity)
    assert isinstance(router.get_client(ProviderIdentity.GEMINI), GeminiClient)
    assert isinstance(router.get_client(ProviderIdentity.OPENAI), OpenAIChatClient)


@pytest.mark.anyio
@pytest.mark.parametrize("provider", [None, "", "OpenAI", "mistral"])
async def test_dispatch_routes_to_openai_by_default(settings: Settings, recorder, provider) -> None:
    transport, seen = recorder(body=completion_response("from openai"))
    outcome = await router.dispatch(normalize_request("Hi", "k", provider), settings, transport)

    assert outcome == ChatResult(text="from openai")
    assert len(seen) == 1
    assert seen[0].url.host == "api.openai.com"


@pytest.mark.anyio
@pytest.mark.parametrize("provider", ["gemini", "GEMINI", "Gemini"])
async def test_dispatch_routes_gemini_case_insensitively(settings: Settings, recorder, provider) -> None:
    transport, seen = recorder(body=gemini_response("from gemini"))
    outcome = await router.dispatch(normalize_request("Hi", "k", provider), settings, transport)

    assert outcome == ChatResult(text="from gemini")
    assert len(seen) == 1
    assert str(seen[0].url).endswith("/models/gemini-pro:generateContent?key=k")


@pytest.mark.anyio
async def test_dispatch_returns_failure_tagged_with_provider(settings: Settings, recorder) -> None:
    transport, seen = recorder(status=503, body={"error": "overloaded"})
    outcome = await router.dispatch(normalize_request("Hi", "k", "gemini"), settings, transport)

    assert isinstance(outcome, Failure)
    assert outcome.provider is ProviderIdentity.GEMINI
    assert "HTTP 503" in outcome.reason
    assert isinstance(outcome.cause, httpx.HTTPStatusError)
    assert len(seen) == 1  # no retry


@pytest.mark.anyio
async def test_dispatch_image(settings: Settings, recorder) -> None:
    transport, _ = recorder(body={"data": [{"url": "https://img/1"}]})
    outcome = await router.dispatch_image(normalize_request("Draw a cat", "k"), settings, transport)
    assert outcome == ImageResult(urls=["https://img/1"])


@pytest.mark.anyio
async def test_dispatch_image_zero_results(settings: Settings, recorder) -> None:
    transport, _ = recorder(body={"data": []})
    outcome = await router.dispatch_image(normalize_request("Draw a cat", "k"), settings, transport)
    assert isinstance(outcome, ImageResult)
    assert outcome.urls == []


@pytest.mark.anyio
async def test_service_raises_provider_error_on_failure(monkeypatch) -> None:
    cause = httpx.ConnectError("refused")

    async def fake_dispatch(request):
        return Failure(provider=request.provider, reason="provider unreachable (ConnectError)", cause=cause)

    monkeypatch.setattr(generation_service, "dispatch", fake_dispatch)
    with pytest.raises(ProviderError) as exc_info:
        await generation_service.chat("Hi", "k", "gemini")

    assert str(exc_info.value) == "Error calling Gemini API: provider unreachable (ConnectError)"
    assert exc_info.value.__cause__ is cause


@pytest.mark.anyio
async def test_service_returns_text(monkeypatch) -> None:
    seen = []

    async def fake_dispatch(request):
        seen.append(request)
        return ChatResult(text="hello")

    monkeypatch.setattr(generation_service, "dispatch", fake_dispatch)
    assert await generation_service.chat("Hi", "k", "Gemini", "") == "hello"
    assert seen[0].provider is ProviderIdentity.GEMINI
    assert seen[0].model is None


@pytest.mark.anyio
async def test_service_image_returns_urls(monkeypatch) -> None:
    async def fake_dispatch_image(request):
        return ImageResult(urls=[])

    monkeypatch.setattr(generation_service, "dispatch_image", fake_dispatch_image)
    assert await generation_service.generate_image("Draw a cat", "k") == []


@pytest.mark.anyio
async def test_service_rejects_mismatched_outcome(monkeypatch) -> None:
    async def fake_dispatch(request):
        return ImageResult(urls=["https://img/1"])

    monkeypatch.setattr(generation_service, "dispatch", fake_dispatch)
    with pytest.raises(ProviderError):
        await generation_service.chat("Hi", "k")


@pytest.mark.anyio
async def test_dispatch_non_ascii_key_returns_failure(settings: Settings, recorder) -> None:
    transport, seen = recorder(body=completion_response("unused"))
    outcome = await router.dispatch(normalize_request("Hi", "ключ"), settings, transport)

    assert isinstance(outcome, Failure)
    assert outcome.provider is ProviderIdentity.OPENAI
    assert isinstance(outcome.cause, UnicodeEncodeError)
    assert seen == []
