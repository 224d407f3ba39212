# =============================================================================
# app/llms/router.py - Provider dispatch
# =============================================================================
# CHAT_CLIENTS is the only place that maps a provider to its client. Adding a
# provider means one BaseChatClient subclass plus one entry here.
# Each dispatch makes exactly one outbound call: no retries, no fan-out.
# Provider failures come back as Failure outcomes, not exceptions.
# =============================================================================

import time

import httpx

from app.core.config import Settings
from app.core.errors import ProviderError
from app.core.providers import ProviderIdentity, resolve_model
from app.llms.base import BaseChatClient
from app.llms.gemini_client import GeminiClient
from app.llms.openai_client import OpenAIChatClient
from app.llms.openai_image_client import OpenAIImageClient
from app.schemas.outcome import ChatResult, Failure, ImageResult, ProviderCallOutcome
from app.schemas.request import GenerationRequest
from app.utils.logger import logger

CHAT_CLIENTS: dict[ProviderIdentity, type[BaseChatClient]] = {
    ProviderIdentity.OPENAI: OpenAIChatClient,
    ProviderIdentity.GEMINI: GeminiClient,
}


def get_client(
    provider: ProviderIdentity,
    settings: Settings | None = None,
    transport: httpx.AsyncBaseTransport | None = None,
) -> BaseChatClient:
    return CHAT_CLIENTS[provider](settings, transport=transport)


def _failure(provider: ProviderIdentity, e: ProviderError, latency_ms: float) -> Failure:
    logger.warning(
        "provider_failed",
        extra={"provider": provider.value, "error": e.reason, "latency_ms": round(latency_ms, 2)},
    )
    return Failure(provider=provider, reason=e.reason, cause=e.cause or e)


async def dispatch(
    request: GenerationRequest,
    settings: Settings | None = None,
    transport: httpx.AsyncBaseTransport | None = None,
) -> ProviderCallOutcome:
    client = get_client(request.provider, settings, transport)
    logger.info(
        "provider_dispatch",
        extra={
            "provider": request.provider.value,
            "model": resolve_model(request.provider, request.model, client.settings),
            "prompt_length": len(request.prompt),
        },
    )
    start = time.perf_counter()
    try:
        text = await client.chat(request.prompt, request.api_key, request.model)
    except ProviderError as e:
        return _failure(request.provider, e, (time.perf_counter() - start) * 1000)
    latency_ms = (time.perf_counter() - start) * 1000
    logger.info(
        "llm_used",
        extra={"provider": request.provider.value, "latency_ms": round(latency_ms, 2)},
    )
    return ChatResult(text=text)


async def dispatch_image(
    request: GenerationRequest,
    settings: Settings | None = None,
    transport: httpx.AsyncBaseTransport | None = None,
) -> ProviderCallOutcome:
    client = OpenAIImageClient(settings, transport=transport)
    logger.info(
        "provider_dispatch",
        extra={
            "provider": client.provider.value,
            "model": client.settings.image_model,
            "prompt_length": len(request.prompt),
        },
    )
    start = time.perf_counter()
    try:
        urls = await client.image(request.prompt, request.api_key)
    except ProviderError as e:
        return _failure(client.provider, e, (time.perf_counter() - start) * 1000)
    latency_ms = (time.perf_counter() - start) * 1000
    logger.info(
        "image_generated",
        extra={"provider": client.provider.value, "images": len(urls), "latency_ms": round(latency_ms, 2)},
    )
    return ImageResult(urls=urls)
