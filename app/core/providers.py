# =============================================================================
# app/core/providers.py - Provider identities and per-provider defaults
# =============================================================================
# Provider strings are matched case-insensitively. Anything unrecognized
# (including None and "") resolves to the default provider; this lookup is
# total and never raises.
# =============================================================================

from enum import Enum

from app.core.config import Settings


class ProviderIdentity(str, Enum):
    OPENAI = "openai"
    GEMINI = "gemini"

    @property
    def display_name(self) -> str:
        return PROVIDER_DISPLAY_NAMES[self]


DEFAULT_PROVIDER = ProviderIdentity.OPENAI

PROVIDER_DISPLAY_NAMES = {
    ProviderIdentity.OPENAI: "OpenAI",
    ProviderIdentity.GEMINI: "Gemini",
}


def parse_provider_or_default(raw: str | None) -> ProviderIdentity:
    if not raw:
        return DEFAULT_PROVIDER
    try:
        return ProviderIdentity(raw.casefold())
    except ValueError:
        return DEFAULT_PROVIDER


def resolve_model(provider: ProviderIdentity, model: str | None, settings: Settings) -> str:
    """Return the request's model, or the provider's default when it is absent."""
    if model:
        return model
    if provider is ProviderIdentity.GEMINI:
        return settings.gemini_default_model
    return settings.openai_chat_model
