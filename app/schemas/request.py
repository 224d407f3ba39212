from pydantic import BaseModel, ConfigDict, Field

from app.core.providers import DEFAULT_PROVIDER, ProviderIdentity


class ChatRequest(BaseModel):
    """Inbound body of POST /chat. Emptiness is checked by the normalizer, not here."""

    model_config = ConfigDict(populate_by_name=True)

    prompt: str | None = None
    api_key: str | None = Field(None, alias="apiKey")
    provider: str | None = None  # "openai" or "gemini", any case
    model: str | None = None  # empty = provider default


class ImageRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    prompt: str | None = None
    api_key: str | None = Field(None, alias="apiKey")


class GenerationRequest(BaseModel):
    model_config = ConfigDict(frozen=True)

    prompt: str = Field(..., min_length=1)
    api_key: str = Field(..., min_length=1, repr=False)
    provider: ProviderIdentity = DEFAULT_PROVIDER
    model: str | None = None
