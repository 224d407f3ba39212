from app.core.providers import parse_provider_or_default
from app.core.security import require_api_key, require_prompt
from app.schemas.request import GenerationRequest


def normalize_request(
    prompt: str | None,
    api_key: str | None,
    provider: str | None = None,
    model: str | None = None,
) -> GenerationRequest:
    """Validate raw inbound fields and fill defaults.

    Prompt and key are passed through untouched once present. Unknown provider
    strings fall back to the default provider instead of failing, and a blank
    model means "use the provider default".
    """
    return GenerationRequest(
        prompt=require_prompt(prompt),
        api_key=require_api_key(api_key),
        provider=parse_provider_or_default(provider),
        model=model if model and model.strip() else None,
    )
