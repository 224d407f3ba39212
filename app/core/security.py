from app.core.errors import ValidationError


def require_prompt(prompt: str | None) -> str:
    if not prompt:
        raise ValidationError("prompt is required")
    return prompt


def require_api_key(api_key: str | None) -> str:
    # Keys arrive with each request and are never read from settings.
    if not api_key:
        raise ValidationError("apiKey is required")
    return api_key
