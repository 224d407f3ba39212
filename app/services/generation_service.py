from app.core.errors import ProviderError
from app.llms.router import dispatch, dispatch_image
from app.schemas.outcome import ChatResult, Failure, ImageResult, ProviderCallOutcome
from app.services.normalizer import normalize_request


def _raise_for_failure(outcome: ProviderCallOutcome) -> None:
    if isinstance(outcome, Failure):
        cause = outcome.cause
        if isinstance(cause, ProviderError):
            raise cause
        raise ProviderError(outcome.provider.display_name, outcome.reason, cause) from cause


async def chat(
    prompt: str | None,
    api_key: str | None,
    provider: str | None = None,
    model: str | None = None,
) -> str:
    request = normalize_request(prompt, api_key, provider, model)
    outcome = await dispatch(request)
    _raise_for_failure(outcome)
    if not isinstance(outcome, ChatResult):
        raise ProviderError(request.provider.display_name, f"unexpected outcome {type(outcome).__name__}")
    return outcome.text


async def generate_image(prompt: str | None, api_key: str | None) -> list[str]:
    request = normalize_request(prompt, api_key)
    outcome = await dispatch_image(request)
    _raise_for_failure(outcome)
    if not isinstance(outcome, ImageResult):
        raise ProviderError(request.provider.display_name, f"unexpected outcome {type(outcome).__name__}")
    return outcome.urls
