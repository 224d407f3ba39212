import httpx

MAX_ERROR_BODY = 300


class ValidationError(ValueError):
    """Inbound request fields are missing or empty."""


class ProviderError(Exception):
    """A call to an upstream provider failed.

    ``provider`` names the provider that failed and ``cause`` keeps the original
    exception (also chained as ``__cause__`` when raised with ``from``).
    Messages are built from status codes, exception class names and field
    descriptions only, so they never echo a request URL or credential.
    """

    def __init__(self, provider: str, reason: str, cause: BaseException | None = None) -> None:
        self.provider = provider
        self.reason = reason
        self.cause = cause
        super().__init__(f"Error calling {provider} API: {reason}")


def describe_http_error(err: Exception) -> str:
    if isinstance(err, httpx.HTTPStatusError):
        body = ""
        try:
            body = (err.response.text or "").strip()[:MAX_ERROR_BODY]
        except httpx.ResponseNotRead:
            pass
        if body:
            return f"HTTP {err.response.status_code}: {body}"
        return f"HTTP {err.response.status_code}"
    if isinstance(err, httpx.TimeoutException):
        return f"request timed out ({type(err).__name__})"
    if isinstance(err, httpx.RequestError):
        return f"provider unreachable ({type(err).__name__})"
    if isinstance(err, UnicodeError):
        return f"request could not be encoded ({type(err).__name__})"
    return type(err).__name__
