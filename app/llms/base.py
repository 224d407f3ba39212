from abc import ABC, abstractmethod

import httpx

from app.core.config import Settings, get_settings
from app.core.errors import ProviderError, describe_http_error
from app.core.providers import ProviderIdentity


class BaseProviderClient(ABC):
    """Holds only immutable settings; every call opens and closes its own HTTP client."""

    provider: ProviderIdentity

    def __init__(
        self,
        settings: Settings | None = None,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._settings = settings or get_settings()
        self._transport = transport

    @property
    def settings(self) -> Settings:
        return self._settings

    @property
    def provider_name(self) -> str:
        return self.provider.display_name

    def _http_client(self) -> httpx.AsyncClient:
        return httpx.AsyncClient(timeout=self._settings.request_timeout, transport=self._transport)

    async def _post(self, url: str, **kwargs) -> httpx.Response:
        try:
            async with self._http_client() as client:
                r = await client.post(url, **kwargs)
                r.raise_for_status()
                return r
        except (httpx.HTTPError, httpx.InvalidURL, UnicodeError) as e:
            raise ProviderError(self.provider_name, describe_http_error(e), e) from e


class BaseChatClient(BaseProviderClient):
    @abstractmethod
    async def chat(self, prompt: str, api_key: str, model: str | None = None) -> str:
        ...
