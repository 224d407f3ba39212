from app.core.providers import ProviderIdentity
from app.llms.base import BaseProviderClient
from app.llms.extractor import extract_image_urls


class OpenAIImageClient(BaseProviderClient):
    """Image generation with a fixed, deployment-configured model (dall-e-3 by default)."""

    provider = ProviderIdentity.OPENAI

    async def image(self, prompt: str, api_key: str) -> list[str]:
        r = await self._post(
            f"{self._settings.openai_base_url}/images/generations",
            headers={"Authorization": f"Bearer {api_key}"},
            json={"model": self._settings.image_model, "prompt": prompt, "n": 1},
        )
        return extract_image_urls(r.content, self.provider_name)
