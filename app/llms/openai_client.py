from app.core.providers import ProviderIdentity, resolve_model
from app.llms.base import BaseChatClient
from app.llms.extractor import extract_completion_text


class OpenAIChatClient(BaseChatClient):
    provider = ProviderIdentity.OPENAI

    async def chat(self, prompt: str, api_key: str, model: str | None = None) -> str:
        r = await self._post(
            f"{self._settings.openai_base_url}/chat/completions",
            headers={"Authorization": f"Bearer {api_key}"},
            json={
                "model": resolve_model(self.provider, model, self._settings),
                "messages": [{"role": "user", "content": prompt}],
            },
        )
        return extract_completion_text(r.content, self.provider_name)
