# =============================================================================
# app/llms/gemini_client.py - Google Gemini generateContent client
# =============================================================================
# Auth is the ?key= query parameter, not a header. The model is substituted
# into the path; gemini-pro when the request names none.
# =============================================================================

import json
from urllib.parse import quote

from app.core.providers import ProviderIdentity, resolve_model
from app.llms.base import BaseChatClient
from app.llms.extractor import extract_chat_text


def build_gemini_payload(prompt: str) -> dict:
    return {"contents": [{"parts": [{"text": prompt}]}]}


def encode_gemini_body(prompt: str) -> bytes:
    # json.dumps escapes quotes, backslashes and control characters.
    return json.dumps(build_gemini_payload(prompt), separators=(",", ":")).encode("utf-8")


def build_gemini_url(base_url: str, model: str) -> str:
    # The model is one path segment; "/", "?" and "#" must not escape it.
    return f"{base_url}/models/{quote(model, safe='')}:generateContent"


class GeminiClient(BaseChatClient):
    provider = ProviderIdentity.GEMINI

    async def chat(self, prompt: str, api_key: str, model: str | None = None) -> str:
        resolved_model = resolve_model(self.provider, model, self._settings)
        r = await self._post(
            build_gemini_url(self._settings.gemini_base_url, resolved_model),
            params={"key": api_key},
            content=encode_gemini_body(prompt),
            headers={"Content-Type": "application/json"},
        )
        return extract_chat_text(r.content, self.provider_name)
