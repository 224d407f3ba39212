# =============================================================================
# app/llms/extractor.py - Path-safe navigation of provider response documents
# =============================================================================
# Intermediate lookups never raise: a missing key, an out-of-range index or a
# wrong container type yields a missing node. Only the final require_* call
# turns a missing leaf into ProviderError, so an empty string from the provider
# ("said nothing") stays distinct from a malformed response.
# =============================================================================

import json
from typing import Any

from app.core.errors import ProviderError

_MISSING = object()


class JsonNode:
    __slots__ = ("_value",)

    def __init__(self, value: Any = _MISSING) -> None:
        self._value = value

    @classmethod
    def parse(cls, raw: str | bytes, provider: str) -> "JsonNode":
        try:
            return cls(json.loads(raw))
        except (TypeError, ValueError) as e:
            raise ProviderError(provider, "response body is not valid JSON", e) from e

    @property
    def missing(self) -> bool:
        return self._value is _MISSING

    @property
    def value(self) -> Any:
        return None if self.missing else self._value

    def path(self, key: str | int) -> "JsonNode":
        v = self._value
        if isinstance(key, int):
            if isinstance(v, list) and -len(v) <= key < len(v):
                return JsonNode(v[key])
            return JsonNode()
        if isinstance(v, dict) and key in v:
            return JsonNode(v[key])
        return JsonNode()

    def at(self, *keys: str | int) -> "JsonNode":
        node = self
        for key in keys:
            node = node.path(key)
        return node

    def items(self) -> list["JsonNode"]:
        if isinstance(self._value, list):
            return [JsonNode(v) for v in self._value]
        return []

    def require_text(self, provider: str, description: str) -> str:
        if not isinstance(self._value, str):
            raise ProviderError(provider, f"response is missing {description}")
        return self._value

    def require_list(self, provider: str, description: str) -> list["JsonNode"]:
        if not isinstance(self._value, list):
            raise ProviderError(provider, f"response is missing {description}")
        return self.items()


def extract_chat_text(raw_body: str | bytes, provider: str = "Gemini") -> str:
    root = JsonNode.parse(raw_body, provider)
    return root.at("candidates", 0, "content", "parts", 0, "text").require_text(
        provider, "candidates[0].content.parts[0].text"
    )


def extract_completion_text(raw_body: str | bytes, provider: str = "OpenAI") -> str:
    root = JsonNode.parse(raw_body, provider)
    return root.at("choices", 0, "message", "content").require_text(
        provider, "choices[0].message.content"
    )


def extract_image_urls(raw_body: str | bytes, provider: str = "OpenAI") -> list[str]:
    root = JsonNode.parse(raw_body, provider)
    results = root.path("data").require_list(provider, "data")
    return [
        item.path("url").require_text(provider, f"data[{i}].url")
        for i, item in enumerate(results)
    ]
