from typing import Union

from pydantic import BaseModel, ConfigDict, Field

from app.core.providers import ProviderIdentity


class ChatResult(BaseModel):
    text: str


class ImageResult(BaseModel):
    urls: list[str] = Field(default_factory=list)


class Failure(BaseModel):
    model_config = ConfigDict(arbitrary_types_allowed=True)

    provider: ProviderIdentity
    reason: str
    cause: BaseException | None = None


ProviderCallOutcome = Union[ChatResult, ImageResult, Failure]
