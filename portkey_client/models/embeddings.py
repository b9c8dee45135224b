"""Embedding types."""

from typing import Literal

from portkey_client.models.common import PortkeyModel


class EmbeddingRequest(PortkeyModel):
    model: str
    input: str | list[str] | list[int] | list[list[int]]
    encoding_format: Literal["float", "base64"] | None = None
    dimensions: int | None = None
    user: str | None = None


class Embedding(PortkeyModel):
    object: str = "embedding"
    index: int
    embedding: list[float] | str  # str when encoding_format="base64"


class EmbeddingUsage(PortkeyModel):
    prompt_tokens: int = 0
    total_tokens: int = 0


class EmbeddingResponse(PortkeyModel):
    object: str = "list"
    data: list[Embedding]
    model: str
    usage: EmbeddingUsage | None = None
