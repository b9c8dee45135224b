"""Prompt template execution and rendering types."""

from typing import Any

from portkey_client.models.common import PortkeyModel


class PromptRenderRequest(PortkeyModel):
    variables: dict[str, Any] = {}
    max_tokens: int | None = None
    temperature: float | None = None
    presence_penalty: float | None = None
    frequency_penalty: float | None = None
    top_p: float | None = None
    stop: list[str] | None = None
    n: int | None = None
    logprobs: bool | None = None
    echo: bool | None = None
    best_of: int | None = None
    logit_bias: dict[str, int] | None = None
    user: str | None = None


class PromptCompletionRequest(PromptRenderRequest):
    stream: bool | None = None


class PromptCompletionResponse(PortkeyModel):
    status: str | None = None
    headers: dict[str, Any] | None = None
    body: Any = None


class PromptRenderResponse(PortkeyModel):
    success: bool
    data: Any = None
