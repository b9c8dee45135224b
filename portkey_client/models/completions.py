"""Legacy text completion types."""

from portkey_client.models.chat import Usage
from portkey_client.models.common import PortkeyModel


class CompletionRequest(PortkeyModel):
    model: str
    prompt: str | list[str] | None = None
    max_tokens: int | None = None
    temperature: float | None = None
    top_p: float | None = None
    n: int | None = None
    stream: bool | None = None
    logprobs: int | None = None
    echo: bool | None = None
    stop: str | list[str] | None = None
    frequency_penalty: float | None = None
    presence_penalty: float | None = None
    best_of: int | None = None
    logit_bias: dict[str, int] | None = None
    user: str | None = None
    suffix: str | None = None
    seed: int | None = None


class CompletionLogprobs(PortkeyModel):
    tokens: list[str] | None = None
    token_logprobs: list[float | None] | None = None
    text_offset: list[int] | None = None
    top_logprobs: list[dict[str, float] | None] | None = None


class CompletionChoice(PortkeyModel):
    text: str
    index: int
    finish_reason: str | None = None
    logprobs: CompletionLogprobs | None = None


class CompletionResponse(PortkeyModel):
    id: str
    object: str = "text_completion"
    created: int
    model: str
    choices: list[CompletionChoice]
    usage: Usage | None = None
    system_fingerprint: str | None = None
