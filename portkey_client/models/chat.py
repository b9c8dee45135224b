"""Chat completion request/response types and structured-output helpers."""

import json
from typing import Any, Literal

from pydantic import BaseModel, Field, ValidationError

from portkey_client.client.errors import SerializationError
from portkey_client.models.common import PortkeyModel


class FunctionDefinition(PortkeyModel):
    name: str
    description: str | None = None
    parameters: dict[str, Any] | None = None
    strict: bool | None = None


class ChatTool(PortkeyModel):
    type: Literal["function"] = "function"
    function: FunctionDefinition


class FunctionCall(PortkeyModel):
    name: str
    arguments: str


class ToolCall(PortkeyModel):
    id: str
    type: str = "function"
    function: FunctionCall


class ChatMessage(PortkeyModel):
    role: Literal["system", "user", "assistant", "tool", "developer"]
    content: str | list[dict[str, Any]] | None = None
    name: str | None = None
    tool_calls: list[ToolCall] | None = None
    tool_call_id: str | None = None

    @classmethod
    def system(cls, content: str) -> "ChatMessage":
        return cls(role="system", content=content)

    @classmethod
    def user(cls, content: str | list[dict[str, Any]]) -> "ChatMessage":
        return cls(role="user", content=content)

    @classmethod
    def assistant(cls, content: str | None = None, tool_calls: list[ToolCall] | None = None) -> "ChatMessage":
        return cls(role="assistant", content=content, tool_calls=tool_calls)

    @classmethod
    def tool(cls, tool_call_id: str, content: str) -> "ChatMessage":
        return cls(role="tool", tool_call_id=tool_call_id, content=content)


class JsonSchemaFormat(PortkeyModel):
    name: str
    description: str | None = None
    schema_: dict[str, Any] | None = Field(default=None, alias="schema")
    strict: bool | None = None


class ResponseFormat(PortkeyModel):
    """``text``, ``json_object``, or ``json_schema`` output format."""

    type: Literal["text", "json_object", "json_schema"] = "text"
    json_schema: JsonSchemaFormat | None = None

    @classmethod
    def text(cls) -> "ResponseFormat":
        return cls(type="text")

    @classmethod
    def json_object(cls) -> "ResponseFormat":
        return cls(type="json_object")

    @classmethod
    def json_schema_for(
        cls,
        model: "type[BaseModel]",
        name: str | None = None,
        description: str | None = None,
        strict: bool | None = None,
    ) -> "ResponseFormat":
        """Structured-output format whose schema is generated from a pydantic model."""
        return cls(
            type="json_schema",
            json_schema=JsonSchemaFormat(
                name=name or model.__name__,
                description=description,
                schema=model.model_json_schema(),
                strict=strict,
            ),
        )


class ChatCompletionRequest(PortkeyModel):
    model: str
    messages: list[ChatMessage]
    temperature: float | None = None
    top_p: float | None = None
    n: int | None = None
    stream: bool | None = None
    stop: str | list[str] | None = None
    max_tokens: int | None = None
    max_completion_tokens: int | None = None
    presence_penalty: float | None = None
    frequency_penalty: float | None = None
    logit_bias: dict[str, int] | None = None
    logprobs: bool | None = None
    top_logprobs: int | None = None
    user: str | None = None
    seed: int | None = None
    tools: list[ChatTool] | None = None
    tool_choice: str | dict[str, Any] | None = None
    parallel_tool_calls: bool | None = None
    response_format: ResponseFormat | None = None


class ChatResponseMessage(PortkeyModel):
    role: str = "assistant"
    content: str | None = None
    refusal: str | None = None
    tool_calls: list[ToolCall] | None = None

    def parse_content(self, model: type[BaseModel]):
        """Decode structured-output content into ``model``; ``None`` when empty."""
        if not self.content:
            return None
        try:
            return model.model_validate_json(self.content)
        except ValidationError as e:
            raise SerializationError(f"Failed to decode {model.__name__} from message content: {e}") from e

    def tool_arguments(self) -> list[dict[str, Any]]:
        """JSON-decoded arguments of every tool call, in order."""
        out = []
        for call in self.tool_calls or []:
            try:
                out.append(json.loads(call.function.arguments))
            except ValueError as e:
                raise SerializationError(f"Invalid arguments for tool call {call.id}: {e}") from e
        return out


class ChatChoice(PortkeyModel):
    index: int
    message: ChatResponseMessage
    finish_reason: str | None = None
    logprobs: dict[str, Any] | None = None


class Usage(PortkeyModel):
    prompt_tokens: int = 0
    completion_tokens: int = 0
    total_tokens: int = 0


class ChatCompletionResponse(PortkeyModel):
    id: str
    object: str = "chat.completion"
    created: int
    model: str
    choices: list[ChatChoice]
    usage: Usage | None = None
    system_fingerprint: str | None = None

    def first_content(self) -> str | None:
        if not self.choices:
            return None
        return self.choices[0].message.content
