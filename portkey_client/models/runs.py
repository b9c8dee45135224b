"""Run and run step types."""

from typing import Annotated, Any, Literal, Union

from pydantic import Field

from portkey_client.models.assistants import AssistantTool
from portkey_client.models.chat import ResponseFormat, ToolCall
from portkey_client.models.common import ListResponse, PortkeyModel


class AutoTruncation(PortkeyModel):
    type: Literal["auto"] = "auto"


class LastMessagesTruncation(PortkeyModel):
    type: Literal["last_messages"] = "last_messages"
    last_messages: int


TruncationStrategy = Annotated[Union[AutoTruncation, LastMessagesTruncation], Field(discriminator="type")]


class CreateRunRequest(PortkeyModel):
    assistant_id: str
    model: str | None = None
    instructions: str | None = None
    additional_instructions: str | None = None
    tools: list[AssistantTool] | None = None
    metadata: dict[str, str] | None = None
    temperature: float | None = None
    top_p: float | None = None
    max_prompt_tokens: int | None = None
    max_completion_tokens: int | None = None
    truncation_strategy: TruncationStrategy | None = None
    tool_choice: str | dict[str, Any] | None = None  # "auto" | "none" | "required" | {"type": "function", ...}
    response_format: ResponseFormat | str | None = None
    thread: dict[str, Any] | None = None  # only for /threads/runs


class ModifyRunRequest(PortkeyModel):
    metadata: dict[str, str] | None = None


class ToolOutput(PortkeyModel):
    tool_call_id: str
    output: str


class SubmitToolOutputsRequest(PortkeyModel):
    tool_outputs: list[ToolOutput]


class SubmitToolOutputs(PortkeyModel):
    tool_calls: list[ToolCall]


class RequiredAction(PortkeyModel):
    type: str = "submit_tool_outputs"
    submit_tool_outputs: SubmitToolOutputs


class RunError(PortkeyModel):
    code: str
    message: str


class RunUsage(PortkeyModel):
    completion_tokens: int = 0
    prompt_tokens: int = 0
    total_tokens: int = 0


class Run(PortkeyModel):
    id: str
    object: str = "thread.run"
    created_at: int
    thread_id: str
    assistant_id: str
    status: str
    required_action: RequiredAction | None = None
    last_error: RunError | None = None
    expires_at: int | None = None
    started_at: int | None = None
    cancelled_at: int | None = None
    failed_at: int | None = None
    completed_at: int | None = None
    model: str
    instructions: str | None = None
    tools: list[AssistantTool] = []
    file_ids: list[str] = []
    metadata: dict[str, str] = {}
    usage: RunUsage | None = None
    temperature: float | None = None
    top_p: float | None = None
    max_prompt_tokens: int | None = None
    max_completion_tokens: int | None = None
    truncation_strategy: TruncationStrategy | None = None
    tool_choice: str | dict[str, Any] | None = None
    response_format: ResponseFormat | str | None = None

    @property
    def is_terminal(self) -> bool:
        return self.status in ("completed", "failed", "cancelled", "expired", "incomplete")


class ListRunsResponse(ListResponse):
    data: list[Run]


class MessageCreation(PortkeyModel):
    message_id: str


class MessageCreationDetails(PortkeyModel):
    type: Literal["message_creation"] = "message_creation"
    message_creation: MessageCreation


class ToolCallsDetails(PortkeyModel):
    type: Literal["tool_calls"] = "tool_calls"
    tool_calls: list[dict[str, Any]]


StepDetails = Annotated[Union[MessageCreationDetails, ToolCallsDetails], Field(discriminator="type")]


class RunStep(PortkeyModel):
    id: str
    object: str = "thread.run.step"
    created_at: int
    assistant_id: str
    thread_id: str
    run_id: str
    type: str
    status: str
    step_details: StepDetails
    last_error: RunError | None = None
    expired_at: int | None = None
    cancelled_at: int | None = None
    failed_at: int | None = None
    completed_at: int | None = None
    metadata: dict[str, str] = {}
    usage: RunUsage | None = None


class ListRunStepsResponse(ListResponse):
    data: list[RunStep]
