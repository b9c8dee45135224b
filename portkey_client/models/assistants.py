"""Assistant types. Tools are a union discriminated on ``type``."""

from typing import Annotated, Literal, Union

from pydantic import Field

from portkey_client.models.chat import FunctionDefinition, ResponseFormat
from portkey_client.models.common import ListResponse, PortkeyModel


class CodeInterpreterTool(PortkeyModel):
    type: Literal["code_interpreter"] = "code_interpreter"


class RetrievalTool(PortkeyModel):
    type: Literal["retrieval"] = "retrieval"


class FileSearchTool(PortkeyModel):
    type: Literal["file_search"] = "file_search"


class FunctionTool(PortkeyModel):
    type: Literal["function"] = "function"
    function: FunctionDefinition


AssistantTool = Annotated[
    Union[CodeInterpreterTool, RetrievalTool, FileSearchTool, FunctionTool],
    Field(discriminator="type"),
]


class CreateAssistantRequest(PortkeyModel):
    model: str
    name: str | None = None
    description: str | None = None
    instructions: str | None = None
    tools: list[AssistantTool] | None = None
    file_ids: list[str] | None = None
    metadata: dict[str, str] | None = None
    temperature: float | None = None
    top_p: float | None = None
    response_format: ResponseFormat | str | None = None


class ModifyAssistantRequest(PortkeyModel):
    model: str | None = None
    name: str | None = None
    description: str | None = None
    instructions: str | None = None
    tools: list[AssistantTool] | None = None
    file_ids: list[str] | None = None
    metadata: dict[str, str] | None = None
    temperature: float | None = None
    top_p: float | None = None
    response_format: ResponseFormat | str | None = None


class Assistant(PortkeyModel):
    id: str
    object: str = "assistant"
    created_at: int
    name: str | None = None
    description: str | None = None
    model: str
    instructions: str | None = None
    tools: list[AssistantTool] = []
    file_ids: list[str] = []
    metadata: dict[str, str] = {}
    temperature: float | None = None
    top_p: float | None = None
    response_format: ResponseFormat | str | None = None


class ListAssistantsResponse(ListResponse):
    data: list[Assistant]


class CreateAssistantFileRequest(PortkeyModel):
    file_id: str


class AssistantFile(PortkeyModel):
    id: str
    object: str = "assistant.file"
    created_at: int
    assistant_id: str


class ListAssistantFilesResponse(ListResponse):
    data: list[AssistantFile]
