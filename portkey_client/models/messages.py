"""Thread message types."""

from typing import Annotated, Literal, Union

from pydantic import Field

from portkey_client.models.common import ListResponse, PortkeyModel


class CreateMessageRequest(PortkeyModel):
    role: str = "user"
    content: str
    file_ids: list[str] | None = None
    metadata: dict[str, str] | None = None


class ModifyMessageRequest(PortkeyModel):
    metadata: dict[str, str] | None = None


class FileCitation(PortkeyModel):
    file_id: str
    quote: str | None = None


class FilePathRef(PortkeyModel):
    file_id: str


class FileCitationAnnotation(PortkeyModel):
    type: Literal["file_citation"] = "file_citation"
    text: str
    file_citation: FileCitation
    start_index: int
    end_index: int


class FilePathAnnotation(PortkeyModel):
    type: Literal["file_path"] = "file_path"
    text: str
    file_path: FilePathRef
    start_index: int
    end_index: int


Annotation = Annotated[Union[FileCitationAnnotation, FilePathAnnotation], Field(discriminator="type")]


class TextValue(PortkeyModel):
    value: str
    annotations: list[Annotation] = []


class ImageFileRef(PortkeyModel):
    file_id: str


class TextContent(PortkeyModel):
    type: Literal["text"] = "text"
    text: TextValue


class ImageFileContent(PortkeyModel):
    type: Literal["image_file"] = "image_file"
    image_file: ImageFileRef


MessageContent = Annotated[Union[TextContent, ImageFileContent], Field(discriminator="type")]


class Message(PortkeyModel):
    id: str
    object: str = "thread.message"
    created_at: int
    thread_id: str
    role: str
    content: list[MessageContent] = []
    assistant_id: str | None = None
    run_id: str | None = None
    file_ids: list[str] = []
    metadata: dict[str, str] = {}

    def text(self) -> str:
        """Concatenated text parts of the message."""
        return "".join(part.text.value for part in self.content if isinstance(part, TextContent))


class ListMessagesResponse(ListResponse):
    data: list[Message]


class MessageFile(PortkeyModel):
    id: str
    object: str = "thread.message.file"
    created_at: int
    message_id: str


class ListMessageFilesResponse(ListResponse):
    data: list[MessageFile]
