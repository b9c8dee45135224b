"""File upload and management types."""

from dataclasses import dataclass, field

from portkey_client.models.common import PortkeyModel


@dataclass
class UploadFileRequest:
    file: bytes = field(repr=False)
    filename: str
    purpose: str  # e.g. "batch", "fine-tune", "assistants"
    content_type: str = "application/octet-stream"


class FileObject(PortkeyModel):
    id: str
    object: str = "file"
    bytes: int
    created_at: int
    filename: str
    purpose: str
    status: str | None = None
    status_details: str | None = None


class ListFilesResponse(PortkeyModel):
    object: str = "list"
    data: list[FileObject]
