"""File upload and management."""

from portkey_client.client.pipeline import MultipartForm
from portkey_client.models.common import DeletionStatus
from portkey_client.models.files import FileObject, ListFilesResponse, UploadFileRequest
from portkey_client.services.base import BaseService


class FilesService(BaseService):

    async def upload(self, request: UploadFileRequest) -> FileObject:
        """POST /files as multipart (``file`` + ``purpose``)."""
        self._log("Uploading file", filename=request.filename, purpose=request.purpose, size=len(request.file))
        form = (
            MultipartForm()
            .add_file("file", request.filename, request.file, request.content_type)
            .add_text("purpose", request.purpose)
        )
        return await self._request("POST", "/files", FileObject, multipart=form)

    async def list(self) -> ListFilesResponse:
        return await self._get("/files", ListFilesResponse)

    async def retrieve(self, file_id: str) -> FileObject:
        return await self._get(f"/files/{file_id}", FileObject)

    async def retrieve_content(self, file_id: str) -> bytes:
        """Raw file bytes."""
        content = await self._bytes("GET", f"/files/{file_id}/content")
        self._log("File content retrieved", file_id=file_id, size=len(content))
        return content

    async def delete(self, file_id: str) -> DeletionStatus:
        return await self._delete(f"/files/{file_id}", DeletionStatus)
