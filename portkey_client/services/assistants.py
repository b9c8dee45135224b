"""Assistants and assistant files."""

from portkey_client.models.assistants import (
    Assistant,
    AssistantFile,
    CreateAssistantFileRequest,
    CreateAssistantRequest,
    ListAssistantFilesResponse,
    ListAssistantsResponse,
    ModifyAssistantRequest,
)
from portkey_client.models.common import DeletionStatus, PaginationParams
from portkey_client.services.base import BaseService


class AssistantsService(BaseService):

    async def create(self, request: CreateAssistantRequest) -> Assistant:
        self._log("Creating assistant", model=request.model, name=request.name)
        return await self._post("/assistants", Assistant, request)

    async def retrieve(self, assistant_id: str) -> Assistant:
        return await self._get(f"/assistants/{assistant_id}", Assistant)

    async def modify(self, assistant_id: str, request: ModifyAssistantRequest) -> Assistant:
        return await self._post(f"/assistants/{assistant_id}", Assistant, request)

    async def delete(self, assistant_id: str) -> DeletionStatus:
        return await self._delete(f"/assistants/{assistant_id}", DeletionStatus)

    async def create_file(self, assistant_id: str, request: CreateAssistantFileRequest) -> AssistantFile:
        return await self._post(f"/assistants/{assistant_id}/files", AssistantFile, request)

    async def retrieve_file(self, assistant_id: str, file_id: str) -> AssistantFile:
        return await self._get(f"/assistants/{assistant_id}/files/{file_id}", AssistantFile)

    async def delete_file(self, assistant_id: str, file_id: str) -> DeletionStatus:
        return await self._delete(f"/assistants/{assistant_id}/files/{file_id}", DeletionStatus)

    async def list_files(
        self, assistant_id: str, params: PaginationParams | None = None
    ) -> ListAssistantFilesResponse:
        query = params.to_query_params() if params else []
        return await self._get(f"/assistants/{assistant_id}/files", ListAssistantFilesResponse, query)

    async def list(self, params: PaginationParams | None = None) -> ListAssistantsResponse:
        query = params.to_query_params() if params else []
        return await self._get("/assistants", ListAssistantsResponse, query)
