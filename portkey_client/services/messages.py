"""Messages within assistant threads."""

from portkey_client.models.common import PaginationParams
from portkey_client.models.messages import (
    CreateMessageRequest,
    ListMessageFilesResponse,
    ListMessagesResponse,
    Message,
    MessageFile,
    ModifyMessageRequest,
)
from portkey_client.services.base import BaseService


class MessagesService(BaseService):

    async def create(self, thread_id: str, request: CreateMessageRequest) -> Message:
        self._log("Creating message", thread_id=thread_id, role=request.role)
        return await self._post(f"/threads/{thread_id}/messages", Message, request)

    async def retrieve(self, thread_id: str, message_id: str) -> Message:
        return await self._get(f"/threads/{thread_id}/messages/{message_id}", Message)

    async def modify(self, thread_id: str, message_id: str, request: ModifyMessageRequest) -> Message:
        return await self._post(f"/threads/{thread_id}/messages/{message_id}", Message, request)

    async def retrieve_file(self, thread_id: str, message_id: str, file_id: str) -> MessageFile:
        return await self._get(f"/threads/{thread_id}/messages/{message_id}/files/{file_id}", MessageFile)

    async def list_files(
        self, thread_id: str, message_id: str, params: PaginationParams | None = None
    ) -> ListMessageFilesResponse:
        query = params.to_query_params() if params else []
        return await self._get(f"/threads/{thread_id}/messages/{message_id}/files", ListMessageFilesResponse, query)

    async def list(self, thread_id: str, params: PaginationParams | None = None) -> ListMessagesResponse:
        query = params.to_query_params() if params else []
        return await self._get(f"/threads/{thread_id}/messages", ListMessagesResponse, query)
