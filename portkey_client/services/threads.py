"""Assistant threads."""

from portkey_client.models.common import DeletionStatus
from portkey_client.models.threads import CreateThreadRequest, ModifyThreadRequest, Thread
from portkey_client.services.base import BaseService


class ThreadsService(BaseService):

    async def create(self, request: CreateThreadRequest | None = None) -> Thread:
        thread = await self._post("/threads", Thread, request or CreateThreadRequest())
        self._log("Thread created", thread_id=thread.id)
        return thread

    async def retrieve(self, thread_id: str) -> Thread:
        return await self._get(f"/threads/{thread_id}", Thread)

    async def modify(self, thread_id: str, request: ModifyThreadRequest) -> Thread:
        return await self._post(f"/threads/{thread_id}", Thread, request)

    async def delete(self, thread_id: str) -> DeletionStatus:
        return await self._delete(f"/threads/{thread_id}", DeletionStatus)
