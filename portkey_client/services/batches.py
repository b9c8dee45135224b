"""Batch jobs."""

from portkey_client.models.batches import Batch, CreateBatchRequest, ListBatchesResponse
from portkey_client.services.base import BaseService


class BatchesService(BaseService):

    async def create(self, request: CreateBatchRequest) -> Batch:
        self._log("Creating batch", input_file_id=request.input_file_id, endpoint=request.endpoint)
        return await self._post("/batches", Batch, request)

    async def retrieve(self, batch_id: str) -> Batch:
        return await self._get(f"/batches/{batch_id}", Batch)

    async def cancel(self, batch_id: str) -> Batch:
        return await self._post(f"/batches/{batch_id}/cancel", Batch)

    async def list(self, after: str | None = None, limit: int | None = None) -> ListBatchesResponse:
        query = []
        if after is not None:
            query.append(("after", after))
        if limit is not None:
            query.append(("limit", str(limit)))
        return await self._get("/batches", ListBatchesResponse, query)
