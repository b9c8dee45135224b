"""Stored responses and their input items."""

from portkey_client.client.pipeline import RequestDescriptor
from portkey_client.models.responses import (
    CreateResponseRequest,
    ListInputItemsParams,
    ListInputItemsResponse,
    Response,
)
from portkey_client.services.base import BaseService


class ResponsesService(BaseService):

    async def create(self, request: CreateResponseRequest) -> Response:
        return await self._post("/responses", Response, request)

    async def retrieve(self, response_id: str) -> Response:
        return await self._get(f"/responses/{response_id}", Response)

    async def delete(self, response_id: str) -> None:
        """The body of a successful delete is ignored."""
        await self._pipeline.execute(RequestDescriptor(method="DELETE", path=f"/responses/{response_id}"))
        self._log("Response deleted", response_id=response_id)

    async def list_input_items(
        self, response_id: str, params: ListInputItemsParams | None = None
    ) -> ListInputItemsResponse:
        query = params.to_query_params() if params else []
        return await self._get(f"/responses/{response_id}/input_items", ListInputItemsResponse, query)
