"""Legacy text completions."""

from portkey_client.models.completions import CompletionRequest, CompletionResponse
from portkey_client.services.base import BaseService


class CompletionsService(BaseService):

    async def create(self, request: CompletionRequest) -> CompletionResponse:
        self._log("Creating completion", model=request.model)
        return await self._post("/completions", CompletionResponse, request)
