"""Stored prompt templates."""

from portkey_client.models.prompts import (
    PromptCompletionRequest,
    PromptCompletionResponse,
    PromptRenderRequest,
    PromptRenderResponse,
)
from portkey_client.services.base import BaseService


class PromptsService(BaseService):

    async def execute(self, prompt_id: str, request: PromptCompletionRequest) -> PromptCompletionResponse:
        """Run a stored prompt with ``request.variables`` substituted."""
        self._log("Executing prompt", prompt_id=prompt_id, variables=sorted(request.variables))
        return await self._post(f"/prompts/{prompt_id}/completions", PromptCompletionResponse, request)

    async def render(self, prompt_id: str, request: PromptRenderRequest) -> PromptRenderResponse:
        return await self._post(f"/prompts/{prompt_id}/render", PromptRenderResponse, request)
