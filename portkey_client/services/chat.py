"""Chat completions."""

from portkey_client.models.chat import ChatCompletionRequest, ChatCompletionResponse
from portkey_client.services.base import BaseService


class ChatService(BaseService):

    async def create_completion(self, request: ChatCompletionRequest) -> ChatCompletionResponse:
        """POST /chat/completions"""
        self._log("Creating chat completion", model=request.model, messages_count=len(request.messages))
        response = await self._post("/chat/completions", ChatCompletionResponse, request)
        self._log("Chat completion created", id=response.id, choices_count=len(response.choices))
        return response
