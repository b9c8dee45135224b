"""Embeddings."""

from portkey_client.models.embeddings import EmbeddingRequest, EmbeddingResponse
from portkey_client.services.base import BaseService


class EmbeddingsService(BaseService):

    async def create(self, request: EmbeddingRequest) -> EmbeddingResponse:
        self._log(
            "Creating embedding",
            model=request.model,
            encoding_format=request.encoding_format,
            dimensions=request.dimensions,
        )
        return await self._post("/embeddings", EmbeddingResponse, request)
