"""Model catalogue."""

from portkey_client.models.models import ListModelsParams, ListModelsResponse
from portkey_client.services.base import BaseService


class ModelsService(BaseService):

    async def list(self, params: ListModelsParams | None = None) -> ListModelsResponse:
        """GET /models, optionally filtered by service/provider and paged by offset."""
        query = params.to_query_params() if params else []
        response = await self._get("/models", ListModelsResponse, query)
        self._log("Models listed", count=len(response.data))
        return response
