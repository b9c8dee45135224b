"""Content moderation."""

from portkey_client.models.moderations import ModerationRequest, ModerationResponse
from portkey_client.services.base import BaseService


class ModerationsService(BaseService):

    async def create(self, request: ModerationRequest) -> ModerationResponse:
        self._log("Creating moderation", model=request.model)
        return await self._post("/moderations", ModerationResponse, request)
