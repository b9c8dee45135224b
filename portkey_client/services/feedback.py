"""Feedback on traced requests."""

from portkey_client.models.feedback import CreateFeedbackRequest, FeedbackResponse, UpdateFeedbackRequest
from portkey_client.services.base import BaseService


class FeedbackService(BaseService):

    async def create(self, request: CreateFeedbackRequest) -> FeedbackResponse:
        self._log("Submitting feedback", trace_id=request.trace_id, value=request.value)
        return await self._post("/feedback", FeedbackResponse, request)

    async def update(self, feedback_id: str, request: UpdateFeedbackRequest) -> FeedbackResponse:
        return await self._request("PATCH", f"/feedback/{feedback_id}", FeedbackResponse, json_body=request)
