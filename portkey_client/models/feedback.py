"""Feedback types."""

from typing import Any

from portkey_client.models.common import PortkeyModel


class CreateFeedbackRequest(PortkeyModel):
    trace_id: str
    value: int  # -10 .. 10
    weight: float | None = None
    metadata: dict[str, Any] | None = None


class UpdateFeedbackRequest(PortkeyModel):
    value: int
    weight: float | None = None
    metadata: dict[str, Any] | None = None


class FeedbackResponse(PortkeyModel):
    status: str
    message: str | None = None
    feedback_ids: list[str] = []
