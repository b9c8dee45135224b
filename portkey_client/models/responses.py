"""Stored response types."""

from dataclasses import dataclass
from typing import Any

from portkey_client.models.common import PortkeyModel


class CreateResponseRequest(PortkeyModel):
    trace_id: str | None = None
    metadata: dict[str, Any] | None = None
    model: str | None = None
    provider: str | None = None
    status: str | None = None
    request: Any = None
    response: Any = None
    total_tokens: int | None = None
    prompt_tokens: int | None = None
    completion_tokens: int | None = None
    latency_ms: int | None = None
    cost: float | None = None


class Response(CreateResponseRequest):
    id: str
    created_at: str | None = None
    updated_at: str | None = None


class InputItem(PortkeyModel):
    id: str
    response_id: str | None = None
    created_at: str | None = None
    role: str | None = None
    content: Any = None
    metadata: dict[str, Any] | None = None


class ListInputItemsResponse(PortkeyModel):
    data: list[InputItem]
    total: int | None = None
    has_more: bool | None = None


@dataclass
class ListInputItemsParams:
    limit: int | None = None
    offset: int | None = None

    def to_query_params(self) -> list[tuple[str, str]]:
        params = []
        if self.limit is not None:
            params.append(("limit", str(self.limit)))
        if self.offset is not None:
            params.append(("offset", str(self.offset)))
        return params
