"""Model catalogue types."""

from dataclasses import dataclass
from typing import Literal

from portkey_client.models.common import PortkeyModel


@dataclass
class ListModelsParams:
    ai_service: str | None = None
    provider: str | None = None
    limit: int | None = None
    offset: int | None = None
    sort: Literal["name", "provider", "ai_service"] | None = None
    order: Literal["asc", "desc"] | None = None

    def to_query_params(self) -> list[tuple[str, str]]:
        params = []
        for name in ("ai_service", "provider", "limit", "offset", "sort", "order"):
            value = getattr(self, name)
            if value is not None:
                params.append((name, str(value)))
        return params


class Model(PortkeyModel):
    id: str
    object: str = "model"
    created: int | None = None
    owned_by: str | None = None


class ListModelsResponse(PortkeyModel):
    object: str = "list"
    data: list[Model]
