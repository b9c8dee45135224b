"""Shared model base and pagination parameters."""

from dataclasses import dataclass

from pydantic import BaseModel, ConfigDict


class PortkeyModel(BaseModel):
    """Base for request and response bodies.

    Unknown fields from the gateway are kept rather than rejected, so new
    API fields never break decoding.
    """

    model_config = ConfigDict(extra="allow", populate_by_name=True)


class DeletionStatus(PortkeyModel):
    id: str
    object: str
    deleted: bool


class ListResponse(PortkeyModel):
    """Cursor-paginated list envelope."""

    object: str = "list"
    first_id: str | None = None
    last_id: str | None = None
    has_more: bool = False


@dataclass
class PaginationParams:
    """Cursor pagination for list endpoints. Unset values are not sent."""

    limit: int | None = None
    order: str | None = None  # "asc" | "desc"
    after: str | None = None
    before: str | None = None

    def to_query_params(self) -> list[tuple[str, str]]:
        params = []
        if self.limit is not None:
            params.append(("limit", str(self.limit)))
        if self.order is not None:
            params.append(("order", self.order))
        if self.after is not None:
            params.append(("after", self.after))
        if self.before is not None:
            params.append(("before", self.before))
        return params
