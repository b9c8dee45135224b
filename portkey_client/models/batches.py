"""Batch job types."""

from portkey_client.models.common import ListResponse, PortkeyModel


class CreateBatchRequest(PortkeyModel):
    input_file_id: str
    endpoint: str  # e.g. "/v1/chat/completions"
    completion_window: str = "24h"
    metadata: dict[str, str] | None = None


class BatchError(PortkeyModel):
    code: str | None = None
    message: str | None = None
    param: str | None = None
    line: int | None = None


class BatchErrors(PortkeyModel):
    object: str = "list"
    data: list[BatchError] = []


class BatchRequestCounts(PortkeyModel):
    total: int = 0
    completed: int = 0
    failed: int = 0


class Batch(PortkeyModel):
    id: str
    object: str = "batch"
    endpoint: str
    errors: BatchErrors | None = None
    input_file_id: str
    completion_window: str
    status: str
    output_file_id: str | None = None
    error_file_id: str | None = None
    created_at: int
    in_progress_at: int | None = None
    expires_at: int | None = None
    finalizing_at: int | None = None
    completed_at: int | None = None
    failed_at: int | None = None
    expired_at: int | None = None
    cancelling_at: int | None = None
    cancelled_at: int | None = None
    request_counts: BatchRequestCounts | None = None
    metadata: dict[str, str] | None = None


class ListBatchesResponse(ListResponse):
    data: list[Batch]
