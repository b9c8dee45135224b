"""Custom log insertion and log export types."""

from typing import Any, Literal

from portkey_client.models.common import PortkeyModel

ExportStatus = Literal["draft", "in_progress", "success", "failed", "stopped"]

LogExportField = Literal[
    "id", "trace_id", "created_at", "request", "response", "is_success",
    "ai_org", "ai_model", "req_units", "res_units", "total_units",
    "request_url", "cost", "cost_currency", "response_time",
    "response_status_code", "mode", "config", "prompt_slug", "metadata",
]


class GenerationsFilter(PortkeyModel):
    time_of_generation_min: str | None = None
    time_of_generation_max: str | None = None
    total_units_min: int | None = None
    total_units_max: int | None = None
    cost_min: float | None = None
    cost_max: float | None = None
    ai_model: str | None = None
    prompt_token_min: int | None = None
    prompt_token_max: int | None = None
    completion_token_min: int | None = None
    completion_token_max: int | None = None
    status_code: str | None = None
    metadata: dict[str, Any] | None = None
    ai_org_model: str | None = None
    weighted_feedback_min: float | None = None
    weighted_feedback_max: float | None = None
    virtual_keys: str | None = None
    trace_id: str | None = None
    configs: str | None = None
    workspace_slug: str | None = None
    prompt_slug: str | None = None
    page_size: int | None = None
    current_page: int | None = None


class CreateLogExportRequest(PortkeyModel):
    workspace_id: str | None = None
    filters: GenerationsFilter = GenerationsFilter()
    requested_data: list[LogExportField]
    description: str | None = None


class UpdateLogExportRequest(PortkeyModel):
    workspace_id: str | None = None
    filters: GenerationsFilter = GenerationsFilter()
    requested_data: list[LogExportField] | None = None


class LogExportSummary(PortkeyModel):
    """Body returned by export create and update."""

    id: str
    total: int = 0
    object: str = "export"


class LogExport(PortkeyModel):
    id: str
    organisation_id: str | None = None
    filters: GenerationsFilter | None = None
    requested_data: list[str] = []
    status: str
    description: str | None = None
    created_at: str | None = None
    last_updated_at: str | None = None
    created_by: str | None = None
    workspace_id: str | None = None
    object: str = "export"


class ListLogExportsResponse(PortkeyModel):
    object: str = "list"
    total: int = 0
    data: list[LogExport]


class ExportTaskResponse(PortkeyModel):
    message: str
    object: str = "export"


class DownloadLogExportResponse(PortkeyModel):
    signed_url: str


class LogRequest(PortkeyModel):
    url: str
    method: str | None = None
    headers: dict[str, str] | None = None
    body: Any = None


class LogResponse(PortkeyModel):
    status: int | None = None
    headers: dict[str, str] | None = None
    body: Any = None
    response_time: int | None = None


class LogMetadata(PortkeyModel):
    """Known tracing keys; any other key is kept as an extra field."""

    trace_id: str | None = None
    span_id: str | None = None
    span_name: str | None = None


class CustomLog(PortkeyModel):
    request: LogRequest
    response: LogResponse
    metadata: LogMetadata | None = None


class InsertLogResponse(PortkeyModel):
    status: str
    log_ids: list[str] | None = None
