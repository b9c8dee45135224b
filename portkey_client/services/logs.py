"""Custom log ingestion and log exports."""

from portkey_client.models.logs import (
    CreateLogExportRequest,
    CustomLog,
    DownloadLogExportResponse,
    ExportTaskResponse,
    InsertLogResponse,
    ListLogExportsResponse,
    LogExport,
    LogExportSummary,
    UpdateLogExportRequest,
)
from portkey_client.services.base import BaseService


class LogsService(BaseService):

    async def insert(self, logs: CustomLog | list[CustomLog]) -> InsertLogResponse:
        """POST /logs with one log object or an array of them."""
        count = len(logs) if isinstance(logs, list) else 1
        self._log("Inserting custom logs", count=count)
        return await self._post("/logs", InsertLogResponse, logs)

    async def create_export(self, request: CreateLogExportRequest) -> LogExportSummary:
        return await self._post("/logs/exports", LogExportSummary, request)

    async def retrieve_export(self, export_id: str) -> LogExport:
        return await self._get(f"/logs/exports/{export_id}", LogExport)

    async def update_export(self, export_id: str, request: UpdateLogExportRequest) -> LogExportSummary:
        return await self._request("PUT", f"/logs/exports/{export_id}", LogExportSummary, json_body=request)

    async def list_exports(self, workspace_id: str | None = None) -> ListLogExportsResponse:
        query = [("workspace_id", workspace_id)] if workspace_id is not None else []
        return await self._get("/logs/exports", ListLogExportsResponse, query)

    async def start_export(self, export_id: str) -> ExportTaskResponse:
        self._log("Starting log export", export_id=export_id)
        return await self._post(f"/logs/exports/{export_id}/start", ExportTaskResponse)

    async def cancel_export(self, export_id: str) -> ExportTaskResponse:
        return await self._post(f"/logs/exports/{export_id}/cancel", ExportTaskResponse)

    async def download_export(self, export_id: str) -> DownloadLogExportResponse:
        return await self._get(f"/logs/exports/{export_id}/download", DownloadLogExportResponse)
