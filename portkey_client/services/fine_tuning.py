"""Fine-tuning jobs, events and checkpoints."""

from portkey_client.models.common import PaginationParams
from portkey_client.models.fine_tuning import (
    CreateFineTuningJobRequest,
    FineTuningJob,
    ListFineTuningJobCheckpointsResponse,
    ListFineTuningJobEventsResponse,
    ListFineTuningJobsResponse,
)
from portkey_client.services.base import BaseService


class FineTuningService(BaseService):

    async def create_job(self, request: CreateFineTuningJobRequest) -> FineTuningJob:
        self._log("Creating fine-tuning job", model=request.model, training_file=request.training_file)
        return await self._post("/fine_tuning/jobs", FineTuningJob, request)

    async def list_jobs(self, params: PaginationParams | None = None) -> ListFineTuningJobsResponse:
        query = params.to_query_params() if params else []
        return await self._get("/fine_tuning/jobs", ListFineTuningJobsResponse, query)

    async def retrieve_job(self, job_id: str) -> FineTuningJob:
        return await self._get(f"/fine_tuning/jobs/{job_id}", FineTuningJob)

    async def cancel_job(self, job_id: str) -> FineTuningJob:
        return await self._post(f"/fine_tuning/jobs/{job_id}/cancel", FineTuningJob)

    async def list_events(
        self, job_id: str, params: PaginationParams | None = None
    ) -> ListFineTuningJobEventsResponse:
        query = params.to_query_params() if params else []
        return await self._get(f"/fine_tuning/jobs/{job_id}/events", ListFineTuningJobEventsResponse, query)

    async def list_checkpoints(
        self, job_id: str, params: PaginationParams | None = None
    ) -> ListFineTuningJobCheckpointsResponse:
        query = params.to_query_params() if params else []
        return await self._get(f"/fine_tuning/jobs/{job_id}/checkpoints", ListFineTuningJobCheckpointsResponse, query)
