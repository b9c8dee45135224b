"""Runs and run steps."""

from portkey_client.models.common import PaginationParams
from portkey_client.models.runs import (
    CreateRunRequest,
    ListRunsResponse,
    ListRunStepsResponse,
    ModifyRunRequest,
    Run,
    RunStep,
    SubmitToolOutputsRequest,
)
from portkey_client.services.base import BaseService


class RunsService(BaseService):

    async def create(self, thread_id: str, request: CreateRunRequest) -> Run:
        self._log("Creating run", thread_id=thread_id, assistant_id=request.assistant_id)
        return await self._post(f"/threads/{thread_id}/runs", Run, request)

    async def retrieve(self, thread_id: str, run_id: str) -> Run:
        return await self._get(f"/threads/{thread_id}/runs/{run_id}", Run)

    async def modify(self, thread_id: str, run_id: str, request: ModifyRunRequest) -> Run:
        return await self._post(f"/threads/{thread_id}/runs/{run_id}", Run, request)

    async def submit_tool_outputs(self, thread_id: str, run_id: str, request: SubmitToolOutputsRequest) -> Run:
        self._log("Submitting tool outputs", thread_id=thread_id, run_id=run_id, count=len(request.tool_outputs))
        return await self._post(f"/threads/{thread_id}/runs/{run_id}/submit_tool_outputs", Run, request)

    async def cancel(self, thread_id: str, run_id: str) -> Run:
        return await self._post(f"/threads/{thread_id}/runs/{run_id}/cancel", Run)

    async def create_thread_and_run(self, request: CreateRunRequest) -> Run:
        return await self._post("/threads/runs", Run, request)

    async def retrieve_step(self, thread_id: str, run_id: str, step_id: str) -> RunStep:
        return await self._get(f"/threads/{thread_id}/runs/{run_id}/steps/{step_id}", RunStep)

    async def list_steps(
        self, thread_id: str, run_id: str, params: PaginationParams | None = None
    ) -> ListRunStepsResponse:
        query = params.to_query_params() if params else []
        return await self._get(f"/threads/{thread_id}/runs/{run_id}/steps", ListRunStepsResponse, query)

    async def list(self, thread_id: str, params: PaginationParams | None = None) -> ListRunsResponse:
        query = params.to_query_params() if params else []
        return await self._get(f"/threads/{thread_id}/runs", ListRunsResponse, query)
