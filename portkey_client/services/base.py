"""Base for resource services.

A service builds a ``RequestDescriptor`` for one endpoint, hands it to the
shared ``RequestPipeline`` and decodes the successful body.
"""

from typing import Any, TypeVar

from pydantic import BaseModel

from portkey_client.client.pipeline import MultipartForm, RequestDescriptor, RequestPipeline
from portkey_client.logging.structured import get_logger

ModelT = TypeVar("ModelT", bound=BaseModel)

logger = get_logger("service")


class BaseService:
    """Shared request helpers for the endpoint-specific services."""

    def __init__(self, pipeline: RequestPipeline):
        self._pipeline = pipeline

    async def _request(
        self,
        method: str,
        path: str,
        model: type[ModelT],
        *,
        json_body: Any = None,
        query: list[tuple[str, str]] | None = None,
        multipart: MultipartForm | None = None,
    ) -> ModelT:
        descriptor = RequestDescriptor(
            method=method,
            path=path,
            query=query or [],
            json_body=json_body,
            multipart=multipart,
        )
        response = await self._pipeline.execute(descriptor)
        return self._pipeline.parse_json(response, model)

    async def _get(self, path: str, model: type[ModelT], query: list[tuple[str, str]] | None = None) -> ModelT:
        return await self._request("GET", path, model, query=query)

    async def _post(self, path: str, model: type[ModelT], json_body: Any = None) -> ModelT:
        return await self._request("POST", path, model, json_body=json_body)

    async def _delete(self, path: str, model: type[ModelT]) -> ModelT:
        return await self._request("DELETE", path, model)

    async def _bytes(self, method: str, path: str, json_body: Any = None) -> bytes:
        response = await self._pipeline.execute(RequestDescriptor(method=method, path=path, json_body=json_body))
        return self._pipeline.read_bytes(response)

    @staticmethod
    def _log(message: str, **fields: Any) -> None:
        logger.debug(message, extra={"log_data": fields})
