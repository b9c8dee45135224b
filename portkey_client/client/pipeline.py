"""Request pipeline: URL assembly, gateway headers, dispatch, classification.

Every client operation is a single pass through ``RequestPipeline.execute``:

    build_url -> build_headers -> encode body -> send once -> classify status

No retries, no caching. Responses with status >= 400 are turned into
``APIError`` before any caller sees the body.
"""

import json
from dataclasses import dataclass, field
from typing import Any, TypeVar

import httpx
from pydantic import BaseModel, ValidationError

from portkey_client.client.auth import auth_headers, describe
from portkey_client.client.config import ClientConfig
from portkey_client.client.errors import APIError, SerializationError, TransportError, URLError
from portkey_client.logging.structured import (
    RequestTimer,
    generate_request_id,
    get_logger,
    request_id_var,
)

logger = get_logger("client")

ModelT = TypeVar("ModelT", bound=BaseModel)


@dataclass
class MultipartForm:
    """Multipart body for binary uploads (audio, images, file content).

    Text fields keep insertion order and may repeat a name
    (e.g. ``timestamp_granularities[]``).
    """

    fields: list[tuple[str, str]] = field(default_factory=list)
    files: list[tuple[str, tuple[str, bytes, str]]] = field(default_factory=list)

    def add_text(self, name: str, value: Any) -> "MultipartForm":
        self.fields.append((name, value if isinstance(value, str) else str(value)))
        return self

    def add_file(
        self,
        name: str,
        filename: str,
        content: bytes,
        content_type: str = "application/octet-stream",
    ) -> "MultipartForm":
        self.files.append((name, (filename, content, content_type)))
        return self

    def data(self) -> dict[str, str | list[str]]:
        """Text fields in the shape httpx expects; repeated names become lists."""
        out: dict[str, str | list[str]] = {}
        for name, value in self.fields:
            if name in out:
                existing = out[name]
                out[name] = existing + [value] if isinstance(existing, list) else [existing, value]
            else:
                out[name] = value
        return out


@dataclass(frozen=True)
class RequestDescriptor:
    """One logical API call. Built fresh per call, never reused."""

    method: str
    path: str
    query: list[tuple[str, str]] = field(default_factory=list)
    json_body: Any = None
    multipart: MultipartForm | None = None
    override_timeout: float | None = None

    def __post_init__(self):
        if self.json_body is not None and self.multipart is not None:
            raise ValueError("A request carries either a JSON body or a multipart form, not both")


def encode_json_body(body: Any) -> bytes:
    """Serialize a request body; pydantic models drop unset optional fields."""
    try:
        if isinstance(body, BaseModel):
            return body.model_dump_json(exclude_none=True, by_alias=True).encode("utf-8")
        if isinstance(body, list) and body and all(isinstance(item, BaseModel) for item in body):
            payload = [item.model_dump(mode="json", exclude_none=True, by_alias=True) for item in body]
            return json.dumps(payload).encode("utf-8")
        return json.dumps(body).encode("utf-8")
    except (TypeError, ValueError) as e:
        raise SerializationError(f"Failed to encode request body: {e}") from e


def _error_message(response: httpx.Response, body: Any) -> str:
    """Pull the server's message out of the common error body shapes."""
    if isinstance(body, dict):
        error = body.get("error")
        if isinstance(error, dict) and error.get("message"):
            return str(error["message"])
        if body.get("message"):
            return str(body["message"])
        if isinstance(error, str) and error:
            return error
    if isinstance(body, str) and body.strip():
        return body.strip()
    return response.reason_phrase or f"HTTP {response.status_code}"


class RequestPipeline:
    """Turns a ``RequestDescriptor`` into one HTTP exchange.

    Holds no per-call state, so a single instance is shared by every
    service and every concurrent task of a client.
    """

    def __init__(self, config: ClientConfig):
        self.config = config
        self._owns_client = config.transport is None
        self._client: httpx.AsyncClient | None = config.transport

    def _get_client(self) -> httpx.AsyncClient:
        if self._client is None or (self._owns_client and self._client.is_closed):
            self._client = httpx.AsyncClient(timeout=httpx.Timeout(self.config.timeout))
            self._owns_client = True
        return self._client

    def build_url(self, path: str, query: list[tuple[str, str]] | tuple = ()) -> httpx.URL:
        """Join ``path`` onto the base URL and append ``query`` in caller order."""
        try:
            base = httpx.URL(self.config.base_url)
        except (httpx.InvalidURL, TypeError) as e:
            raise URLError(f"Invalid base URL {self.config.base_url!r}: {e}") from e
        if base.scheme not in ("http", "https") or not base.host:
            raise URLError(f"Invalid base URL {self.config.base_url!r}: expected an absolute http(s) URL")

        base_path = base.path
        if base_path.endswith("/"):
            base_path = base_path[:-1]
        if not path.startswith("/"):
            path = "/" + path

        params = list(base.params.multi_items()) + [(k, v) for k, v in query]
        try:
            return base.copy_with(path=base_path + path, params=httpx.QueryParams(params))
        except (httpx.InvalidURL, TypeError, ValueError) as e:
            raise URLError(f"Invalid request URL for path {path!r}: {e}") from e

    def build_headers(self) -> dict[str, str]:
        """Gateway headers in fixed order: api key, auth, trace, metadata, cache."""
        config = self.config
        headers = {"x-portkey-api-key": config.api_key}
        headers.update(auth_headers(config.auth_method))

        if config.trace_id is not None:
            headers["x-portkey-trace-id"] = config.trace_id

        if config.metadata is not None:
            try:
                headers["x-portkey-metadata"] = json.dumps(dict(config.metadata))
            except (TypeError, ValueError) as e:
                logger.warning(
                    "Failed to serialize metadata, skipping header",
                    extra={"log_data": {"error": str(e)}},
                )

        if config.cache_namespace is not None:
            headers["x-portkey-cache-namespace"] = config.cache_namespace

        if config.cache_force_refresh is not None:
            headers["x-portkey-cache-force-refresh"] = "true" if config.cache_force_refresh else "false"

        return headers

    def build_request(self, descriptor: RequestDescriptor) -> httpx.Request:
        """Assemble the outbound request without sending it."""
        url = self.build_url(descriptor.path, descriptor.query)
        headers = self.build_headers()
        timeout = descriptor.override_timeout if descriptor.override_timeout is not None else self.config.timeout
        client = self._get_client()

        body: dict[str, Any] = {}
        if descriptor.multipart is not None:
            body = {"data": descriptor.multipart.data(), "files": descriptor.multipart.files}
        elif descriptor.json_body is not None:
            headers["Content-Type"] = "application/json"
            body = {"content": encode_json_body(descriptor.json_body)}

        try:
            return client.build_request(descriptor.method, url, headers=headers, timeout=timeout, **body)
        except (ValueError, TypeError, httpx.InvalidURL) as e:
            # Header values must be ASCII-encodable; UnicodeEncodeError is a ValueError
            raise SerializationError(f"Failed to encode request for {descriptor.path!r}: {e}") from e

    async def execute(self, descriptor: RequestDescriptor) -> httpx.Response:
        """Send the request once; return the response or raise a classified error."""
        request = self.build_request(descriptor)
        request_id_var.set(generate_request_id())

        logger.debug(
            "Sending request",
            extra={"log_data": {
                "method": descriptor.method,
                "path": request.url.path,
                "auth_method": describe(self.config.auth_method),
                "api_key": self.config.masked_api_key(),
            }},
        )

        client = self._get_client()
        if client.is_closed:
            logger.warning(
                "HTTP client is closed",
                extra={"log_data": {"method": descriptor.method, "path": request.url.path}},
            )
            raise TransportError("The injected HTTP client has been closed")

        with RequestTimer() as timer:
            try:
                response = await client.send(request)
            except httpx.TimeoutException as e:
                logger.warning(
                    "Request timed out",
                    extra={"log_data": {"method": descriptor.method, "path": request.url.path}},
                )
                raise TransportError(f"Request timed out: {e}", timed_out=True) from e
            except httpx.HTTPError as e:
                logger.warning(
                    "Transport error",
                    extra={"log_data": {"method": descriptor.method, "path": request.url.path, "error": str(e)}},
                )
                raise TransportError(f"Transport error: {e}") from e

        log_data = {
            "method": descriptor.method,
            "path": request.url.path,
            "status": response.status_code,
            "latency_ms": timer.elapsed_ms,
        }

        if response.status_code >= 400:
            error = self._classify(response)
            logger.warning("Gateway returned an error", extra={"log_data": {**log_data, "error": error.message}})
            raise error

        logger.debug("Request completed", extra={"log_data": log_data})
        return response

    @staticmethod
    def _classify(response: httpx.Response) -> APIError:
        try:
            body: Any = response.json()
        except ValueError:
            body = response.text
        return APIError(
            _error_message(response, body),
            status_code=response.status_code,
            body=body,
            response_headers=dict(response.headers),
        )

    @staticmethod
    def parse_json(response: httpx.Response, model: type[ModelT]) -> ModelT:
        """Decode a successful response body into ``model``."""
        try:
            return model.model_validate_json(response.content)
        except ValidationError as e:
            raise SerializationError(f"Failed to decode {model.__name__}: {e}") from e

    @staticmethod
    def parse_raw_json(response: httpx.Response) -> Any:
        try:
            return response.json()
        except ValueError as e:
            raise SerializationError(f"Failed to decode response body: {e}") from e

    @staticmethod
    def read_bytes(response: httpx.Response) -> bytes:
        return response.content

    async def aclose(self) -> None:
        """Close the transport if this pipeline created it. Injected clients stay open."""
        if self._owns_client and self._client is not None and not self._client.is_closed:
            await self._client.aclose()
            self._client = None
