"""Client configuration and its validating builder.

A ``ClientConfig`` is built once, validated atomically by ``ConfigBuilder``,
and then shared read-only by every request the client makes.
"""

import math
from collections.abc import Mapping
from dataclasses import dataclass, field
from datetime import timedelta
from types import MappingProxyType
from typing import Any

import httpx
from pydantic import ValidationError

from portkey_client.client.auth import AuthMethod, ProviderAuth, RoutingConfig, VirtualKey, describe
from portkey_client.client.errors import ConfigurationError
from portkey_client.config.settings import PortkeySettings
from portkey_client.logging.structured import get_logger

DEFAULT_BASE_URL = "https://api.portkey.ai/v1"
DEFAULT_TIMEOUT = 30.0
MAX_TIMEOUT = 300.0

logger = get_logger("config")


def mask_api_key(api_key: str) -> str:
    """First four characters followed by ``****``; just ``****`` for short keys."""
    if len(api_key) > 4:
        return f"{api_key[:4]}****"
    return "****"


@dataclass(frozen=True)
class ClientConfig:
    api_key: str
    auth_method: AuthMethod
    base_url: str = DEFAULT_BASE_URL
    timeout: float = DEFAULT_TIMEOUT  # seconds
    transport: httpx.AsyncClient | None = field(default=None, compare=False)
    trace_id: str | None = None
    metadata: Mapping[str, Any] | None = field(default=None, hash=False)  # read-only view
    cache_namespace: str | None = None
    cache_force_refresh: bool | None = None

    def __repr__(self) -> str:
        return (
            f"ClientConfig(api_key={self.masked_api_key()!r}, "
            f"base_url={self.base_url!r}, timeout={self.timeout!r})"
        )

    __str__ = __repr__

    def masked_api_key(self) -> str:
        return mask_api_key(self.api_key)

    @staticmethod
    def builder() -> "ConfigBuilder":
        return ConfigBuilder()

    @classmethod
    def from_env(cls, settings: PortkeySettings | None = None) -> "ClientConfig":
        """Build a config from ``PORTKEY_*`` environment variables.

        Required: ``PORTKEY_API_KEY`` and one auth source, checked in order:
        ``PORTKEY_VIRTUAL_KEY``, ``PORTKEY_PROVIDER`` (+ ``PORTKEY_AUTHORIZATION``,
        optional ``PORTKEY_CUSTOM_HOST``), ``PORTKEY_CONFIG``.

        Optional: ``PORTKEY_BASE_URL``, ``PORTKEY_TIMEOUT_SECS``,
        ``PORTKEY_TRACE_ID``, ``PORTKEY_CACHE_NAMESPACE``,
        ``PORTKEY_CACHE_FORCE_REFRESH``.

        The environment is read on every call; nothing is cached.
        """
        if settings is None:
            try:
                settings = PortkeySettings()
            except ValidationError as e:
                raise ConfigurationError(f"Invalid environment configuration: {e}") from e

        logger.debug("Loading configuration from environment")

        if not settings.api_key:
            logger.error("PORTKEY_API_KEY environment variable not set")
            raise ConfigurationError("PORTKEY_API_KEY environment variable not set")

        builder = cls.builder().with_api_key(settings.api_key).with_auth_method(_auth_from_settings(settings))

        if settings.base_url:
            builder = builder.with_base_url(settings.base_url)
        if settings.timeout_secs is not None:
            builder = builder.with_timeout(settings.timeout_secs)
        if settings.trace_id:
            builder = builder.with_trace_id(settings.trace_id)
        if settings.cache_namespace:
            builder = builder.with_cache_namespace(settings.cache_namespace)
        if settings.cache_force_refresh is not None:
            builder = builder.with_cache_force_refresh(settings.cache_force_refresh)

        config = builder.build()
        logger.info(
            "Configuration loaded from environment",
            extra={"log_data": {
                "base_url": config.base_url,
                "timeout": config.timeout,
                "api_key": config.masked_api_key(),
                "auth_method": describe(config.auth_method),
            }},
        )
        return config

    def build_client(self):
        from portkey_client.client.portkey import PortkeyClient

        return PortkeyClient(self)


def _auth_from_settings(settings: PortkeySettings) -> AuthMethod:
    if settings.virtual_key:
        return VirtualKey(virtual_key=settings.virtual_key)

    if settings.provider:
        if not settings.authorization:
            raise ConfigurationError("PORTKEY_AUTHORIZATION required when PORTKEY_PROVIDER is set")
        return ProviderAuth(
            provider=settings.provider,
            authorization=settings.authorization,
            custom_host=settings.custom_host or None,
        )

    if settings.config:
        return RoutingConfig(config_id=settings.config)

    raise ConfigurationError(
        "One of PORTKEY_VIRTUAL_KEY, PORTKEY_PROVIDER, or PORTKEY_CONFIG must be set"
    )


class ConfigBuilder:
    """Staged construction of a ``ClientConfig``.

    Setters return the builder; ``build()`` validates everything at once and
    either returns a frozen config or raises ``ConfigurationError``.
    """

    def __init__(self):
        self._api_key: str | None = None
        self._auth_method: AuthMethod | None = None
        self._base_url: str = DEFAULT_BASE_URL
        self._timeout: float = DEFAULT_TIMEOUT
        self._transport: httpx.AsyncClient | None = None
        self._trace_id: str | None = None
        self._metadata: dict[str, Any] | None = None
        self._cache_namespace: str | None = None
        self._cache_force_refresh: bool | None = None

    def __repr__(self) -> str:
        key = mask_api_key(self._api_key) if self._api_key else None
        return f"ConfigBuilder(api_key={key!r}, base_url={self._base_url!r}, timeout={self._timeout!r})"

    def with_api_key(self, api_key: str) -> "ConfigBuilder":
        self._api_key = api_key
        return self

    def with_auth_method(self, auth_method: AuthMethod) -> "ConfigBuilder":
        self._auth_method = auth_method
        return self

    def with_base_url(self, base_url: str) -> "ConfigBuilder":
        self._base_url = base_url
        return self

    def with_timeout(self, timeout: float | timedelta) -> "ConfigBuilder":
        if isinstance(timeout, timedelta):
            timeout = timeout.total_seconds()
        self._timeout = timeout
        return self

    def with_transport(self, transport: httpx.AsyncClient) -> "ConfigBuilder":
        self._transport = transport
        return self

    def with_trace_id(self, trace_id: str) -> "ConfigBuilder":
        self._trace_id = trace_id
        return self

    def with_metadata(self, metadata: dict[str, Any]) -> "ConfigBuilder":
        self._metadata = dict(metadata)
        return self

    def with_cache_namespace(self, cache_namespace: str) -> "ConfigBuilder":
        self._cache_namespace = cache_namespace
        return self

    def with_cache_force_refresh(self, cache_force_refresh: bool) -> "ConfigBuilder":
        self._cache_force_refresh = cache_force_refresh
        return self

    def _validate(self) -> None:
        if self._api_key is None or not self._api_key.strip():
            raise ConfigurationError("API key cannot be empty")

        if self._auth_method is None:
            raise ConfigurationError("Auth method is required")

        if isinstance(self._timeout, bool) or not isinstance(self._timeout, (int, float)):
            raise ConfigurationError(f"Timeout must be a number of seconds, got {self._timeout!r}")
        if not math.isfinite(self._timeout):
            raise ConfigurationError(f"Timeout must be a finite number of seconds, got {self._timeout!r}")
        if self._timeout <= 0:
            raise ConfigurationError("Timeout must be greater than 0")
        if self._timeout > MAX_TIMEOUT:
            raise ConfigurationError("Timeout cannot exceed 300 seconds (5 minutes)")

    def build(self) -> ClientConfig:
        self._validate()
        return ClientConfig(
            api_key=self._api_key.strip(),
            auth_method=self._auth_method,
            base_url=self._base_url,
            timeout=float(self._timeout),
            transport=self._transport,
            trace_id=self._trace_id,
            metadata=MappingProxyType(dict(self._metadata)) if self._metadata is not None else None,
            cache_namespace=self._cache_namespace,
            cache_force_refresh=self._cache_force_refresh,
        )

    def build_client(self):
        return self.build().build_client()
