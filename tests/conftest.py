"""Shared fixtures for the Portkey client test suite."""

import json
import logging

import httpx
import pytest

from portkey_client.client.auth import VirtualKey
from portkey_client.client.config import ClientConfig
from portkey_client.client.portkey import PortkeyClient
from portkey_client.config.settings import get_settings
from portkey_client.logging.structured import ROOT_LOGGER

PORTKEY_ENV_VARS = (
    "PORTKEY_API_KEY",
    "PORTKEY_VIRTUAL_KEY",
    "PORTKEY_PROVIDER",
    "PORTKEY_AUTHORIZATION",
    "PORTKEY_CUSTOM_HOST",
    "PORTKEY_CONFIG",
    "PORTKEY_BASE_URL",
    "PORTKEY_TIMEOUT_SECS",
    "PORTKEY_TRACE_ID",
    "PORTKEY_CACHE_NAMESPACE",
    "PORTKEY_CACHE_FORCE_REFRESH",
    "PORTKEY_LOG_LEVEL",
    "PORTKEY_LOG_FILE",
)


@pytest.fixture(autouse=True)
def clean_env(monkeypatch):
    """Start every test without PORTKEY_* variables or cached settings."""
    for name in PORTKEY_ENV_VARS:
        monkeypatch.delenv(name, raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture(autouse=True)
def reset_library_logger():
    """Undo setup_logging() so caplog keeps seeing library records."""
    yield
    logger = logging.getLogger(ROOT_LOGGER)
    logger.handlers.clear()
    logger.propagate = True
    logger.setLevel(logging.NOTSET)


@pytest.fixture
def override_settings(monkeypatch):
    """Factory fixture: set env vars and clear settings cache.

    Usage:
        override_settings(PORTKEY_API_KEY="pk-123", PORTKEY_VIRTUAL_KEY="vk-1")
    """
    def _override(**kwargs):
        for key, value in kwargs.items():
            monkeypatch.setenv(key.upper(), str(value))
        get_settings.cache_clear()

    yield _override

    get_settings.cache_clear()


class RecordingTransport:
    """Canned-response handler for httpx.MockTransport that keeps every request."""

    def __init__(self, status_code: int = 200, body=None, *, content: bytes | None = None, headers=None):
        self.status_code = status_code
        self.body = {} if body is None else body
        self.content = content
        self.headers = headers or {}
        self.requests: list[httpx.Request] = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self.content is not None:
            return httpx.Response(self.status_code, content=self.content, headers=self.headers)
        if isinstance(self.body, str):
            return httpx.Response(self.status_code, text=self.body, headers=self.headers)
        return httpx.Response(self.status_code, json=self.body, headers=self.headers)

    @property
    def last(self) -> httpx.Request:
        return self.requests[-1]

    def last_json(self):
        return json.loads(self.last.content)


@pytest.fixture
def make_config():
    """Factory fixture: a valid config wired to an in-memory transport."""
    def _make(handler=None, **overrides) -> ClientConfig:
        builder = (
            ClientConfig.builder()
            .with_api_key(overrides.pop("api_key", "test_key_12345"))
            .with_auth_method(overrides.pop("auth_method", VirtualKey(virtual_key="vk-openai-1")))
            .with_base_url(overrides.pop("base_url", "https://api.portkey.ai/v1"))
        )
        if handler is not None:
            builder = builder.with_transport(httpx.AsyncClient(transport=httpx.MockTransport(handler)))
        for name, value in overrides.items():
            builder = getattr(builder, f"with_{name}")(value)
        return builder.build()

    return _make


@pytest.fixture
def make_client(make_config):
    """Factory fixture: a PortkeyClient answering every call from ``transport``."""
    def _make(transport: RecordingTransport, **overrides) -> PortkeyClient:
        return PortkeyClient(make_config(transport, **overrides))

    return _make
