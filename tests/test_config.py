"""Tests for portkey_client/client/config.py: ClientConfig and ConfigBuilder."""

from datetime import timedelta

import pytest

from portkey_client.client.auth import ProviderAuth, VirtualKey
from portkey_client.client.config import (
    DEFAULT_BASE_URL,
    DEFAULT_TIMEOUT,
    ClientConfig,
    ConfigBuilder,
    mask_api_key,
)
from portkey_client.client.errors import ConfigurationError
from portkey_client.client.portkey import PortkeyClient


def _builder() -> ConfigBuilder:
    return ClientConfig.builder().with_api_key("test_key_12345").with_auth_method(VirtualKey(virtual_key="vk-1"))


class TestConfigBuilder:

    def test_defaults(self):
        config = _builder().build()
        assert config.api_key == "test_key_12345"
        assert config.base_url == DEFAULT_BASE_URL == "https://api.portkey.ai/v1"
        assert config.timeout == DEFAULT_TIMEOUT == 30.0
        assert config.trace_id is None
        assert config.metadata is None
        assert config.cache_namespace is None
        assert config.cache_force_refresh is None

    def test_all_options(self):
        config = (
            _builder()
            .with_base_url("http://localhost:8787/v1")
            .with_timeout(60)
            .with_trace_id("trace-1")
            .with_metadata({"user": "u-1"})
            .with_cache_namespace("ns")
            .with_cache_force_refresh(True)
            .build()
        )
        assert config.base_url == "http://localhost:8787/v1"
        assert config.timeout == 60.0
        assert config.trace_id == "trace-1"
        assert config.metadata == {"user": "u-1"}
        assert config.cache_namespace == "ns"
        assert config.cache_force_refresh is True

    def test_missing_api_key(self):
        builder = ClientConfig.builder().with_auth_method(VirtualKey(virtual_key="vk"))
        with pytest.raises(ConfigurationError, match="API key cannot be empty"):
            builder.build()

    @pytest.mark.parametrize("key", ["", "   ", "\t\n"])
    def test_blank_api_key(self, key):
        with pytest.raises(ConfigurationError, match="API key cannot be empty"):
            _builder().with_api_key(key).build()

    def test_api_key_is_trimmed(self):
        assert _builder().with_api_key("  pk-1234  ").build().api_key == "pk-1234"

    def test_missing_auth_method(self):
        with pytest.raises(ConfigurationError, match="Auth method is required"):
            ClientConfig.builder().with_api_key("pk-1234").build()

    def test_zero_timeout(self):
        with pytest.raises(ConfigurationError, match="Timeout must be greater than 0"):
            _builder().with_timeout(0).build()

    def test_negative_timeout(self):
        with pytest.raises(ConfigurationError, match="Timeout must be greater than 0"):
            _builder().with_timeout(-1).build()

    def test_timeout_over_max(self):
        with pytest.raises(ConfigurationError, match="Timeout cannot exceed 300 seconds"):
            _builder().with_timeout(301).build()

    @pytest.mark.parametrize("timeout", [0.5, 1, 60, 300])
    def test_timeout_in_range(self, timeout):
        assert _builder().with_timeout(timeout).build().timeout == float(timeout)

    def test_timedelta_timeout(self):
        assert _builder().with_timeout(timedelta(minutes=2)).build().timeout == 120.0

    @pytest.mark.parametrize("timeout", [float("nan"), float("inf"), float("-inf")])
    def test_non_finite_timeout(self, timeout):
        with pytest.raises(ConfigurationError, match="Timeout must be"):
            _builder().with_timeout(timeout).build()

    def test_non_numeric_timeout(self):
        with pytest.raises(ConfigurationError, match="Timeout must be a number"):
            _builder().with_timeout("30").build()

    def test_deterministic(self):
        first = _builder().with_trace_id("t").with_cache_namespace("ns").build()
        second = _builder().with_trace_id("t").with_cache_namespace("ns").build()
        assert first == second

    def test_metadata_is_copied(self):
        metadata = {"env": "dev"}
        config = _builder().with_metadata(metadata).build()
        metadata["env"] = "prod"
        assert config.metadata == {"env": "dev"}

    def test_metadata_is_read_only(self):
        config = _builder().with_metadata({"env": "dev"}).build()
        with pytest.raises(TypeError):
            config.metadata["env"] = "prod"

    def test_config_is_hashable(self):
        first = _builder().with_metadata({"env": "dev"}).build()
        second = _builder().with_metadata({"env": "dev"}).build()
        assert hash(first) == hash(second)
        assert len({first, second}) == 1

    def test_config_is_frozen(self):
        config = _builder().build()
        with pytest.raises(AttributeError):
            config.api_key = "other"

    def test_build_client(self):
        client = _builder().build_client()
        assert isinstance(client, PortkeyClient)
        assert client.config.api_key == "test_key_12345"


class TestMasking:

    def test_long_key(self):
        assert mask_api_key("test_key_12345") == "test****"

    def test_short_key(self):
        assert mask_api_key("abc") == "****"

    def test_four_char_key(self):
        assert mask_api_key("abcd") == "****"

    def test_repr_never_shows_key(self):
        config = (
            _builder()
            .with_auth_method(ProviderAuth(provider="openai", authorization="Bearer sk-upstream"))
            .build()
        )
        for text in (repr(config), str(config), repr(ClientConfig.builder().with_api_key("test_key_12345"))):
            assert "test_key_12345" not in text
            assert "sk-upstream" not in text
        assert "test****" in repr(config)
