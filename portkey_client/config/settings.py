"""Client settings loaded from PORTKEY_* environment variables."""

from functools import lru_cache

from pydantic_settings import BaseSettings


class PortkeySettings(BaseSettings):
    # Gateway credentials
    api_key: str | None = None

    # Provider routing (first one set wins: virtual key, provider, config)
    virtual_key: str | None = None
    provider: str | None = None
    authorization: str | None = None  # full header value, e.g. "Bearer sk-..."
    custom_host: str | None = None
    config: str | None = None

    # Transport
    base_url: str | None = None
    timeout_secs: int | None = None

    # Passthrough headers
    trace_id: str | None = None
    cache_namespace: str | None = None
    cache_force_refresh: bool | None = None

    # Logging
    log_level: str = "WARNING"
    log_file: str = ""  # Empty = stdout only

    model_config = {"env_prefix": "PORTKEY_", "extra": "ignore", "env_ignore_empty": True}


@lru_cache
def get_settings() -> PortkeySettings:
    return PortkeySettings()
