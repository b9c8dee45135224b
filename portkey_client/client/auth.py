"""Provider authentication methods and their gateway headers.

Exactly one method is active per client. Each method maps to a fixed set of
``x-portkey-*`` headers:

- ``VirtualKey``   -> x-portkey-virtual-key
- ``ProviderAuth`` -> x-portkey-provider, Authorization [, x-portkey-custom-host]
- ``RoutingConfig`` -> x-portkey-config
"""

from dataclasses import dataclass, field
from typing import Union


@dataclass(frozen=True)
class VirtualKey:
    """Provider credentials stored in the gateway, referenced by id."""

    virtual_key: str = field(repr=False)


@dataclass(frozen=True)
class ProviderAuth:
    """Direct provider credentials forwarded verbatim.

    ``authorization`` is the full header value, including any ``Bearer``
    prefix. ``custom_host`` redirects the provider call to a self-hosted or
    enterprise endpoint.
    """

    provider: str
    authorization: str = field(repr=False)
    custom_host: str | None = None


@dataclass(frozen=True)
class RoutingConfig:
    """Server-side routing/fallback config, referenced by id."""

    config_id: str


AuthMethod = Union[VirtualKey, ProviderAuth, RoutingConfig]


def virtual_key(key: str) -> VirtualKey:
    return VirtualKey(virtual_key=key)


def provider_auth(provider: str, authorization: str, custom_host: str | None = None) -> ProviderAuth:
    return ProviderAuth(provider=provider, authorization=authorization, custom_host=custom_host)


def routing_config(config_id: str) -> RoutingConfig:
    return RoutingConfig(config_id=config_id)


def auth_headers(method: AuthMethod) -> dict[str, str]:
    """Headers for the active auth method, and only those."""
    if isinstance(method, VirtualKey):
        return {"x-portkey-virtual-key": method.virtual_key}

    if isinstance(method, ProviderAuth):
        headers = {
            "x-portkey-provider": method.provider,
            "Authorization": method.authorization,
        }
        if method.custom_host is not None:
            headers["x-portkey-custom-host"] = method.custom_host
        return headers

    if isinstance(method, RoutingConfig):
        return {"x-portkey-config": method.config_id}

    raise TypeError(f"Unsupported auth method: {type(method).__name__}")


def describe(method: AuthMethod) -> str:
    """Short, secret-free label for log records."""
    if isinstance(method, ProviderAuth):
        return f"provider:{method.provider}"
    if isinstance(method, RoutingConfig):
        return f"config:{method.config_id}"
    return "virtual_key"
