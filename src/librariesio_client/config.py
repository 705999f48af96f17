"""Client configuration."""

from __future__ import annotations

import re
from collections.abc import Mapping
from dataclasses import dataclass, field
from pathlib import Path
from types import MappingProxyType
from typing import Any

DEFAULT_BASE_URL = "https://libraries.io/api/"
DEFAULT_CACHE_TTL_SECONDS = 300.0
DEFAULT_TIMEOUT_SECONDS = 10.0

# Keys the transport always controls itself, under both the httpx names and
# the Guzzle-style names used by other Libraries.io clients.
PROTECTED_CLIENT_OPTIONS = frozenset(
    {"base_url", "transport", "params", "base_uri", "handler", "query", "http_errors"}
)

_API_KEY_RE = re.compile(r"^[0-9a-fA-F]{32}$")


def is_valid_api_key(api_key: object) -> bool:
    return isinstance(api_key, str) and _API_KEY_RE.fullmatch(api_key) is not None


def filter_client_options(options: Mapping[str, Any] | None) -> dict[str, Any]:
    if not options:
        return {}
    return {
        key: value
        for key, value in options.items()
        if key not in PROTECTED_CLIENT_OPTIONS
    }


@dataclass(slots=True, frozen=True)
class TransportConfig:
    """Transport-related settings."""

    timeout_seconds: float = DEFAULT_TIMEOUT_SECONDS
    client_options: Mapping[str, Any] = field(default_factory=dict)

    def __post_init__(self) -> None:
        object.__setattr__(
            self,
            "client_options",
            MappingProxyType(filter_client_options(self.client_options)),
        )

    def validate(self) -> None:
        if self.timeout_seconds <= 0:
            raise ValueError("transport.timeout_seconds must be > 0")


@dataclass(slots=True, frozen=True)
class CacheConfig:
    """Disk response cache settings."""

    directory: str | Path | None = None
    ttl_seconds: float = DEFAULT_CACHE_TTL_SECONDS

    def validate(self) -> None:
        if self.ttl_seconds <= 0:
            raise ValueError("cache.ttl_seconds must be > 0")


@dataclass(slots=True, frozen=True)
class LibrariesIOConfig:
    """Runtime configuration for Libraries.io client."""

    base_url: str = DEFAULT_BASE_URL
    user_agent: str = "librariesio-client/0.1.0"

    transport: TransportConfig = field(default_factory=TransportConfig)
    cache: CacheConfig = field(default_factory=CacheConfig)

    def validate(self) -> None:
        if not self.base_url:
            raise ValueError("base_url must not be empty")
        self.transport.validate()
        self.cache.validate()


__all__ = [
    "DEFAULT_BASE_URL",
    "DEFAULT_CACHE_TTL_SECONDS",
    "DEFAULT_TIMEOUT_SECONDS",
    "PROTECTED_CLIENT_OPTIONS",
    "is_valid_api_key",
    "filter_client_options",
    "TransportConfig",
    "CacheConfig",
    "LibrariesIOConfig",
]
