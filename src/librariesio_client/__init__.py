"""Public package exports for Libraries.io API client."""

from .async_client import AsyncLibrariesIOClient
from .client import LibrariesIOClient
from .config import LibrariesIOConfig
from .core.errors import (
    InvalidApiKeyError,
    InvalidEndpointError,
    InvalidEndpointOptionsError,
    LibrariesIOError,
    RateLimitExceededError,
    RateLimitInfo,
)
from .core.response_parsing import parse_json, raw, to_object

__all__ = [
    "LibrariesIOClient",
    "AsyncLibrariesIOClient",
    "LibrariesIOConfig",
    "LibrariesIOError",
    "InvalidApiKeyError",
    "InvalidEndpointError",
    "InvalidEndpointOptionsError",
    "RateLimitExceededError",
    "RateLimitInfo",
    "raw",
    "parse_json",
    "to_object",
]
