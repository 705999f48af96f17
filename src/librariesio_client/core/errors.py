"""Error types and rate-limit header extraction."""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from dataclasses import dataclass

import httpx


def _header(headers: Mapping[str, str] | None, name: str) -> str:
    if headers is None:
        return ""
    value = headers.get(name)
    return str(value) if value is not None else ""


@dataclass(slots=True, frozen=True)
class RateLimitInfo:
    limit: str
    remaining: str
    reset: str

    @classmethod
    def from_headers(cls, headers: Mapping[str, str] | None) -> "RateLimitInfo":
        return cls(
            limit=_header(headers, "x-ratelimit-limit"),
            remaining=_header(headers, "x-ratelimit-remaining"),
            reset=_header(headers, "x-ratelimit-reset"),
        )


class LibrariesIOError(Exception):
    """Base exception for this package."""


class LibrariesIOClientClosedError(LibrariesIOError):
    """Raised when client is used after close."""


class LibrariesIOValidationError(LibrariesIOError):
    """Invalid input / configuration."""


class InvalidApiKeyError(LibrariesIOValidationError):
    """API key is not a 32 character hex string."""


class InvalidEndpointError(LibrariesIOValidationError):
    """Unknown (resource, subset) pair."""

    def __init__(self, message: str, *, resource: str, subset: str) -> None:
        super().__init__(message)
        self.resource = resource
        self.subset = subset


class InvalidEndpointOptionsError(LibrariesIOValidationError):
    """Required endpoint options are missing."""

    def __init__(
        self,
        message: str,
        *,
        required_options: Sequence[str],
        missing_options: Sequence[str],
    ) -> None:
        super().__init__(message)
        self.required_options = tuple(required_options)
        self.missing_options = tuple(missing_options)


class RateLimitExceededError(LibrariesIOError):
    """HTTP 429 returned by Libraries.io."""

    def __init__(
        self,
        message: str,
        *,
        rate_limit: RateLimitInfo,
        status_error: httpx.HTTPStatusError,
    ) -> None:
        super().__init__(message)
        self.rate_limit = rate_limit
        self.status_error = status_error

    @property
    def response(self) -> httpx.Response:
        return self.status_error.response

    @classmethod
    def from_status_error(cls, exc: httpx.HTTPStatusError) -> "RateLimitExceededError":
        info = RateLimitInfo.from_headers(exc.response.headers)
        message = (
            "Libraries.io API rate limit exceeded "
            f"(limit={info.limit!r}, remaining={info.remaining!r}, reset={info.reset!r})"
        )
        return cls(message, rate_limit=info, status_error=exc)


def is_rate_limited(exc: httpx.HTTPStatusError) -> bool:
    return exc.response.status_code == 429


__all__ = [
    "RateLimitInfo",
    "LibrariesIOError",
    "LibrariesIOClientClosedError",
    "LibrariesIOValidationError",
    "InvalidApiKeyError",
    "InvalidEndpointError",
    "InvalidEndpointOptionsError",
    "RateLimitExceededError",
    "is_rate_limited",
]
