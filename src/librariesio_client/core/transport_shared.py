"""Shared helpers for sync/async transport implementations."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

import httpx

from ..config import LibrariesIOConfig
from ..endpoints.descriptors import HttpMethod, OptionValue
from .cache import ResponseCache, resolve_cache_directory
from .errors import RateLimitExceededError, is_rate_limited

logger = logging.getLogger("librariesio_client")


def build_default_headers(config: LibrariesIOConfig) -> Mapping[str, str]:
    return {
        "Accept": "application/json",
        "User-Agent": config.user_agent,
    }


def build_default_timeout(config: LibrariesIOConfig) -> httpx.Timeout:
    return httpx.Timeout(config.transport.timeout_seconds)


def build_client_kwargs(config: LibrariesIOConfig) -> dict[str, Any]:
    """Keyword arguments for ``httpx.Client`` / ``httpx.AsyncClient``.

    Caller supplied ``client_options`` may add headers or override the
    timeout but never the base URL, transport or query params.
    """

    options = dict(config.transport.client_options)
    headers = dict(build_default_headers(config))
    headers.update(options.pop("headers", None) or {})

    kwargs: dict[str, Any] = {"timeout": build_default_timeout(config)}
    kwargs.update(options)
    kwargs["headers"] = headers
    kwargs["base_url"] = normalize_base_url(config.base_url)
    return kwargs


def build_response_cache(config: LibrariesIOConfig) -> ResponseCache | None:
    directory = resolve_cache_directory(config.cache.directory)
    if directory is None:
        return None
    return ResponseCache(directory, ttl_seconds=config.cache.ttl_seconds)


def build_request_params(
    api_key: str,
    params: Mapping[str, OptionValue] | None,
) -> dict[str, OptionValue]:
    merged: dict[str, OptionValue] = dict(params or {})
    merged["api_key"] = api_key
    return merged


def normalize_base_url(base_url: str) -> str:
    return base_url.rstrip("/") + "/"


def normalize_endpoint(endpoint: str) -> str:
    return endpoint.lstrip("/")


def normalize_method(method: HttpMethod | str) -> str:
    if isinstance(method, HttpMethod):
        return method.value
    try:
        return HttpMethod(method.upper()).value
    except ValueError:
        return HttpMethod.GET.value


def raise_for_http_error(response: httpx.Response, *, endpoint: str) -> None:
    """Raise for 4xx/5xx, mapping 429 to :class:`RateLimitExceededError`."""

    if not response.is_error:
        return
    try:
        response.raise_for_status()
    except httpx.HTTPStatusError as exc:
        if is_rate_limited(exc):
            rate_limited = RateLimitExceededError.from_status_error(exc)
            logger.warning(
                "rate limit exceeded endpoint=%s limit=%s remaining=%s reset=%s",
                endpoint,
                rate_limited.rate_limit.limit,
                rate_limited.rate_limit.remaining,
                rate_limited.rate_limit.reset,
            )
            raise rate_limited from exc
        logger.error(
            "request failed endpoint=%s http_status=%s",
            endpoint,
            response.status_code,
        )
        raise


__all__ = [
    "build_default_headers",
    "build_default_timeout",
    "build_client_kwargs",
    "build_response_cache",
    "build_request_params",
    "normalize_base_url",
    "normalize_endpoint",
    "normalize_method",
    "raise_for_http_error",
]
