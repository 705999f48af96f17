"""Async HTTP transport with API key injection, disk caching and 429 mapping."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from pathlib import Path

import httpx

from ..config import LibrariesIOConfig
from ..endpoints.descriptors import HttpMethod, OptionValue
from .async_cache import AsyncResponseCache
from .cache import resolve_cache_directory
from .errors import LibrariesIOClientClosedError
from .transport_shared import (
    build_client_kwargs,
    build_request_params,
    normalize_endpoint,
    normalize_method,
    raise_for_http_error,
)

logger = logging.getLogger("librariesio_client")


class AsyncTransport:
    """Asynchronous transport for Libraries.io API."""

    def __init__(
        self,
        config: LibrariesIOConfig,
        *,
        api_key: str,
        client: httpx.AsyncClient | None = None,
        http_transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._config = config
        self._api_key = api_key
        self._http_transport = http_transport
        self._client = client
        self._owns_client = client is None
        self._cache_directory = resolve_cache_directory(config.cache.directory)
        self._cache: AsyncResponseCache | None = None
        self._closed = False

    @property
    def cache_directory(self) -> Path | None:
        """Cache directory in use, or ``None`` when caching is disabled."""

        return self._cache_directory

    @property
    def cache(self) -> AsyncResponseCache | None:
        return self._cache

    def _ensure_client(self) -> httpx.AsyncClient:
        if self._client is None:
            kwargs = build_client_kwargs(self._config)
            if self._http_transport is not None:
                kwargs["transport"] = self._http_transport
            self._client = httpx.AsyncClient(**kwargs)
        return self._client

    async def _ensure_cache(self) -> AsyncResponseCache | None:
        if self._cache is None and self._cache_directory is not None:
            self._cache = await AsyncResponseCache.open(
                self._cache_directory,
                ttl_seconds=self._config.cache.ttl_seconds,
            )
        return self._cache

    async def close(self) -> None:
        if self._closed:
            return
        self._closed = True
        if self._cache is not None:
            await self._cache.close()
        if self._owns_client and self._client is not None:
            await self._client.aclose()

    async def request(
        self,
        method: HttpMethod | str,
        endpoint: str,
        *,
        params: Mapping[str, OptionValue] | None = None,
    ) -> httpx.Response:
        if self._closed:
            raise LibrariesIOClientClosedError("transport is already closed")

        client = self._ensure_client()
        cache = await self._ensure_cache()
        normalized_endpoint = normalize_endpoint(endpoint)
        request = client.build_request(
            normalize_method(method),
            normalized_endpoint,
            params=build_request_params(self._api_key, params),
        )
        logger.debug("request start method=%s endpoint=%s", request.method, normalized_endpoint)

        if cache is not None:
            cached = await cache.get(request)
            if cached is not None:
                return cached

        try:
            response = await client.send(request)
        except httpx.TransportError as exc:
            logger.error(
                "request network error endpoint=%s error=%s",
                normalized_endpoint,
                exc.__class__.__name__,
            )
            raise

        logger.debug(
            "response received endpoint=%s http_status=%s",
            normalized_endpoint,
            response.status_code,
        )
        raise_for_http_error(response, endpoint=normalized_endpoint)

        if cache is not None:
            await cache.set(request, response)
        logger.info("request success endpoint=%s", normalized_endpoint)
        return response


__all__ = [
    "AsyncTransport",
]
