"""Sync HTTP transport with API key injection, disk caching and 429 mapping."""

from __future__ import annotations

import logging
from collections.abc import Mapping

import httpx

from ..config import LibrariesIOConfig
from ..endpoints.descriptors import HttpMethod, OptionValue
from .cache import ResponseCache
from .errors import LibrariesIOClientClosedError
from .transport_shared import (
    build_client_kwargs,
    build_request_params,
    build_response_cache,
    normalize_endpoint,
    normalize_method,
    raise_for_http_error,
)

logger = logging.getLogger("librariesio_client")


class SyncTransport:
    """Synchronous transport for Libraries.io API."""

    def __init__(
        self,
        config: LibrariesIOConfig,
        *,
        api_key: str,
        client: httpx.Client | None = None,
        http_transport: httpx.BaseTransport | None = None,
    ) -> None:
        self._config = config
        self._api_key = api_key
        self._http_transport = http_transport
        self._client = client
        self._owns_client = client is None
        self._cache: ResponseCache | None = build_response_cache(config)
        self._closed = False

    @property
    def cache(self) -> ResponseCache | None:
        return self._cache

    def _ensure_client(self) -> httpx.Client:
        if self._client is None:
            kwargs = build_client_kwargs(self._config)
            if self._http_transport is not None:
                kwargs["transport"] = self._http_transport
            self._client = httpx.Client(**kwargs)
        return self._client

    def close(self) -> None:
        if self._closed:
            return
        self._closed = True
        if self._cache is not None:
            self._cache.close()
        if self._owns_client and self._client is not None:
            self._client.close()

    def request(
        self,
        method: HttpMethod | str,
        endpoint: str,
        *,
        params: Mapping[str, OptionValue] | None = None,
    ) -> httpx.Response:
        if self._closed:
            raise LibrariesIOClientClosedError("transport is already closed")

        client = self._ensure_client()
        normalized_endpoint = normalize_endpoint(endpoint)
        request = client.build_request(
            normalize_method(method),
            normalized_endpoint,
            params=build_request_params(self._api_key, params),
        )
        logger.debug("request start method=%s endpoint=%s", request.method, normalized_endpoint)

        if self._cache is not None:
            cached = self._cache.get(request)
            if cached is not None:
                return cached

        try:
            response = client.send(request)
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

        if self._cache is not None:
            self._cache.set(request, response)
        logger.info("request success endpoint=%s", normalized_endpoint)
        return response


__all__ = [
    "SyncTransport",
]
