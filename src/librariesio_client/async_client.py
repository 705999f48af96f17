"""Public async client entrypoint."""

from __future__ import annotations

from collections.abc import Mapping
from pathlib import Path
from types import TracebackType
from typing import Any

import httpx

from .client_shared import resolve_client_config, validate_api_key
from .config import LibrariesIOConfig
from .core.async_transport import AsyncTransport
from .core.errors import LibrariesIOClientClosedError
from .endpoints.descriptors import OptionsMap, Resource
from .endpoints.resolver import resolve_endpoint


class AsyncLibrariesIOClient:
    """Async Libraries.io API client."""

    def __init__(
        self,
        api_key: str,
        *,
        cache_dir: str | Path | None = None,
        client_options: Mapping[str, Any] | None = None,
        config: LibrariesIOConfig | None = None,
        transport: AsyncTransport | None = None,
        http_transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._api_key = validate_api_key(api_key)
        self._config = resolve_client_config(
            config=config,
            cache_dir=cache_dir,
            client_options=client_options,
        )
        self._transport = transport or AsyncTransport(
            self._config,
            api_key=self._api_key,
            http_transport=http_transport,
        )
        self._closed = False

    @property
    def config(self) -> LibrariesIOConfig:
        return self._config

    def _ensure_open(self) -> None:
        if self._closed:
            raise LibrariesIOClientClosedError("AsyncLibrariesIOClient is already closed")

    async def request(
        self,
        resource: Resource | str,
        subset: str,
        options: OptionsMap | None = None,
    ) -> httpx.Response:
        self._ensure_open()
        resolved = resolve_endpoint(resource, subset, options)
        return await self._transport.request(
            resolved.method,
            resolved.path,
            params=resolved.params,
        )

    async def platform(self, subset: str = "platforms") -> httpx.Response:
        return await self.request(Resource.PLATFORM, subset)

    async def project(self, subset: str, options: OptionsMap | None = None) -> httpx.Response:
        return await self.request(Resource.PROJECT, subset, options)

    async def repository(self, subset: str, options: OptionsMap | None = None) -> httpx.Response:
        return await self.request(Resource.REPOSITORY, subset, options)

    async def user(self, subset: str, options: OptionsMap | None = None) -> httpx.Response:
        return await self.request(Resource.USER, subset, options)

    async def subscription(self, subset: str, options: OptionsMap | None = None) -> httpx.Response:
        return await self.request(Resource.SUBSCRIPTION, subset, options)

    async def close(self) -> None:
        if self._closed:
            return
        await self._transport.close()
        self._closed = True

    async def __aenter__(self) -> "AsyncLibrariesIOClient":
        self._ensure_open()
        return self

    async def __aexit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> bool:
        await self.close()
        return False


__all__ = [
    "AsyncLibrariesIOClient",
]
