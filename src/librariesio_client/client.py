"""Public client entrypoint."""

from __future__ import annotations

from collections.abc import Mapping
from pathlib import Path
from types import TracebackType
from typing import Any

import httpx

from .client_shared import resolve_client_config, validate_api_key
from .config import LibrariesIOConfig
from .core.errors import LibrariesIOClientClosedError
from .core.transport import SyncTransport
from .endpoints.descriptors import OptionsMap, Resource
from .endpoints.resolver import resolve_endpoint


class LibrariesIOClient:
    """Public Libraries.io API client.

    Every call resolves ``(resource, subset, options)`` against the endpoint
    table and returns the ``httpx.Response``. Use
    :func:`librariesio_client.raw`, :func:`~librariesio_client.parse_json`
    or :func:`~librariesio_client.to_object` to read the body.
    """

    def __init__(
        self,
        api_key: str,
        *,
        cache_dir: str | Path | None = None,
        client_options: Mapping[str, Any] | None = None,
        config: LibrariesIOConfig | None = None,
        transport: SyncTransport | None = None,
        http_transport: httpx.BaseTransport | None = None,
    ) -> None:
        self._api_key = validate_api_key(api_key)
        self._config = resolve_client_config(
            config=config,
            cache_dir=cache_dir,
            client_options=client_options,
        )
        self._transport = transport or SyncTransport(
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
            raise LibrariesIOClientClosedError("LibrariesIOClient is already closed")

    def request(
        self,
        resource: Resource | str,
        subset: str,
        options: OptionsMap | None = None,
    ) -> httpx.Response:
        self._ensure_open()
        resolved = resolve_endpoint(resource, subset, options)
        return self._transport.request(resolved.method, resolved.path, params=resolved.params)

    def platform(self, subset: str = "platforms") -> httpx.Response:
        return self.request(Resource.PLATFORM, subset)

    def project(self, subset: str, options: OptionsMap | None = None) -> httpx.Response:
        return self.request(Resource.PROJECT, subset, options)

    def repository(self, subset: str, options: OptionsMap | None = None) -> httpx.Response:
        return self.request(Resource.REPOSITORY, subset, options)

    def user(self, subset: str, options: OptionsMap | None = None) -> httpx.Response:
        return self.request(Resource.USER, subset, options)

    def subscription(self, subset: str, options: OptionsMap | None = None) -> httpx.Response:
        return self.request(Resource.SUBSCRIPTION, subset, options)

    def close(self) -> None:
        if self._closed:
            return
        self._transport.close()
        self._closed = True

    def __enter__(self) -> "LibrariesIOClient":
        self._ensure_open()
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> bool:
        self.close()
        return False


__all__ = [
    "LibrariesIOClient",
]
