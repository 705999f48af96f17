"""Disk-backed response cache."""

from __future__ import annotations

import hashlib
import logging
import os
from pathlib import Path
from urllib.parse import urlencode

import diskcache
import httpx

from ..config import DEFAULT_CACHE_TTL_SECONDS

CACHE_NAMESPACE = "librariesio"
_STRIPPED_HEADERS = frozenset({"content-encoding", "content-length", "transfer-encoding"})
logger = logging.getLogger("librariesio_client")


def resolve_cache_directory(directory: str | Path | None) -> Path | None:
    """Return ``directory`` if it exists and is writable, else ``None``."""

    if directory is None:
        return None
    path = Path(directory)
    if path.is_dir() and os.access(path, os.W_OK):
        return path
    logger.debug("response cache disabled; directory not writable path=%s", path)
    return None


def cache_key(request: httpx.Request) -> str:
    params = urlencode(sorted(request.url.params.multi_items()))
    material = f"{request.method}\n{request.url.path}\n{params}"
    return hashlib.sha256(material.encode("utf-8")).hexdigest()


class ResponseCache:
    """Stores successful GET responses on disk with a TTL."""

    def __init__(
        self,
        directory: str | Path,
        *,
        ttl_seconds: float = DEFAULT_CACHE_TTL_SECONDS,
    ) -> None:
        if ttl_seconds <= 0:
            raise ValueError("ttl_seconds must be > 0")
        self._ttl_seconds = ttl_seconds
        self._cache = diskcache.Cache(str(Path(directory) / CACHE_NAMESPACE))

    @staticmethod
    def is_cacheable(request: httpx.Request, response: httpx.Response) -> bool:
        return request.method == "GET" and response.is_success

    def get(self, request: httpx.Request) -> httpx.Response | None:
        if request.method != "GET":
            return None
        stored = self._cache.get(cache_key(request))
        if stored is None:
            return None
        logger.debug("response cache hit path=%s", request.url.path)
        return httpx.Response(
            stored["status_code"],
            headers=stored["headers"],
            content=stored["content"],
            request=request,
        )

    def set(self, request: httpx.Request, response: httpx.Response) -> None:
        if not self.is_cacheable(request, response):
            return
        stored = {
            "status_code": response.status_code,
            "headers": [
                (name, value)
                for name, value in response.headers.multi_items()
                if name.lower() not in _STRIPPED_HEADERS
            ],
            "content": response.content,
        }
        self._cache.set(cache_key(request), stored, expire=self._ttl_seconds)
        logger.debug("response cache store path=%s", request.url.path)

    def clear(self) -> None:
        self._cache.clear()

    def close(self) -> None:
        self._cache.close()


__all__ = [
    "CACHE_NAMESPACE",
    "resolve_cache_directory",
    "cache_key",
    "ResponseCache",
]
