"""Async response cache adapter."""

from __future__ import annotations

import asyncio
from collections.abc import Awaitable, Callable
from pathlib import Path
from typing import Any, TypeVar

import httpx

from ..config import DEFAULT_CACHE_TTL_SECONDS
from .cache import ResponseCache

T = TypeVar("T")


class AsyncResponseCache:
    """Wrap a sync :class:`ResponseCache` and execute operations in worker threads."""

    def __init__(
        self,
        cache: ResponseCache,
        *,
        run_sync: Callable[..., Awaitable[Any]] | None = None,
    ) -> None:
        self._cache = cache
        self._run_sync: Callable[..., Awaitable[Any]] = run_sync or _default_run_sync

    @classmethod
    async def open(
        cls,
        directory: str | Path,
        *,
        ttl_seconds: float = DEFAULT_CACHE_TTL_SECONDS,
        run_sync: Callable[..., Awaitable[Any]] | None = None,
    ) -> AsyncResponseCache:
        runner = run_sync or _default_run_sync
        cache = await runner(_open_response_cache, directory, ttl_seconds)
        return cls(cache, run_sync=runner)

    async def get(self, request: httpx.Request) -> httpx.Response | None:
        return await self._run_sync(self._cache.get, request)

    async def set(self, request: httpx.Request, response: httpx.Response) -> None:
        await self._run_sync(self._cache.set, request, response)

    async def clear(self) -> None:
        await self._run_sync(self._cache.clear)

    async def close(self) -> None:
        await self._run_sync(self._cache.close)


def _open_response_cache(directory: str | Path, ttl_seconds: float) -> ResponseCache:
    return ResponseCache(directory, ttl_seconds=ttl_seconds)


async def _default_run_sync(func: Callable[..., T], *args: Any) -> T:
    return await asyncio.to_thread(func, *args)


__all__ = [
    "AsyncResponseCache",
]
