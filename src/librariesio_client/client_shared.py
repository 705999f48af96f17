"""Shared helpers for sync/async client bootstrap."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import replace
from pathlib import Path
from typing import Any

from .config import LibrariesIOConfig, is_valid_api_key
from .core.errors import InvalidApiKeyError, LibrariesIOValidationError


def validate_api_key(api_key: str) -> str:
    if not is_valid_api_key(api_key):
        raise InvalidApiKeyError(
            "API key typically consists of alpha numeric characters and is 32 chars in length"
        )
    return api_key


def validate_client_config(config: LibrariesIOConfig) -> None:
    try:
        config.validate()
    except ValueError as exc:
        raise LibrariesIOValidationError(str(exc)) from exc


def resolve_client_config(
    *,
    config: LibrariesIOConfig | None,
    cache_dir: str | Path | None,
    client_options: Mapping[str, Any] | None,
) -> LibrariesIOConfig:
    resolved = config or LibrariesIOConfig()
    if cache_dir is not None:
        resolved = replace(resolved, cache=replace(resolved.cache, directory=cache_dir))
    if client_options is not None:
        resolved = replace(
            resolved,
            transport=replace(resolved.transport, client_options=client_options),
        )
    validate_client_config(resolved)
    return resolved


__all__ = [
    "validate_api_key",
    "validate_client_config",
    "resolve_client_config",
]
