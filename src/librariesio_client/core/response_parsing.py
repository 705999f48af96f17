"""Response body accessors."""

from __future__ import annotations

import json
from types import SimpleNamespace
from typing import Any, Protocol


class TextResponse(Protocol):
    @property
    def text(self) -> str: ...


def raw(response: TextResponse) -> str:
    return response.text


def parse_json(response: TextResponse) -> Any:
    """Decode the body, keeping JSON object key order.

    Raises ``json.JSONDecodeError`` when the body is not valid JSON.
    """

    return json.loads(raw(response))


def to_object(response: TextResponse) -> Any:
    """Decode the body with JSON objects as ``SimpleNamespace``."""

    return json.loads(raw(response), object_hook=lambda item: SimpleNamespace(**item))


__all__ = [
    "raw",
    "parse_json",
    "to_object",
]
