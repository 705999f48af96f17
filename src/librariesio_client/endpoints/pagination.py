"""Page / per_page normalization."""

from __future__ import annotations

import math
import re

from .descriptors import OptionsMap

DEFAULT_PAGE = 1
MIN_PER_PAGE = 30
MAX_PER_PAGE = 100

_NUMERIC_PREFIX_RE = re.compile(r"^[+-]?(\d+)(?:\.\d*)?|^[+-]?\.\d+")


def coerce_int(value: object) -> int:
    """Coerce to int, truncating toward zero.

    Strings use their leading numeric prefix; anything unparseable is 0.
    """

    if value is None:
        return 0
    if isinstance(value, bool):
        return int(value)
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        if math.isnan(value) or math.isinf(value):
            return 0
        return math.trunc(value)
    text = str(value).strip()
    match = _NUMERIC_PREFIX_RE.match(text)
    if match is None or match.group(1) is None:
        return 0
    number = int(match.group(1))
    return -number if text.startswith("-") else number


def normalize_pagination(options: OptionsMap) -> tuple[int, int]:
    page = options.get("page")
    per_page = options.get("per_page")

    page_number = DEFAULT_PAGE if page is None else max(DEFAULT_PAGE, coerce_int(page))
    page_size = MIN_PER_PAGE if per_page is None else coerce_int(per_page)
    page_size = min(MAX_PER_PAGE, max(MIN_PER_PAGE, page_size))
    return page_number, page_size


__all__ = [
    "DEFAULT_PAGE",
    "MIN_PER_PAGE",
    "MAX_PER_PAGE",
    "coerce_int",
    "normalize_pagination",
]
