"""Endpoint descriptor models."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from enum import Enum

OptionValue = str | int | bool
OptionsMap = Mapping[str, OptionValue]

PLACEHOLDER_MARKER = ":"
PAGINATION_OPTIONS = frozenset({"page", "per_page"})


class Resource(str, Enum):
    PLATFORM = "platform"
    PROJECT = "project"
    REPOSITORY = "repository"
    USER = "user"
    SUBSCRIPTION = "subscription"


class HttpMethod(str, Enum):
    GET = "GET"
    POST = "POST"
    PUT = "PUT"
    DELETE = "DELETE"


@dataclass(slots=True, frozen=True)
class EndpointDescriptor:
    path_template: str
    required_options: tuple[str, ...] = ()
    method: HttpMethod = HttpMethod.GET
    query_options: tuple[str, ...] = field(default=(), kw_only=True)
    paginated: bool = field(default=True, kw_only=True)

    def __post_init__(self) -> None:
        if isinstance(self.required_options, str):
            raise TypeError("required_options must be a sequence of str, not str")
        object.__setattr__(self, "required_options", tuple(self.required_options))
        object.__setattr__(self, "query_options", tuple(self.query_options))
        if not isinstance(self.method, HttpMethod):
            object.__setattr__(self, "method", HttpMethod(str(self.method).upper()))

    def placeholders(self) -> tuple[str, ...]:
        """Names of the ``:name`` segments in the path template."""

        return tuple(
            segment[len(PLACEHOLDER_MARKER):]
            for segment in self.path_template.split("/")
            if segment.startswith(PLACEHOLDER_MARKER)
        )


@dataclass(slots=True, frozen=True)
class ResolvedEndpoint:
    path: str
    method: HttpMethod
    params: Mapping[str, OptionValue] = field(default_factory=dict)


__all__ = [
    "OptionValue",
    "OptionsMap",
    "PLACEHOLDER_MARKER",
    "PAGINATION_OPTIONS",
    "Resource",
    "HttpMethod",
    "EndpointDescriptor",
    "ResolvedEndpoint",
]
