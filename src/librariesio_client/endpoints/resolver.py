"""Resolve (resource, subset, options) into a concrete request."""

from __future__ import annotations

from collections.abc import Mapping

from .descriptors import HttpMethod, OptionValue, OptionsMap, Resource, ResolvedEndpoint
from .pagination import normalize_pagination
from .search import build_search_params
from .table import get_descriptor
from .templating import render_path
from .validators import verify_endpoint_options

_EMPTY_OPTIONS: Mapping[str, OptionValue] = {}


def resolve_path(
    resource: Resource | str,
    subset: str,
    options: OptionsMap | None = None,
) -> tuple[str, HttpMethod]:
    options = options if options is not None else _EMPTY_OPTIONS
    descriptor = get_descriptor(resource, subset)
    verify_endpoint_options(descriptor, options)
    return render_path(descriptor.path_template, options), descriptor.method


def build_query_params(
    resource: Resource | str,
    subset: str,
    options: OptionsMap | None = None,
) -> dict[str, OptionValue]:
    options = options if options is not None else _EMPTY_OPTIONS
    descriptor = get_descriptor(resource, subset)

    params: dict[str, OptionValue] = {}
    if descriptor.paginated:
        page, per_page = normalize_pagination(options)
        params["page"] = page
        params["per_page"] = per_page
    if Resource(resource) is Resource.PROJECT and subset == "search":
        params.update(build_search_params(options))
    for name in descriptor.query_options:
        value = options.get(name)
        if value is not None:
            params[name] = value
    return params


def resolve_endpoint(
    resource: Resource | str,
    subset: str,
    options: OptionsMap | None = None,
) -> ResolvedEndpoint:
    path, method = resolve_path(resource, subset, options)
    return ResolvedEndpoint(
        path=path,
        method=method,
        params=build_query_params(resource, subset, options),
    )


__all__ = [
    "resolve_path",
    "build_query_params",
    "resolve_endpoint",
]
