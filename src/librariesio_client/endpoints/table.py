"""Static Libraries.io endpoint table."""

from __future__ import annotations

from collections.abc import Mapping
from types import MappingProxyType

from ..core.errors import InvalidEndpointError
from .descriptors import EndpointDescriptor, HttpMethod, Resource

_PACKAGE = ("platform", "name")

_PLATFORM_ENDPOINTS = {
    "platforms": EndpointDescriptor("platforms", paginated=False),
}

_PROJECT_ENDPOINTS = {
    "contributors": EndpointDescriptor(":platform/:name/contributors", _PACKAGE),
    "dependencies": EndpointDescriptor(
        ":platform/:name/:version/dependencies",
        ("platform", "name", "version"),
    ),
    "dependent_repositories": EndpointDescriptor(
        ":platform/:name/dependent_repositories",
        _PACKAGE,
    ),
    "dependents": EndpointDescriptor(":platform/:name/dependents", _PACKAGE),
    "search": EndpointDescriptor("search", ("query", "sort")),
    "sourcerank": EndpointDescriptor(":platform/:name/sourcerank", _PACKAGE),
    "project": EndpointDescriptor(":platform/:name", _PACKAGE),
}

_REPOSITORY_ENDPOINTS = {
    "dependencies": EndpointDescriptor("github/:owner/:name/dependencies", ("owner", "name")),
    "projects": EndpointDescriptor("github/:owner/:name/projects", ("owner", "name")),
    "repository": EndpointDescriptor("github/:owner/:name", ("owner", "name")),
}

_USER_ENDPOINTS = {
    "dependencies": EndpointDescriptor("github/:login/dependencies", ("login",)),
    "package_contributions": EndpointDescriptor("github/:login/project-contributions", ("login",)),
    "packages": EndpointDescriptor("github/:login/projects", ("login",)),
    "repositories": EndpointDescriptor("github/:login/repositories", ("login",)),
    "repository_contributions": EndpointDescriptor(
        "github/:login/repository-contributions",
        ("login",),
    ),
    "subscriptions": EndpointDescriptor("subscriptions"),
    "user": EndpointDescriptor("github/:login", ("login",)),
}

_SUBSCRIPTION_ENDPOINTS = {
    "subscribe": EndpointDescriptor(
        "subscriptions/:platform/:name",
        _PACKAGE,
        HttpMethod.POST,
        query_options=("include_prerelease",),
        paginated=False,
    ),
    "check": EndpointDescriptor(
        "subscriptions/:platform/:name",
        _PACKAGE,
        HttpMethod.GET,
        paginated=False,
    ),
    "update": EndpointDescriptor(
        "subscriptions/:platform/:name",
        _PACKAGE,
        HttpMethod.PUT,
        query_options=("include_prerelease",),
        paginated=False,
    ),
    "unsubscribe": EndpointDescriptor(
        "subscriptions/:platform/:name",
        _PACKAGE,
        HttpMethod.DELETE,
        paginated=False,
    ),
}

ENDPOINTS: Mapping[tuple[Resource, str], EndpointDescriptor] = MappingProxyType(
    {
        (resource, subset): descriptor
        for resource, table in (
            (Resource.PLATFORM, _PLATFORM_ENDPOINTS),
            (Resource.PROJECT, _PROJECT_ENDPOINTS),
            (Resource.REPOSITORY, _REPOSITORY_ENDPOINTS),
            (Resource.USER, _USER_ENDPOINTS),
            (Resource.SUBSCRIPTION, _SUBSCRIPTION_ENDPOINTS),
        )
        for subset, descriptor in table.items()
    }
)


def _to_resource(resource: Resource | str) -> Resource | None:
    try:
        return Resource(resource)
    except ValueError:
        return None


def get_descriptor(resource: Resource | str, subset: str) -> EndpointDescriptor:
    """Look up the descriptor for ``(resource, subset)``."""

    key = _to_resource(resource)
    descriptor = ENDPOINTS.get((key, subset)) if key is not None else None
    if descriptor is None:
        resource_name = key.value if key is not None else str(resource)
        raise InvalidEndpointError(
            f"Invalid endpoint subset specified: {resource_name}/{subset}",
            resource=resource_name,
            subset=subset,
        )
    return descriptor


def subsets_for(resource: Resource | str) -> tuple[str, ...]:
    key = _to_resource(resource)
    return tuple(subset for (owner, subset) in ENDPOINTS if owner == key)


__all__ = [
    "ENDPOINTS",
    "get_descriptor",
    "subsets_for",
]
