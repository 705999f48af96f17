"""Query parameters for project search."""

from __future__ import annotations

from .descriptors import OptionValue, OptionsMap

DEFAULT_SORT = "rank"
SORT_OPTIONS = frozenset(
    {
        "rank",
        "stars",
        "dependents_count",
        "dependent_repos_count",
        "latest_release_published_at",
        "contributions_count",
        "created_at",
    }
)
SEARCH_FACETS = ("languages", "licenses", "keywords", "platforms")


def verify_sort_option(sort: object) -> str:
    if isinstance(sort, str) and sort in SORT_OPTIONS:
        return sort
    return DEFAULT_SORT


def search_facet_params(options: OptionsMap) -> dict[str, OptionValue]:
    return {
        name: options[name]
        for name in SEARCH_FACETS
        if options.get(name) is not None
    }


def build_search_params(options: OptionsMap) -> dict[str, OptionValue]:
    params: dict[str, OptionValue] = {
        "q": options["query"],
        "sort": verify_sort_option(options.get("sort")),
    }
    params.update(search_facet_params(options))
    return params


__all__ = [
    "DEFAULT_SORT",
    "SORT_OPTIONS",
    "SEARCH_FACETS",
    "verify_sort_option",
    "search_facet_params",
    "build_search_params",
]
