"""Path template substitution."""

from __future__ import annotations

from .descriptors import PAGINATION_OPTIONS, PLACEHOLDER_MARKER, OptionsMap


def _to_path_value(value: object) -> str:
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def render_path(template: str, options: OptionsMap) -> str:
    """Replace ``:key`` placeholders with option values.

    Keys are applied in the mapping's iteration order, one ``str.replace``
    per key. Keys with no placeholder in the template are no-ops.
    """

    if PLACEHOLDER_MARKER not in template:
        return template

    path = template
    for key, value in options.items():
        if key in PAGINATION_OPTIONS or value is None:
            continue
        path = path.replace(PLACEHOLDER_MARKER + key, _to_path_value(value))
    return path


__all__ = [
    "render_path",
]
