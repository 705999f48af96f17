"""Required option validation."""

from __future__ import annotations

from ..core.errors import InvalidEndpointOptionsError
from .descriptors import EndpointDescriptor, OptionsMap


def missing_options(descriptor: EndpointDescriptor, options: OptionsMap) -> tuple[str, ...]:
    return tuple(
        name
        for name in descriptor.required_options
        if options.get(name) is None
    )


def verify_endpoint_options(descriptor: EndpointDescriptor, options: OptionsMap) -> None:
    missing = missing_options(descriptor, options)
    if not missing:
        return
    raise InvalidEndpointOptionsError(
        "options has not specified all required parameters. Parameters needed: "
        + ", ".join(descriptor.required_options),
        required_options=descriptor.required_options,
        missing_options=missing,
    )


__all__ = [
    "missing_options",
    "verify_endpoint_options",
]
