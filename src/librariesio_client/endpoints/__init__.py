"""Endpoint table and request shaping."""

from .descriptors import EndpointDescriptor, HttpMethod, Resource, ResolvedEndpoint
from .resolver import build_query_params, resolve_endpoint, resolve_path
from .table import ENDPOINTS, get_descriptor

__all__ = [
    "EndpointDescriptor",
    "HttpMethod",
    "Resource",
    "ResolvedEndpoint",
    "ENDPOINTS",
    "get_descriptor",
    "resolve_path",
    "resolve_endpoint",
    "build_query_params",
]
