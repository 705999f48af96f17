from __future__ import annotations

import librariesio_client
import librariesio_client.endpoints as endpoints


def test_package_exports_clients_errors_and_accessors():
    expected = {
        "LibrariesIOClient",
        "AsyncLibrariesIOClient",
        "LibrariesIOConfig",
        "InvalidApiKeyError",
        "InvalidEndpointError",
        "InvalidEndpointOptionsError",
        "RateLimitExceededError",
        "RateLimitInfo",
        "raw",
        "parse_json",
        "to_object",
    }
    assert expected.issubset(set(librariesio_client.__all__))
    assert "SyncTransport" not in librariesio_client.__all__


def test_endpoints_package_exports_resolution_api():
    assert {
        "ENDPOINTS",
        "get_descriptor",
        "resolve_path",
        "resolve_endpoint",
        "build_query_params",
    }.issubset(set(endpoints.__all__))
