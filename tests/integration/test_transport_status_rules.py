from __future__ import annotations

import httpx
import pytest

from librariesio_client.config import LibrariesIOConfig, TransportConfig
from librariesio_client.core.errors import LibrariesIOClientClosedError, RateLimitExceededError
from librariesio_client.core.transport import SyncTransport
from librariesio_client.endpoints.descriptors import HttpMethod
from tests.shared.transport import VALID_API_KEY, build_config, json_response, mock_transport


def _transport(steps, **config_kwargs):
    http_transport, handler = mock_transport(steps)
    transport = SyncTransport(
        build_config(**config_kwargs),
        api_key=VALID_API_KEY,
        http_transport=http_transport,
    )
    return transport, handler


@pytest.mark.parametrize("status_code", [200, 201, 204, 301, 304])
def test_non_error_statuses_are_returned(status_code):
    transport, _ = _transport([httpx.Response(status_code)])
    response = transport.request("GET", "platforms")
    assert response.status_code == status_code
    transport.close()


@pytest.mark.parametrize("status_code", [400, 401, 403, 404, 422, 500, 502, 503])
def test_error_statuses_other_than_429_propagate_unchanged(status_code):
    transport, handler = _transport([json_response(status_code, {"error": "x"})])
    with pytest.raises(httpx.HTTPStatusError) as excinfo:
        transport.request("GET", "platforms")
    assert excinfo.value.response.status_code == status_code
    assert not isinstance(excinfo.value, RateLimitExceededError)
    assert handler.calls == 1
    transport.close()


def test_429_is_mapped_and_not_retried(debug_logs):
    transport, handler = _transport(
        [
            json_response(
                429,
                {"error": "rate"},
                headers={"x-ratelimit-limit": "60", "x-ratelimit-remaining": "0"},
            )
        ]
    )
    with pytest.raises(RateLimitExceededError) as excinfo:
        transport.request("GET", "platforms")
    assert excinfo.value.rate_limit.reset == ""
    assert handler.calls == 1
    assert "rate limit exceeded" in debug_logs.text
    transport.close()


def test_network_errors_propagate_unchanged():
    transport, handler = _transport([httpx.ConnectError("network down")])
    with pytest.raises(httpx.ConnectError):
        transport.request("GET", "platforms")
    assert handler.calls == 1
    transport.close()


def test_timeouts_propagate_unchanged():
    transport, _ = _transport([httpx.ReadTimeout("slow")])
    with pytest.raises(httpx.ReadTimeout):
        transport.request("GET", "platforms")
    transport.close()


def test_api_key_is_injected_and_cannot_be_overridden():
    transport, handler = _transport([httpx.Response(200)])
    transport.request("GET", "/search", params={"q": "grunt", "api_key": "spoofed"})
    params = handler.last_request.url.params
    assert params["api_key"] == VALID_API_KEY
    assert params["q"] == "grunt"
    assert handler.last_request.url.path == "/api/search"
    transport.close()


@pytest.mark.parametrize(
    ("method", "expected"),
    [(HttpMethod.DELETE, "DELETE"), ("post", "POST"), ("put", "PUT"), ("PATCH", "GET")],
)
def test_methods_are_normalized(method, expected):
    transport, handler = _transport([httpx.Response(200)])
    transport.request(method, "subscriptions/npm/grunt")
    assert handler.last_request.method == expected
    transport.close()


def test_client_is_built_lazily_and_reused():
    transport, handler = _transport([httpx.Response(200), httpx.Response(200)])
    assert transport._client is None
    transport.request("GET", "platforms")
    first_client = transport._client
    transport.request("GET", "platforms")
    assert transport._client is first_client
    assert handler.calls == 2
    transport.close()


def test_unwritable_cache_dir_silently_disables_cache(tmp_path):
    transport, handler = _transport(
        [httpx.Response(200, json={}), httpx.Response(200, json={})],
        cache_dir=tmp_path / "does-not-exist",
    )
    transport.request("GET", "platforms")
    transport.request("GET", "platforms")
    assert transport.cache is None
    assert handler.calls == 2
    transport.close()


def test_cache_is_not_used_for_writes(tmp_path):
    transport, handler = _transport(
        [httpx.Response(200, json={}), httpx.Response(200, json={})],
        cache_dir=tmp_path,
    )
    transport.request("POST", "subscriptions/npm/grunt")
    transport.request("POST", "subscriptions/npm/grunt")
    assert transport.cache is not None
    assert handler.calls == 2
    transport.close()


def test_error_responses_are_not_cached(tmp_path):
    transport, handler = _transport(
        [json_response(404, {}), json_response(200, {"ok": True})],
        cache_dir=tmp_path,
    )
    with pytest.raises(httpx.HTTPStatusError):
        transport.request("GET", "github/ghost")
    assert transport.request("GET", "github/ghost").json() == {"ok": True}
    assert handler.calls == 2
    transport.close()


def test_closed_transport_rejects_requests():
    transport, handler = _transport([])
    transport.close()
    with pytest.raises(LibrariesIOClientClosedError):
        transport.request("GET", "platforms")
    assert handler.calls == 0


def test_client_options_headers_are_passed_through():
    http_transport, handler = mock_transport([httpx.Response(200)])
    config = LibrariesIOConfig(
        transport=TransportConfig(client_options={"headers": {"X-Test": "1"}}),
    )
    transport = SyncTransport(config, api_key=VALID_API_KEY, http_transport=http_transport)
    transport.request("GET", "platforms")
    assert handler.last_request.headers["X-Test"] == "1"
    assert handler.last_request.headers["Accept"] == "application/json"
    transport.close()


def test_cache_is_decided_when_transport_is_built(tmp_path, debug_logs):
    enabled, _ = _transport([], cache_dir=tmp_path)
    assert enabled.cache is not None
    assert enabled._client is None
    enabled.close()

    disabled, handler = _transport([], cache_dir=tmp_path / "missing")
    assert disabled.cache is None
    assert "response cache disabled" in debug_logs.text
    assert handler.calls == 0
    disabled.close()
