from __future__ import annotations

import httpx
import pytest

from librariesio_client.core.errors import (
    InvalidApiKeyError,
    InvalidEndpointError,
    InvalidEndpointOptionsError,
    LibrariesIOError,
    LibrariesIOValidationError,
    RateLimitExceededError,
    RateLimitInfo,
    is_rate_limited,
)


def _status_error(status_code: int, headers: dict[str, str] | None = None) -> httpx.HTTPStatusError:
    request = httpx.Request("GET", "https://libraries.io/api/platforms")
    response = httpx.Response(status_code, headers=headers, request=request)
    return httpx.HTTPStatusError("error", request=request, response=response)


def test_rate_limit_info_reads_headers():
    info = RateLimitInfo.from_headers(
        httpx.Headers(
            {
                "X-RateLimit-Limit": "60",
                "X-RateLimit-Remaining": "0",
                "X-RateLimit-Reset": "",
            }
        )
    )
    assert info == RateLimitInfo(limit="60", remaining="0", reset="")


def test_rate_limit_info_defaults_to_empty_strings():
    assert RateLimitInfo.from_headers(None) == RateLimitInfo(limit="", remaining="", reset="")
    assert RateLimitInfo.from_headers({}) == RateLimitInfo(limit="", remaining="", reset="")


def test_rate_limit_error_exposes_response_and_info():
    status_error = _status_error(429, {"x-ratelimit-limit": "60", "x-ratelimit-remaining": "0"})
    err = RateLimitExceededError.from_status_error(status_error)
    assert err.response is status_error.response
    assert err.status_error is status_error
    assert err.rate_limit.limit == "60"
    assert err.rate_limit.remaining == "0"
    assert err.rate_limit.reset == ""
    assert "rate limit exceeded" in str(err)


def test_is_rate_limited_only_for_429():
    assert is_rate_limited(_status_error(429))
    assert not is_rate_limited(_status_error(403))


@pytest.mark.parametrize(
    "error_type",
    [InvalidApiKeyError, InvalidEndpointError, InvalidEndpointOptionsError],
)
def test_validation_errors_share_base(error_type):
    assert issubclass(error_type, LibrariesIOValidationError)
    assert issubclass(error_type, LibrariesIOError)


def test_rate_limit_error_is_not_validation_error():
    assert not issubclass(RateLimitExceededError, LibrariesIOValidationError)


def test_invalid_endpoint_options_error_normalizes_to_tuples():
    err = InvalidEndpointOptionsError(
        "missing",
        required_options=["platform", "name"],
        missing_options=["name"],
    )
    assert err.required_options == ("platform", "name")
    assert err.missing_options == ("name",)
