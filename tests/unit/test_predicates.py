r"""Unit tests for ready-made retry predicates."""

from __future__ import annotations

import httpx
import pytest

from resultretry.predicates import (
    RETRY_STATUS_CODES,
    always_retry,
    is_retriable_http_error,
    never_retry,
    retry_on,
)


def make_status_error(status_code: int) -> httpx.HTTPStatusError:
    request = httpx.Request("GET", "https://example.com")
    response = httpx.Response(status_code, request=request)
    return httpx.HTTPStatusError(f"status {status_code}", request=request, response=response)


def test_always_retry() -> None:
    assert always_retry(ValueError())
    assert always_retry(None)


def test_never_retry() -> None:
    assert not never_retry(TimeoutError())


def test_retry_on() -> None:
    predicate = retry_on(TimeoutError, ConnectionError)

    assert predicate(TimeoutError())
    assert predicate(ConnectionResetError())
    assert not predicate(ValueError())
    assert not predicate("timeout")


def test_retry_on_requires_types() -> None:
    with pytest.raises(ValueError, match=r"at least one exception type"):
        retry_on()


def test_retry_status_codes() -> None:
    assert RETRY_STATUS_CODES == (429, 500, 502, 503, 504)


@pytest.mark.parametrize(
    "error",
    [
        httpx.ConnectTimeout("timed out"),
        httpx.ReadTimeout("timed out"),
        httpx.ConnectError("connection refused"),
        httpx.RemoteProtocolError("peer closed connection"),
    ],
)
def test_is_retriable_http_error_transport(error: Exception) -> None:
    assert is_retriable_http_error(error)


@pytest.mark.parametrize("status_code", RETRY_STATUS_CODES)
def test_is_retriable_http_error_retriable_status(status_code: int) -> None:
    assert is_retriable_http_error(make_status_error(status_code))


@pytest.mark.parametrize("status_code", [400, 401, 403, 404, 501])
def test_is_retriable_http_error_permanent_status(status_code: int) -> None:
    assert not is_retriable_http_error(make_status_error(status_code))


def test_is_retriable_http_error_custom_status_codes() -> None:
    assert is_retriable_http_error(make_status_error(409), status_codes=(409,))
    assert not is_retriable_http_error(make_status_error(503), status_codes=(409,))


@pytest.mark.parametrize("error", [ValueError("bad"), httpx.InvalidURL("bad url"), None])
def test_is_retriable_http_error_other_errors(error: object) -> None:
    assert not is_retriable_http_error(error)
