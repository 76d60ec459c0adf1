"""Tests for the exception hierarchy and error message formatting."""
import pytest

from iplocate import (
    APIError,
    InvalidEndpointURLError,
    InvalidIPAddressError,
    IPLocateError,
    RequestFailedError,
    RequestTimeoutError,
    ResponseParseError,
    ResponseReadError,
    UnexpectedResponseError,
)
from iplocate.error_messages import redact_api_key


def test_api_error_message():
    err = APIError('Rate limit exceeded', 429)

    assert str(err) == 'IPLocate API error (429): Rate limit exceeded'
    assert err.message == 'Rate limit exceeded'
    assert err.status_code == 429


def test_unexpected_response_message():
    err = UnexpectedResponseError(502, 'Bad Gateway')

    assert str(err) == 'API request failed (502): Bad Gateway'
    assert err.status_code == 502
    assert err.body == 'Bad Gateway'


def test_invalid_ip_message():
    assert str(InvalidIPAddressError('invalid-ip')) == 'invalid IP address: invalid-ip'


@pytest.mark.parametrize(('exc_type', 'parents'), [
    (InvalidIPAddressError, (IPLocateError, ValueError)),
    (InvalidEndpointURLError, (IPLocateError, ValueError)),
    (RequestFailedError, (IPLocateError,)),
    (RequestTimeoutError, (RequestFailedError,)),
    (ResponseReadError, (RequestFailedError,)),
    (APIError, (IPLocateError,)),
    (ResponseParseError, (IPLocateError,)),
    (UnexpectedResponseError, (ResponseParseError,)),
])
def test_hierarchy(exc_type, parents):
    assert issubclass(exc_type, parents)


def test_remote_and_local_errors_are_distinct():
    assert not issubclass(APIError, RequestFailedError)
    assert not issubclass(APIError, ResponseParseError)
    assert not issubclass(InvalidIPAddressError, RequestFailedError)


@pytest.mark.parametrize(('url', 'expected'), [
    ('https://iplocate.io/api/lookup/8.8.8.8', 'https://iplocate.io/api/lookup/8.8.8.8'),
    ('https://iplocate.io/api/lookup/?apikey=secret', 'https://iplocate.io/api/lookup/?apikey=***'),
    ('https://x.com/lookup/1.1.1.1?a=1&apikey=secret', 'https://x.com/lookup/1.1.1.1?a=1&apikey=***'),
])
def test_redact_api_key(url, expected):
    assert redact_api_key(url) == expected
