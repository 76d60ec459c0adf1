"""IPLocate custom exceptions.

Every failure of a lookup surfaces as one of these classes. They all derive
from `IPLocateError`, so callers can catch the whole family at once or branch
on the concrete kind (e.g. `APIError.status_code == 429` for rate limiting).
"""
from iplocate.error_messages import (
    format_api_error_message,
    format_invalid_ip_message,
    format_unexpected_response_message,
)


class IPLocateError(Exception):
    """Base exception for all IPLocate client errors."""


class InvalidIPAddressError(IPLocateError, ValueError):
    """Raised when the address to look up is not a valid IPv4 or IPv6 address.

    Detected locally, before any request is sent.
    """

    def __init__(self, ip: str) -> None:
        """Initialize the exception with the rejected address.

        Args:
            ip: The invalid IP address that caused the error.
        """
        self.ip = ip
        super().__init__(format_invalid_ip_message(ip))


class InvalidEndpointURLError(IPLocateError, ValueError):
    """Raised when the endpoint URL cannot be built from the configured base URL."""

    def __init__(self, url: str, reason: str) -> None:
        """Initialize the exception with the offending URL."""
        self.url = url
        super().__init__(f'failed to parse endpoint URL {url!r}: {reason}')


class RequestFailedError(IPLocateError):
    """Raised when the HTTP request could not be completed (connection, DNS, TLS...)."""

    def __init__(self, url: str, reason: str) -> None:
        """Initialize the exception with the requested URL and the transport error."""
        self.url = url
        super().__init__(f'request failed: {reason}')


class RequestTimeoutError(RequestFailedError):
    """Raised when the request did not complete within the configured timeout."""


class ResponseReadError(RequestFailedError):
    """Raised when a response was received but its body could not be fully read."""


class APIError(IPLocateError):
    """Raised when the API answers with a non-200 status and a decodable error message."""

    def __init__(self, message: str, status_code: int) -> None:
        """Initialize the exception with the decoded message and the HTTP status code.

        Args:
            message: The `error` field of the response body.
            status_code: The HTTP status code of the response.
        """
        self.message = message
        self.status_code = status_code
        super().__init__(format_api_error_message(status_code, message))


class ResponseParseError(IPLocateError):
    """Raised when a response body does not match the expected shape."""


class UnexpectedResponseError(ResponseParseError):
    """Raised when a non-200 response carries a body that is not an API error record."""

    def __init__(self, status_code: int, body: str) -> None:
        """Initialize the exception with the raw status code and body text."""
        self.status_code = status_code
        self.body = body
        super().__init__(format_unexpected_response_message(status_code, body))
