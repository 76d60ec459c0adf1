"""Error message formatting functions.

This module contains functions for formatting error messages shared by the
exception classes and the command-line output.
"""
from urllib.parse import parse_qsl, urlencode, urlsplit, urlunsplit

from iplocate.constants.standalone import API_KEY_QUERY_PARAM, TITLE


def format_invalid_ip_message(ip: str) -> str:
    """Format the message for an address that is neither IPv4 nor IPv6."""
    return f'invalid IP address: {ip}'


def format_api_error_message(status_code: int, message: str) -> str:
    """Format an error message returned by the API.

    Args:
        status_code: The HTTP status code of the response.
        message: The `error` field decoded from the response body.

    Returns:
        The formatted error message.
    """
    return f'{TITLE} API error ({status_code}): {message}'


def format_unexpected_response_message(status_code: int, body: str) -> str:
    """Format the message for a failed response whose body could not be decoded.

    The body is included verbatim so that nothing the server said gets lost.
    """
    return f'API request failed ({status_code}): {body}'


def redact_api_key(url: str) -> str:
    """Return `url` with the value of the API key query parameter masked."""
    parts = urlsplit(url)
    if not parts.query:
        return url

    query = [
        (name, '***' if name == API_KEY_QUERY_PARAM else value)
        for name, value in parse_qsl(parts.query, keep_blank_values=True)
    ]
    return urlunsplit(parts._replace(query=urlencode(query, safe='*')))
