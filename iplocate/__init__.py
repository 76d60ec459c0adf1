"""Python client for the IPLocate.io API.

IPLocate.io provides IP geolocation and threat intelligence data: location,
network ownership (ASN), privacy flags (VPN, proxy, Tor...), company, hosting
and abuse contact information.
"""

from iplocate.client import IPLocateClient
from iplocate.constants.standalone import DEFAULT_BASE_URL, DEFAULT_TIMEOUT, VERSION
from iplocate.exceptions import (
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
from iplocate.models import ASN, Abuse, ApiErrorResponse, Company, Hosting, LookupResponse, Privacy
from iplocate.networking.http_session import IPLocateSession

__version__ = VERSION

__all__ = [
    'ASN',
    'DEFAULT_BASE_URL',
    'DEFAULT_TIMEOUT',
    'APIError',
    'Abuse',
    'ApiErrorResponse',
    'Company',
    'Hosting',
    'IPLocateClient',
    'IPLocateError',
    'IPLocateSession',
    'InvalidEndpointURLError',
    'InvalidIPAddressError',
    'LookupResponse',
    'Privacy',
    'RequestFailedError',
    'RequestTimeoutError',
    'ResponseParseError',
    'ResponseReadError',
    'UnexpectedResponseError',
    '__version__',
]
