"""Client for the IPLocate.io geolocation and threat intelligence API.

Usage:
    client = IPLocateClient().with_api_key('...')
    result = client.lookup('8.8.8.8')

Every call performs exactly one GET request and either returns a
`LookupResponse` or raises a subclass of `IPLocateError`.
"""
import ipaddress
import logging
from types import TracebackType
from typing import Self
from urllib.parse import quote, urlsplit

import requests
from pydantic import ValidationError

from iplocate.constants.standalone import API_KEY_QUERY_PARAM, DEFAULT_BASE_URL, DEFAULT_TIMEOUT
from iplocate.error_messages import redact_api_key
from iplocate.exceptions import (
    APIError,
    InvalidEndpointURLError,
    InvalidIPAddressError,
    RequestFailedError,
    RequestTimeoutError,
    ResponseParseError,
    ResponseReadError,
    UnexpectedResponseError,
)
from iplocate.models import ApiErrorResponse, LookupResponse
from iplocate.networking.http_session import HEADERS, IPLocateSession, TimeoutType

logger = logging.getLogger(__name__)


class IPLocateClient:
    """IPLocate API client.

    Configuration is changed through the chainable `with_*` setters. They are
    not synchronized: fully configure a client before sharing it between threads.
    """

    def __init__(self, session: requests.Session | None = None) -> None:
        """Initialize the client.

        Args:
            session: HTTP transport to use. When omitted, a new `IPLocateSession`
                with a 30 second timeout is created and owned by the client.
        """
        self._owns_session = session is None
        self._session = IPLocateSession(timeout=DEFAULT_TIMEOUT) if session is None else session
        self._base_url = DEFAULT_BASE_URL
        self._api_key: str | None = None

    def __enter__(self) -> Self:
        return self

    def __exit__(self, exc_type: type[BaseException] | None, exc_value: BaseException | None, exc_traceback: TracebackType | None) -> None:
        self.close()

    @property
    def base_url(self) -> str:
        return self._base_url

    @property
    def api_key(self) -> str | None:
        return self._api_key

    @property
    def timeout(self) -> TimeoutType:
        return getattr(self._session, 'timeout', None)

    @property
    def session(self) -> requests.Session:
        return self._session

    def with_api_key(self, api_key: str | None) -> Self:
        """Set the API key sent with every subsequent request."""
        self._api_key = api_key or None
        return self

    def with_timeout(self, timeout: TimeoutType) -> Self:
        """Set the request timeout, in seconds, on the underlying session.

        The session may be shared, in which case every user of it is affected.
        """
        self._session.timeout = timeout  # type: ignore[attr-defined]
        return self

    def with_base_url(self, base_url: str) -> Self:
        """Set the API base URL, without its trailing slash."""
        self._base_url = base_url.removesuffix('/')
        return self

    def close(self) -> None:
        """Close the session if it was created by this client."""
        if self._owns_session:
            self._session.close()

    def lookup(self, ip: str) -> LookupResponse:
        """Return geolocation and threat intelligence data for the given IP address.

        Args:
            ip: An IPv4 or IPv6 address.

        Raises:
            InvalidIPAddressError: `ip` is not a valid address. No request is sent.
            IPLocateError: Any other failure, see `_do_request`.
        """
        if not isinstance(ip, str):
            raise InvalidIPAddressError(str(ip))
        try:
            address = ipaddress.ip_address(ip)
        except ValueError as e:
            raise InvalidIPAddressError(ip) from e
        if isinstance(address, ipaddress.IPv6Address) and address.scope_id is not None:
            raise InvalidIPAddressError(ip)

        return self._do_request(f'{self._base_url}/lookup/{quote(ip, safe="")}')

    def lookup_self(self) -> LookupResponse:
        """Return geolocation and threat intelligence data for the caller's own IP address."""
        return self._do_request(f'{self._base_url}/lookup/')

    def _do_request(self, endpoint: str) -> LookupResponse:
        """Perform the GET request to `endpoint` and decode the response.

        Raises:
            InvalidEndpointURLError: The endpoint URL is malformed (bad base URL).
            RequestTimeoutError: The request timed out.
            RequestFailedError: Any other transport failure.
            ResponseReadError: The response body could not be read.
            APIError: Non-200 status with an `{"error": ...}` body.
            UnexpectedResponseError: Non-200 status with any other body.
            ResponseParseError: 200 status with a body that is not a lookup result.
        """
        try:
            host = urlsplit(endpoint).hostname
        except ValueError as e:
            raise InvalidEndpointURLError(endpoint, str(e)) from e
        if not host:
            raise InvalidEndpointURLError(endpoint, f'no host in base URL {self._base_url!r}')

        params = {API_KEY_QUERY_PARAM: self._api_key} if self._api_key else None
        request = requests.Request('GET', endpoint, params=params, headers=HEADERS)

        try:
            prepared = self._session.prepare_request(request)
        except (requests.exceptions.MissingSchema, requests.exceptions.InvalidURL) as e:
            raise InvalidEndpointURLError(endpoint, str(e)) from e

        url = redact_api_key(prepared.url or endpoint)
        logger.debug('GET %s', url)

        # Proxies, CA bundle and client cert from the environment, as `Session.request` does.
        settings = self._session.merge_environment_settings(prepared.url, {}, True, None, None)  # noqa: FBT003

        try:
            response = self._session.send(prepared, timeout=self.timeout, **settings)
        except requests.exceptions.Timeout as e:
            raise RequestTimeoutError(url, str(e)) from e
        except (requests.exceptions.InvalidSchema, requests.exceptions.InvalidURL) as e:
            raise InvalidEndpointURLError(endpoint, str(e)) from e
        except requests.exceptions.RequestException as e:
            raise RequestFailedError(url, str(e)) from e

        with response:
            try:
                body = response.content
            except requests.exceptions.RequestException as e:
                raise ResponseReadError(url, f'failed to read response body: {e}') from e

            logger.debug('GET %s -> HTTP %d (%d bytes)', url, response.status_code, len(body))

            if response.status_code != requests.codes.ok:  # pylint: disable=no-member
                try:
                    api_error = ApiErrorResponse.model_validate_json(body)
                except ValidationError as e:
                    raise UnexpectedResponseError(response.status_code, body.decode('utf-8', errors='replace')) from e
                raise APIError(api_error.error, response.status_code)

        try:
            return LookupResponse.model_validate_json(body)
        except ValidationError as e:
            raise ResponseParseError(f'failed to parse response: {e}') from e
