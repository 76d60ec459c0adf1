"""HTTP session used by the IPLocate client."""
from typing import Any

import requests

from iplocate.constants.standalone import DEFAULT_TIMEOUT, USER_AGENT

HEADERS = {
    'User-Agent': USER_AGENT,
    'Accept': 'application/json',
}

TimeoutType = float | tuple[float, float] | None


class IPLocateSession(requests.Session):
    """A `requests.Session` with the client headers and a session-wide timeout.

    `requests` only accepts timeouts per call, so the session keeps one and
    applies it to every request that does not pass its own.
    """

    def __init__(self, timeout: TimeoutType = DEFAULT_TIMEOUT) -> None:
        super().__init__()
        self.timeout = timeout
        self.headers.update(HEADERS)

    def request(self, method: str | bytes, url: str | bytes, *args: Any, **kwargs: Any) -> requests.Response:  # noqa: ANN401
        """Send a request, defaulting to the session timeout."""
        kwargs.setdefault('timeout', self.timeout)
        return super().request(method, url, *args, **kwargs)
