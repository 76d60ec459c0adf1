"""Shared fixtures: a local HTTP server standing in for the IPLocate API."""
import json
import threading
import time
from collections.abc import Iterator
from dataclasses import dataclass, field
from email.message import Message
from http.server import BaseHTTPRequestHandler, ThreadingHTTPServer
from urllib.parse import parse_qs, urlsplit

import pytest

from iplocate import IPLocateClient


@dataclass(slots=True)
class RecordedRequest:
    """A request received by the mock API server."""

    method: str
    raw_path: str
    headers: Message

    @property
    def path(self) -> str:
        return urlsplit(self.raw_path).path

    @property
    def query(self) -> dict[str, list[str]]:
        return parse_qs(urlsplit(self.raw_path).query, keep_blank_values=True)


@dataclass(slots=True)
class MockAPIServer:
    """Canned-response HTTP server recording every request it receives."""

    url: str = ''
    status: int = 200
    body: bytes = b'{}'
    content_type: str = 'application/json'
    delay: float = 0.0
    requests: list[RecordedRequest] = field(default_factory=list)

    def respond(self, status: int, body: object, content_type: str = 'application/json') -> None:
        """Set the response returned to every following request.

        `body` is sent as-is when it is `str`/`bytes`, JSON-encoded otherwise.
        """
        if isinstance(body, str):
            body = body.encode('utf-8')
        elif not isinstance(body, bytes):
            body = json.dumps(body).encode('utf-8')
        self.status = status
        self.body = body
        self.content_type = content_type


class _Handler(BaseHTTPRequestHandler):
    server: '_Server'

    def do_GET(self) -> None:  # noqa: N802
        api = self.server.api
        api.requests.append(RecordedRequest('GET', self.path, self.headers))

        if api.delay:
            time.sleep(api.delay)

        self.send_response(api.status)
        self.send_header('Content-Type', api.content_type)
        self.send_header('Content-Length', str(len(api.body)))
        self.end_headers()
        self.wfile.write(api.body)

    def log_message(self, format: str, *args: object) -> None:  # noqa: A002
        pass


class _Server(ThreadingHTTPServer):
    daemon_threads = True

    def __init__(self, api: MockAPIServer) -> None:
        super().__init__(('127.0.0.1', 0), _Handler)
        self.api = api

    def handle_error(self, request: object, client_address: object) -> None:
        # Clients that gave up (timeout tests) leave broken pipes behind.
        pass


@pytest.fixture
def api_server() -> Iterator[MockAPIServer]:
    api = MockAPIServer()
    server = _Server(api)
    host, port = server.server_address[:2]
    api.url = f'http://{host}:{port}'

    thread = threading.Thread(target=server.serve_forever, daemon=True)
    thread.start()
    try:
        yield api
    finally:
        server.shutdown()
        server.server_close()


@pytest.fixture
def client(api_server: MockAPIServer) -> Iterator[IPLocateClient]:
    with IPLocateClient().with_base_url(api_server.url).with_timeout(5) as client:
        yield client


@pytest.fixture
def google_dns_payload() -> dict[str, object]:
    return {
        'ip': '8.8.8.8',
        'country': 'United States',
        'country_code': 'US',
        'is_eu': False,
        'city': 'Mountain View',
        'continent': 'North America',
        'latitude': 37.386,
        'longitude': -122.0838,
        'time_zone': 'America/Los_Angeles',
        'postal_code': '94035',
        'subdivision': 'California',
        'currency_code': 'USD',
        'calling_code': '1',
        'network': '8.8.8.0/24',
        'asn': {
            'asn': 'AS15169',
            'route': '8.8.8.0/24',
            'netname': 'GOOGLE',
            'name': 'Google LLC',
            'country_code': 'US',
            'domain': 'google.com',
            'type': 'hosting',
            'rir': 'ARIN',
        },
        'privacy': {
            'is_abuser': False,
            'is_anonymous': False,
            'is_bogon': False,
            'is_hosting': True,
            'is_icloud_relay': False,
            'is_proxy': False,
            'is_tor': False,
            'is_vpn': False,
        },
        'company': {
            'name': 'Google LLC',
            'domain': 'google.com',
            'country_code': 'US',
            'type': 'hosting',
        },
        'hosting': {
            'provider': 'Google',
            'domain': 'google.com',
            'network': '8.8.8.0/24',
            'region': None,
            'service': None,
        },
        'abuse': {
            'address': '1600 Amphitheatre Parkway, Mountain View, CA 94043, US',
            'country_code': 'US',
            'email': 'network-abuse@google.com',
            'name': 'Abuse',
            'network': '8.8.8.0 - 8.8.8.255',
            'phone': '+1-650-253-0000',
        },
    }
