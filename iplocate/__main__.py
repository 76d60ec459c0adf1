"""Command-line demonstration of the IPLocate client.

Usage:
    python -m iplocate                 # look up your own IP address
    python -m iplocate 8.8.8.8         # look up a specific address
    python -m iplocate 8.8.8.8 --json  # dump the raw response model
    python -m iplocate -v --log-file iplocate.log 8.8.8.8

Set the IPLOCATE_API_KEY environment variable (or pass --api-key) for the
higher rate limits of the authenticated tier.
"""
import argparse
import logging
import sys
from collections.abc import Sequence
from pathlib import Path

from rich.markup import escape

from iplocate.client import IPLocateClient
from iplocate.constants.standalone import DEFAULT_BASE_URL, DEFAULT_TIMEOUT, TITLE, VERSION
from iplocate.constants.standard import IPLOCATE_API_KEY
from iplocate.exceptions import IPLocateError
from iplocate.logging_setup import console, err_console, setup_logging
from iplocate.models import LookupResponse

NOT_AVAILABLE = '<not available>'

logger = logging.getLogger(__name__)


def _parse_args(argv: Sequence[str] | None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(prog='iplocate', description=f'{TITLE} IP geolocation and threat intelligence lookup.')
    parser.add_argument('ip', nargs='?', help='IPv4 or IPv6 address to look up (default: your own address)')
    parser.add_argument('--api-key', default=IPLOCATE_API_KEY, help='API key (default: $IPLOCATE_API_KEY)')
    parser.add_argument('--base-url', default=DEFAULT_BASE_URL, help=f'API base URL (default: {DEFAULT_BASE_URL})')
    parser.add_argument('--timeout', type=float, default=DEFAULT_TIMEOUT, help=f'request timeout in seconds (default: {DEFAULT_TIMEOUT:g})')
    parser.add_argument('--json', action='store_true', help='print the response as JSON')
    parser.add_argument('-v', '--verbose', action='store_true', help='log HTTP requests')
    parser.add_argument('--log-file', type=Path, help='also write DEBUG logs to this file')
    parser.add_argument('--version', action='version', version=f'%(prog)s {VERSION}')
    return parser.parse_args(argv)


def _print_section(title: str) -> None:
    console.print(f'\n[bold]=== {escape(title)} ===[/bold]')


def _print_field(label: str, value: object) -> None:
    if value is None:
        value = NOT_AVAILABLE
    elif isinstance(value, float):
        value = f'{value:.4f}'
    console.print(f'{label}: {escape(str(value))}')


def print_lookup_response(result: LookupResponse) -> None:
    """Print every field of a lookup result, grouped in sections."""
    _print_section('Basic Information')
    _print_field('IP Address', result.ip)
    _print_field('Country', result.country)
    _print_field('Country Code', result.country_code)
    _print_field('Is EU', result.is_eu)
    _print_field('City', result.city)
    _print_field('Continent', result.continent)
    _print_field('Subdivision', result.subdivision)
    _print_field('Postal Code', result.postal_code)

    _print_section('Location')
    _print_field('Latitude', result.latitude)
    _print_field('Longitude', result.longitude)
    _print_field('Time Zone', result.time_zone)
    _print_field('Currency Code', result.currency_code)
    _print_field('Calling Code', result.calling_code)

    _print_section('Network')
    _print_field('Network', result.network)
    if result.asn is not None:
        _print_field('ASN', result.asn.asn)
        _print_field('ASN Name', result.asn.name)
        _print_field('ASN Netname', result.asn.netname)
        _print_field('ASN Route', result.asn.route)
        _print_field('ASN Domain', result.asn.domain)
        _print_field('ASN Type', result.asn.type)
        _print_field('ASN Country Code', result.asn.country_code)
        _print_field('ASN RIR', result.asn.rir)
    else:
        _print_field('ASN', None)

    _print_section('Privacy & Security')
    _print_field('Is Abuser', result.privacy.is_abuser)
    _print_field('Is Anonymous', result.privacy.is_anonymous)
    _print_field('Is Bogon', result.privacy.is_bogon)
    _print_field('Is Hosting', result.privacy.is_hosting)
    _print_field('Is iCloud Relay', result.privacy.is_icloud_relay)
    _print_field('Is Proxy', result.privacy.is_proxy)
    _print_field('Is Tor', result.privacy.is_tor)
    _print_field('Is VPN', result.privacy.is_vpn)

    _print_section('Company')
    if result.company is not None:
        _print_field('Name', result.company.name)
        _print_field('Domain', result.company.domain)
        _print_field('Country Code', result.company.country_code)
        _print_field('Type', result.company.type)
    else:
        _print_field('Company', None)

    _print_section('Hosting')
    if result.hosting is not None:
        _print_field('Provider', result.hosting.provider)
        _print_field('Domain', result.hosting.domain)
        _print_field('Network', result.hosting.network)
        _print_field('Region', result.hosting.region)
        _print_field('Service', result.hosting.service)
    else:
        _print_field('Hosting', None)

    _print_section('Abuse Contact')
    if result.abuse is not None:
        _print_field('Name', result.abuse.name)
        _print_field('Email', result.abuse.email)
        _print_field('Phone', result.abuse.phone)
        _print_field('Address', result.abuse.address)
        _print_field('Network', result.abuse.network)
        _print_field('Country Code', result.abuse.country_code)
    else:
        _print_field('Abuse Contact', None)


def main(argv: Sequence[str] | None = None) -> int:
    """Run the lookup described by the command-line arguments and return the exit code."""
    args = _parse_args(argv)
    setup_logging(console_level=logging.DEBUG if args.verbose else logging.WARNING, log_file=args.log_file)

    client = IPLocateClient().with_base_url(args.base_url).with_timeout(args.timeout)
    if args.api_key:
        client.with_api_key(args.api_key)
        err_console.print('Using API key for enhanced rate limits')
    else:
        err_console.print('No API key provided - using the free tier')

    logger.debug('Looking up %s', args.ip if args.ip is not None else 'own address')
    with client:
        try:
            result = client.lookup(args.ip) if args.ip is not None else client.lookup_self()
        except IPLocateError as e:
            console.print(f'[red]Error looking up IP:[/red] {escape(str(e))}')
            return 1

    if args.json:
        console.print_json(result.model_dump_json())
    else:
        print_lookup_response(result)
    return 0


if __name__ == '__main__':
    sys.exit(main())
