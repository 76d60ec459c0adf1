"""Module for defining constants that don't require imports or functions, using only pure Python."""

TITLE = 'IPLocate'
VERSION = '1.0.0'
DEFAULT_BASE_URL = 'https://iplocate.io/api'
DEFAULT_TIMEOUT = 30.0
USER_AGENT = f'python-iplocate/{VERSION}'
API_KEY_QUERY_PARAM = 'apikey'
