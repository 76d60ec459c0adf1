"""Pydantic models for API response validation.

This module contains pydantic models for validating JSON responses from the IPLocate API:
- Lookup responses (geolocation, network, privacy, company, hosting, abuse)
- Error responses (non-200 status codes)
"""

from .api_error import ApiErrorResponse
from .lookup import ASN, Abuse, Company, Hosting, LookupResponse, Privacy

__all__ = [
    'ASN',
    'Abuse',
    'ApiErrorResponse',
    'Company',
    'Hosting',
    'LookupResponse',
    'Privacy',
]
